from enum import Enum
from typing import Any, List, NamedTuple, Optional

from fundme.constants import VERIFICATION_CONFIRMATIONS
from fundme.networks import NetworkContext, classify
from fundme.params import ContractHandle


class VerificationStatus(Enum):
    VERIFIED = "verified"
    SKIPPED = "skipped"
    FAILED = "failed"


class VerificationResult(NamedTuple):
    status: VerificationStatus
    reason: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == VerificationStatus.FAILED


def publish_source(explorer, handle: ContractHandle, constructor_args: List[Any]) -> None:
    """
    Submits a deployed contract to the block explorer for source verification.
    The constructor arguments are only displayed; ape-etherscan re-derives the
    encoded arguments from the creation transaction.
    """
    print(f"(i) Verifying {handle.name} at {handle.address}...")
    if constructor_args:
        print(f"Constructor arguments: {constructor_args}")
    explorer.publish_contract(handle.address)


def verify_deployment(
    handle: ContractHandle,
    constructor_args: List[Any],
    context: NetworkContext,
    provider,
    explorer,
    confirmations: int = VERIFICATION_CONFIRMATIONS,
) -> VerificationResult:
    """
    Verifies the source of a fresh deployment on the block explorer, when the
    network calls for it. Verification is best-effort: failures are reported
    in the result and never raised, so later steps of the run carry on.
    """
    if not classify(context):
        print("verification skipped..")
        return VerificationResult(
            VerificationStatus.SKIPPED, "network does not require verification"
        )

    if handle.receipt is None:
        reason = f"no deployment transaction known for {handle.address}"
        print(f"WARNING: Verification failed; {reason}.")
        return VerificationResult(VerificationStatus.FAILED, reason)

    if explorer is None:
        reason = f"no block explorer configured for {context.network_name}"
        print(f"WARNING: Verification failed; {reason}.")
        return VerificationResult(VerificationStatus.FAILED, reason)

    # A failed confirmation wait is fatal to the run; only the submission is best-effort
    print(f"Waiting for {confirmations} block confirmations...")
    provider.get_receipt(handle.receipt.txn_hash, required_confirmations=confirmations)

    try:
        publish_source(explorer, handle, constructor_args)
    except Exception as e:
        print(f"WARNING: Verification of {handle.name} failed: {e}")
        return VerificationResult(VerificationStatus.FAILED, str(e))

    print(f"(i) {handle.name} verified.")
    return VerificationResult(VerificationStatus.VERIFIED)
