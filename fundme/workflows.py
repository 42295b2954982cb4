from collections import OrderedDict
from typing import Optional, Sequence, Tuple

from ape.contracts import ContractContainer

from fundme.constants import LOCK_TIME_PARAMETER
from fundme.funding import FundingReport, SignerRole, fund
from fundme.params import ContractHandle, Deployer
from fundme.verification import VerificationResult, verify_deployment


def lock_time_params(lock_time: int) -> OrderedDict:
    return OrderedDict([(LOCK_TIME_PARAMETER, lock_time)])


def deploy_and_verify(
    deployer: Deployer,
    container: ContractContainer,
    provider,
    explorer,
    params: Optional[OrderedDict] = None,
) -> Tuple[ContractHandle, VerificationResult]:
    """Deploys a contract, then verifies it when the network calls for it."""
    handle = deployer.deploy(container, params)
    if params is None:
        constructor_args = deployer.constructor_args(handle.name)
    else:
        constructor_args = list(params.values())
    result = verify_deployment(
        handle=handle,
        constructor_args=constructor_args,
        context=deployer.context,
        provider=provider,
        explorer=explorer,
    )
    return handle, result


def deploy_and_interact(
    deployer: Deployer,
    container: ContractContainer,
    params: OrderedDict,
    signers: Sequence[SignerRole],
    amount: int,
    provider,
    explorer,
) -> Tuple[ContractHandle, VerificationResult, FundingReport]:
    handle, result = deploy_and_verify(
        deployer=deployer,
        container=container,
        provider=provider,
        explorer=explorer,
        params=params,
    )
    report = fund(handle=handle, signers=signers, amount=amount, provider=provider)
    return handle, result, report


def attach_and_interact(
    container: ContractContainer,
    address: str,
    signers: Sequence[SignerRole],
    amount: int,
    provider,
) -> Tuple[ContractHandle, FundingReport]:
    handle = ContractHandle.attach(container, address)
    print(f"(i) Attached to {handle.name} at {handle.address}")
    report = fund(handle=handle, signers=signers, amount=amount, provider=provider)
    return handle, report
