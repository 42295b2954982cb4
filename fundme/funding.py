from collections import OrderedDict
from typing import Iterable, List, NamedTuple, Sequence

from ape import accounts
from ape.api import AccountAPI, ReceiptAPI
from eth_typing import ChecksumAddress

from fundme.constants import SIGNER_LABELS
from fundme.networks import NetworkContext, is_local_network
from fundme.params import ContractHandle
from fundme.utils import DeploymentConfigError, format_ether


class FundingError(RuntimeError):
    pass


class SignerRole(NamedTuple):
    label: str
    account: AccountAPI

    @property
    def address(self) -> ChecksumAddress:
        return self.account.address


class FundingStep(NamedTuple):
    role: SignerRole
    amount: int
    receipt: ReceiptAPI
    balance_after: int


class FundingReport(NamedTuple):
    steps: List[FundingStep]
    funded_amounts: "OrderedDict[ChecksumAddress, int]"

    @property
    def final_balance(self) -> int:
        return self.steps[-1].balance_after


def _label(index: int) -> str:
    if index < len(SIGNER_LABELS):
        return SIGNER_LABELS[index]
    return f"account-{index}"


def label_signers(signers: Iterable[AccountAPI]) -> List[SignerRole]:
    """Pairs each signer with a role label, in order."""
    return [SignerRole(label=_label(i), account=account) for i, account in enumerate(signers)]


def load_signers(
    context: NetworkContext, aliases: Sequence[str] = (), count: int = 2
) -> List[SignerRole]:
    """
    Loads the funding accounts: the given keyfile aliases, or on a local
    network the first `count` test accounts.
    """
    if aliases:
        return label_signers(accounts.load(alias) for alias in aliases)
    if not is_local_network(context):
        raise DeploymentConfigError("Must specify signer aliases when funding on live networks")
    available = min(count, len(accounts.test_accounts))
    return label_signers(accounts.test_accounts[i] for i in range(available))


def read_balance(handle: ContractHandle, provider) -> int:
    return int(provider.get_balance(handle.address))


def read_funded_amount(handle: ContractHandle, address: ChecksumAddress) -> int:
    return int(handle.contract.fundersToAmount(address))


def read_funded_amounts(
    handle: ContractHandle, signers: Iterable[SignerRole]
) -> "OrderedDict[ChecksumAddress, int]":
    funded_amounts = OrderedDict()
    for role in signers:
        funded_amounts[role.address] = read_funded_amount(handle, role.address)
    return funded_amounts


def fund_from(handle: ContractHandle, role: SignerRole, amount: int, provider) -> FundingStep:
    """Funds the contract from one signer and waits for the transaction to be final."""
    print(f"{role.label.capitalize()} account: {role.address}")
    receipt = handle.contract.fund(value=amount, sender=role.account)
    receipt = receipt.await_confirmations()
    if receipt.failed:
        raise FundingError(f"Funding from {role.address} failed in transaction {receipt.txn_hash}.")

    balance = read_balance(handle, provider)
    print(f"Balance of contract after {role.label} funding: {format_ether(balance)}")
    return FundingStep(role=role, amount=amount, receipt=receipt, balance_after=balance)


def fund(
    handle: ContractHandle, signers: Sequence[SignerRole], amount: int, provider
) -> FundingReport:
    """
    Funds the contract from each signer in turn, then reads back how much
    each of them has funded in total.
    """
    if not signers:
        raise FundingError("No signer accounts available for funding.")
    print(f"Available signers: {len(signers)}")

    steps = list()
    for role in signers:
        # the next funding is only submitted once the previous one is final
        steps.append(fund_from(handle, role, amount, provider))

    if len(signers) == 1:
        print("Only one account available, skipping second account funding")

    funded_amounts = read_funded_amounts(handle, signers)
    for role in signers:
        funded = format_ether(funded_amounts[role.address])
        print(f"{role.label.capitalize()} account funded: {funded}")

    return FundingReport(steps=steps, funded_amounts=funded_amounts)
