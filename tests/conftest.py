from pathlib import Path

import pytest
from ape.contracts import ContractContainer
from ethpm_types import ContractType

from fundme.constants import SEPOLIA_CHAIN_ID
from fundme.funding import label_signers
from fundme.networks import NetworkContext
from fundme.params import Deployer
from fundme.workflows import lock_time_params

# Common constants
ONE_ETHER = 10**18
HALF_ETHER = ONE_ETHER // 2
MAINNET_CHAIN_ID = 1
LOCAL_CHAIN_ID = 1337
LOCK_TIME = 300

# Storage slot of the FundMe test contract's lock time
LOCK_TIME_SLOT = 1

# Minimal FundMe (constructor(uint256 _lockTime), fund(), fundersToAmount(address)),
# so the suite runs on ape's local test chain without a Solidity compiler
FUNDME_CONTRACT_TYPE_FILEPATH = Path(__file__).parent / "contracts" / "FundMe.json"


def make_address(n: int) -> str:
    return "0x" + f"{n:040d}"


def lock_time_of(provider, handle) -> int:
    return int.from_bytes(provider.get_storage(handle.address, LOCK_TIME_SLOT), "big")


class ConfirmationRecorder:
    """
    Real provider, except that confirmation waits are recorded instead of
    mined through, since the local chain only advances on transactions.
    """

    def __init__(self, provider, error=None):
        self._provider = provider
        self.error = error
        self.log = []

    def get_receipt(self, txn_hash, required_confirmations=0, **kwargs):
        if self.error:
            raise self.error
        self.log.append(("wait", txn_hash, required_confirmations))
        return self._provider.get_receipt(txn_hash)

    def __getattr__(self, name):
        return getattr(self._provider, name)


class FakeExplorer:
    def __init__(self, recorder=None, error=None):
        self._recorder = recorder
        self.error = error
        self.published = []

    def publish_contract(self, address):
        if self.error:
            raise self.error
        if self._recorder is not None:
            self._recorder.log.append(("publish", address))
        self.published.append(address)


# Fixtures
@pytest.fixture(scope="session")
def fund_me_container():
    contract_type = ContractType.model_validate_json(FUNDME_CONTRACT_TYPE_FILEPATH.read_text())
    return ContractContainer(contract_type)


@pytest.fixture
def provider(networks):
    return networks.provider


@pytest.fixture
def confirmations(provider):
    return ConfirmationRecorder(provider)


@pytest.fixture
def local_context(provider):
    return NetworkContext.from_provider(provider, environ={})


@pytest.fixture
def sepolia_context():
    return NetworkContext(
        chain_id=SEPOLIA_CHAIN_ID, network_name="sepolia", has_verification_credential=True
    )


@pytest.fixture
def mainnet_context():
    return NetworkContext(
        chain_id=MAINNET_CHAIN_ID, network_name="mainnet", has_verification_credential=True
    )


@pytest.fixture
def creator(accounts):
    return accounts[0]


@pytest.fixture
def funders(accounts):
    return [accounts[1], accounts[2], accounts[3]]


@pytest.fixture
def signers(funders):
    return label_signers(funders[:2])


@pytest.fixture
def deployer(creator, local_context):
    return Deployer(account=creator, context=local_context, autosign=True)


@pytest.fixture
def fund_me(deployer, fund_me_container):
    return deployer.deploy(fund_me_container, lock_time_params(LOCK_TIME))
