import typing
from collections import OrderedDict
from pathlib import Path
from typing import Any, List, NamedTuple, Optional

from ape.api import AccountAPI, ReceiptAPI
from ape.contracts.base import ContractContainer, ContractInstance
from ape_accounts import KeyfileAccount
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from fundme.confirm import _confirm_resolution, _continue
from fundme.networks import NetworkContext, is_local_network
from fundme.registry import registry_from_handles
from fundme.utils import DeploymentConfigError, _load_yaml, check_etherscan_plugin, validate_config

CONTRACT_CONSTRUCTOR_PARAMETER_KEY = "constructor"


class DeploymentError(RuntimeError):
    pass


class ContractHandle(NamedTuple):
    """A deployed (or attached) contract plus the transaction that created it, if known."""

    address: ChecksumAddress
    receipt: Optional[ReceiptAPI]
    contract: ContractInstance

    @property
    def name(self) -> str:
        return self.contract.contract_type.name

    @classmethod
    def attach(cls, container: ContractContainer, address: str) -> "ContractHandle":
        address = to_checksum_address(address)
        return cls(address=address, receipt=None, contract=container.at(address))


def _get_contract_names(config: typing.Dict) -> List[str]:
    contract_names = list()
    for contract_info in config["contracts"]:
        if isinstance(contract_info, str):
            contract_names.append(contract_info)
        elif isinstance(contract_info, dict):
            if len(contract_info) != 1:
                raise DeploymentConfigError(f"Invalid contract entry: {contract_info}")
            contract_names.append(list(contract_info.keys())[0])
        else:
            raise DeploymentConfigError(f"Malformed contract entry: {contract_info}")
    return contract_names


class ConstructorParameters:
    """Represents the constructor parameters for a set of contracts."""

    def __init__(self, parameters: OrderedDict):
        self.parameters = parameters

    @classmethod
    def from_config(cls, config: typing.Dict) -> "ConstructorParameters":
        contract_names = _get_contract_names(config)
        parameters = OrderedDict()
        for contract_info in config["contracts"]:
            if isinstance(contract_info, str):
                continue
            contract_name, contract_data = list(contract_info.items())[0]
            contract_data = contract_data or dict()
            constructor = contract_data.get(CONTRACT_CONSTRUCTOR_PARAMETER_KEY) or dict()
            parameters[contract_name] = OrderedDict(constructor)
        for contract_name in contract_names:
            parameters.setdefault(contract_name, OrderedDict())
        return cls(parameters)

    def resolve(self, contract_name: str) -> OrderedDict:
        try:
            return self.parameters[contract_name]
        except KeyError:
            raise DeploymentConfigError(f"No parameters for contract '{contract_name}'.")


class Deployer:
    """
    Represents an ape account plus the network it deploys to and,
    optionally, the deployment parameters loaded from a params file.
    """

    def __init__(
        self,
        account: AccountAPI,
        context: NetworkContext,
        autosign: bool = False,
        config: Optional[typing.Dict] = None,
        path: Optional[Path] = None,
    ):
        self._account = account
        self.context = context
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        self._autosign = autosign
        if isinstance(account, KeyfileAccount):
            account.set_autosign(autosign)

        check_etherscan_plugin(context)
        self.path = path
        self.config = config
        self.registry_filepath = None
        self.constructor_parameters = ConstructorParameters(OrderedDict())
        if config is not None:
            self.registry_filepath = validate_config(config=config, context=context)
            self.constructor_parameters = ConstructorParameters.from_config(config)

        self._print_deployment_info()

        if not self._autosign:
            # Confirms the start of the deployment.
            _continue()

    @classmethod
    def from_yaml(cls, filepath: Path, *args, **kwargs) -> "Deployer":
        config = _load_yaml(filepath)
        return cls(*args, config=config, path=filepath, **kwargs)

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    def constructor_args(self, contract_name: str) -> List[Any]:
        return list(self.constructor_parameters.resolve(contract_name).values())

    def deploy(
        self, container: ContractContainer, params: Optional[OrderedDict] = None
    ) -> ContractHandle:
        """
        Deploys a contract and blocks until its creation transaction is mined.
        Without explicit params, the params file entry for the contract is used.
        """
        contract_name = container.contract_type.name
        if params is None:
            params = self.constructor_parameters.resolve(contract_name)
        if not self._autosign:
            _confirm_resolution(params, contract_name)

        print(f"\nDeploying {contract_name}...")
        instance = self._account.deploy(container, *params.values(), publish=False)
        if not instance.address or not instance.txn_hash:
            raise DeploymentError(
                f"{contract_name} deployment did not produce a contract address "
                f"and creation transaction (address={instance.address})."
            )
        receipt = self._account.provider.get_receipt(instance.txn_hash)
        if receipt.failed:
            raise DeploymentError(
                f"{contract_name} deployment transaction {receipt.txn_hash} failed."
            )

        print(f"(i) {contract_name} deployed to: {instance.address}")
        return ContractHandle(
            address=to_checksum_address(instance.address),
            receipt=receipt,
            contract=instance,
        )

    def finalize(self, handles: List[ContractHandle]) -> Optional[Path]:
        """Publishes the deployments to the registry."""
        if self.registry_filepath is None:
            return None
        if is_local_network(self.context) and self.registry_filepath.exists():
            print(f"Replacing local registry at {self.registry_filepath}.")
            self.registry_filepath.unlink()
        return registry_from_handles(
            handles=handles,
            chain_id=self.context.chain_id,
            output_filepath=self.registry_filepath,
        )

    def _print_deployment_info(self):
        print(
            f"Account: {self._account.address}",
            f"Config: {self.path}",
            f"Registry: {self.registry_filepath}",
            f"Network: {self.context.network_name}",
            f"Chain ID: {self.context.chain_id}",
            sep="\n",
        )
