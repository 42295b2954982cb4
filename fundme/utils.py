import json
from decimal import Decimal
from pathlib import Path
from typing import Dict

import yaml
from ape import project
from ape.contracts import ContractContainer
from eth_utils import from_wei

from fundme.constants import ARTIFACTS_DIR, CONSTRUCTOR_PARAMS_DIR, PIPELINE_PARAMS_FILENAME
from fundme.networks import NetworkContext, is_local_network, should_verify


class DeploymentConfigError(ValueError):
    pass


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def format_ether(amount: int) -> str:
    """Renders a wei amount in ether for display only."""
    value = Decimal(from_wei(amount, "ether")).normalize()
    return f"{value:f} ETH"


def get_artifact_filepath(config: Dict) -> Path:
    """Returns the filepath of the artifact file."""
    artifact_config = config.get("artifacts", {})
    artifact_dir = Path(artifact_config.get("dir", ARTIFACTS_DIR))
    filename = artifact_config.get("filename")
    if not filename:
        raise DeploymentConfigError("artifact filename is not set in params file.")
    return artifact_dir / filename


def validate_config(config: Dict, context: NetworkContext) -> Path:
    """
    Checks that the deployment has not already been published for
    the chain_id specified in the params file. Local registries are not checked.
    """
    print("Validating parameters YAML...")

    deployment = config.get("deployment")
    if not deployment:
        raise DeploymentConfigError("deployment is not set in params file.")

    config_chain_id = deployment.get("chain_id")
    if not config_chain_id:
        raise DeploymentConfigError("chain_id is not set in params file.")

    contracts = config.get("contracts")
    if not contracts:
        raise DeploymentConfigError("Constructor parameters file missing 'contracts' field.")

    config_chain_id = int(config_chain_id)
    chain_mismatch = config_chain_id != context.chain_id
    if chain_mismatch and not is_local_network(context):
        raise DeploymentConfigError(
            f"chain_id in params file ({config_chain_id}) does not match "
            f"chain_id of current network ({context.chain_id})."
        )

    registry_filepath = get_artifact_filepath(config=config)
    if is_local_network(context):
        # replaced on finalize
        return registry_filepath
    if not registry_filepath.exists():
        return registry_filepath

    registry_chain_ids = map(int, _load_json(registry_filepath).keys())
    if context.chain_id in registry_chain_ids:
        raise DeploymentConfigError(
            f"Deployment is already published for chain_id {context.chain_id}."
        )

    return registry_filepath


def check_etherscan_plugin(context: NetworkContext) -> None:
    """Warns when verification is due but the ape-etherscan plugin is missing."""
    if is_local_network(context):
        return
    if not should_verify(context.chain_id, context.has_verification_credential):
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        print("WARNING: ape-etherscan is not installed; source verification will fail.")


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise DeploymentConfigError(f"No contract found with name '{contract}'.")


def params_filepath_from_network(network_name: str) -> Path:
    p = CONSTRUCTOR_PARAMS_DIR / network_name / PIPELINE_PARAMS_FILENAME
    if not p.exists():
        raise DeploymentConfigError(f"No deployment parameters found for network '{network_name}'")
    return p
