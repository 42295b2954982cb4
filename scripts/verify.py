from pathlib import Path

import click
from ape.cli import ConnectedProviderCommand, network_option

from fundme.constants import ARTIFACTS_DIR, FUNDME_CONTRACT_NAME
from fundme.networks import NetworkContext
from fundme.params import ContractHandle
from fundme.registry import entry_from_registry
from fundme.utils import get_contract_container
from fundme.verification import verify_deployment


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--registry-filepath",
    "-f",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    help="Registry holding the FundMe deployment for the connected chain.",
    required=False,
)
def cli(network, provider, registry_filepath):
    """Verify a deployed FundMe contract."""
    context = NetworkContext.from_provider(provider)
    registry_filepath = registry_filepath or ARTIFACTS_DIR / f"{context.network_name}.json"
    entry = entry_from_registry(
        filepath=registry_filepath, chain_id=context.chain_id, contract_name=FUNDME_CONTRACT_NAME
    )

    container = get_contract_container(FUNDME_CONTRACT_NAME)
    handle = ContractHandle(
        address=entry.address,
        receipt=provider.get_receipt(entry.tx_hash),
        contract=container.at(entry.address),
    )
    # the explorer recovers the constructor arguments from the creation transaction
    result = verify_deployment(
        handle=handle,
        constructor_args=[],
        context=context,
        provider=provider,
        explorer=network.explorer,
    )
    if result.failed:
        raise click.ClickException(f"Verification failed: {result.reason}")


if __name__ == "__main__":
    cli()
