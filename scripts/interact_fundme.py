#!/usr/bin/python3
import click
from ape.cli import ConnectedProviderCommand, network_option

from fundme.constants import ATTACH_AMOUNT, FUNDME_CONTRACT_NAME
from fundme.funding import load_signers
from fundme.networks import NetworkContext
from fundme.options import (
    address_option,
    amount_option,
    num_signers_option,
    registry_filepath_option,
    signers_option,
)
from fundme.registry import address_from_registry
from fundme.utils import format_ether, get_contract_container
from fundme.workflows import attach_and_interact


@click.command(cls=ConnectedProviderCommand, name="interact-fundme")
@network_option(required=True)
@address_option
@registry_filepath_option
@amount_option(default=ATTACH_AMOUNT)
@signers_option
@num_signers_option
def cli(network, provider, address, registry_filepath, amount, signer_aliases, num_signers):
    """Fund an existing FundMe contract from each signer."""
    if not (bool(address) ^ bool(registry_filepath)):
        raise click.BadOptionUsage(
            option_name="--address",
            message=(
                f"Provide either 'address' or 'registry_filepath'; "
                f"got {address}, {registry_filepath}"
            ),
        )

    context = NetworkContext.from_provider(provider)
    click.echo(f"Connected to {network.name} network.")
    address = address or address_from_registry(
        filepath=registry_filepath,
        chain_id=context.chain_id,
        contract_name=FUNDME_CONTRACT_NAME,
    )
    signers = load_signers(context, aliases=signer_aliases, count=num_signers)

    handle, report = attach_and_interact(
        container=get_contract_container(FUNDME_CONTRACT_NAME),
        address=address,
        signers=signers,
        amount=amount,
        provider=provider,
    )
    click.echo(f"\nFundMe at {handle.address} holds {format_ether(report.final_balance)}")


if __name__ == "__main__":
    cli()
