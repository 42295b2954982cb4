#!/usr/bin/python3
import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from fundme.constants import (
    DEPLOY_AND_INTERACT_AMOUNT,
    DEPLOY_AND_INTERACT_LOCK_TIME,
    FUNDME_CONTRACT_NAME,
)
from fundme.funding import load_signers
from fundme.networks import NetworkContext
from fundme.options import (
    amount_option,
    autosign_option,
    lock_time_option,
    num_signers_option,
    signers_option,
)
from fundme.params import Deployer
from fundme.utils import format_ether, get_contract_container
from fundme.workflows import deploy_and_interact, lock_time_params


@click.command(cls=ConnectedProviderCommand, name="deploy-and-interact")
@account_option()
@network_option(required=True)
@lock_time_option(default=DEPLOY_AND_INTERACT_LOCK_TIME)
@amount_option(default=DEPLOY_AND_INTERACT_AMOUNT)
@signers_option
@num_signers_option
@autosign_option
def cli(account, network, provider, lock_time, amount, signer_aliases, num_signers, autosign):
    """Deploy FundMe, verify it on Sepolia, then fund it from each signer."""
    context = NetworkContext.from_provider(provider)
    click.echo(f"Connected to {network.name} network.")
    signers = load_signers(context, aliases=signer_aliases, count=num_signers)

    deployer = Deployer(account=account, context=context, autosign=autosign)
    handle, result, report = deploy_and_interact(
        deployer=deployer,
        container=get_contract_container(FUNDME_CONTRACT_NAME),
        params=lock_time_params(lock_time),
        signers=signers,
        amount=amount,
        provider=provider,
        explorer=network.explorer,
    )
    click.echo(
        f"\nFundMe at {handle.address} (verification {result.status.value}) "
        f"holds {format_ether(report.final_balance)}"
    )


if __name__ == "__main__":
    cli()
