#!/usr/bin/python3
import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from fundme.constants import DEPLOY_LOCK_TIME, FUNDME_CONTRACT_NAME
from fundme.networks import NetworkContext
from fundme.options import autosign_option, lock_time_option
from fundme.params import Deployer
from fundme.utils import get_contract_container
from fundme.workflows import deploy_and_verify, lock_time_params


@click.command(cls=ConnectedProviderCommand, name="deploy-fundme")
@account_option()
@network_option(required=True)
@lock_time_option(default=DEPLOY_LOCK_TIME)
@autosign_option
def cli(account, network, provider, lock_time, autosign):
    """Deploy FundMe and verify it on Sepolia."""
    context = NetworkContext.from_provider(provider)
    click.echo(f"Connected to {network.name} network.")

    deployer = Deployer(account=account, context=context, autosign=autosign)
    handle, result = deploy_and_verify(
        deployer=deployer,
        container=get_contract_container(FUNDME_CONTRACT_NAME),
        provider=provider,
        explorer=network.explorer,
        params=lock_time_params(lock_time),
    )
    click.echo(
        f"Contract has been deployed successfully, contract address is: {handle.address} "
        f"(verification {result.status.value})"
    )


if __name__ == "__main__":
    cli()
