#!/usr/bin/python3
from pathlib import Path

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from fundme import steps  # noqa: F401
from fundme.networks import NetworkContext
from fundme.options import autosign_option, tags_option
from fundme.params import Deployer
from fundme.pipeline import PIPELINE
from fundme.utils import params_filepath_from_network


@click.command(cls=ConnectedProviderCommand, name="deploy-pipeline")
@account_option()
@network_option(required=True)
@tags_option
@click.option(
    "--params-filepath",
    "-p",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    help="Deployment parameters YAML; defaults to the one for the connected network.",
    required=False,
)
@autosign_option
def cli(account, network, provider, tags, params_filepath, autosign):
    """Run the registered deployment steps selected by tag."""
    context = NetworkContext.from_provider(provider)
    params_filepath = params_filepath or params_filepath_from_network(context.network_name)

    deployer = Deployer.from_yaml(
        filepath=params_filepath,
        account=account,
        context=context,
        autosign=autosign,
    )
    handles = PIPELINE.run(
        tags=tags, deployer=deployer, provider=provider, explorer=network.explorer
    )
    deployer.finalize(handles=handles)
    for handle in handles:
        click.echo(f"'{handle.name}' deployed to: {handle.address}")


if __name__ == "__main__":
    cli()
