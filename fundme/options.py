from pathlib import Path

import click

from fundme.constants import ALL_TAG
from fundme.types import ChecksumAddress, EtherAmount, MinInt

autosign_option = click.option(
    "--autosign",
    help="Automatically sign transactions.",
    is_flag=True,
)

signers_option = click.option(
    "--signer",
    "-s",
    "signer_aliases",
    help="Alias of an account to fund from; repeat for several accounts, in order.",
    multiple=True,
    type=click.STRING,
)

num_signers_option = click.option(
    "--num-signers",
    "-n",
    help="Number of test accounts to fund from on a local network.",
    type=MinInt(1),
    default=2,
    show_default=True,
)

tags_option = click.option(
    "--tags",
    "-t",
    help="Deployment tags to run.",
    multiple=True,
    default=(ALL_TAG,),
    show_default=True,
)

address_option = click.option(
    "--address",
    "-a",
    help="Address of a deployed FundMe contract.",
    type=ChecksumAddress(),
    required=False,
)

registry_filepath_option = click.option(
    "--registry-filepath",
    "-f",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    help="Registry to look up the FundMe address for the connected chain.",
    required=False,
)


def lock_time_option(default: int):
    return click.option(
        "--lock-time",
        "-l",
        help="FundMe lock period in seconds.",
        type=MinInt(1),
        default=default,
        show_default=True,
    )


def amount_option(default):
    return click.option(
        "--amount",
        "-v",
        help="Amount each account funds, in ether unless a unit is given (e.g. '50 gwei').",
        type=EtherAmount(),
        default=str(default),
        show_default=True,
    )
