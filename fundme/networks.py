import os
from typing import Mapping, NamedTuple, Optional

from fundme.constants import (
    ETHERSCAN_API_KEY_ENVVAR,
    LOCAL_BLOCKCHAIN_ENVIRONMENTS,
    SEPOLIA_CHAIN_ID,
)


class NetworkContext(NamedTuple):
    """The network a run is connected to, read once and passed explicitly."""

    chain_id: int
    network_name: str
    has_verification_credential: bool

    @classmethod
    def from_provider(
        cls, provider, environ: Optional[Mapping[str, str]] = None
    ) -> "NetworkContext":
        environ = os.environ if environ is None else environ
        return cls(
            chain_id=int(provider.chain_id),
            network_name=provider.network.name,
            has_verification_credential=bool(environ.get(ETHERSCAN_API_KEY_ENVVAR)),
        )


def should_verify(chain_id: int, has_credential: bool) -> bool:
    """Source verification only runs on Sepolia with an explorer API key."""
    return chain_id == SEPOLIA_CHAIN_ID and has_credential is True


def classify(context: NetworkContext) -> bool:
    print(
        f"Network chainId: {hex(context.chain_id)}",
        f"Network chainId (decimal): {context.chain_id}",
        f"{ETHERSCAN_API_KEY_ENVVAR} exists: {context.has_verification_credential}",
        f"Network name: {context.network_name}",
        sep="\n",
    )
    return should_verify(context.chain_id, context.has_verification_credential)


def is_local_network(context: NetworkContext) -> bool:
    return context.network_name in LOCAL_BLOCKCHAIN_ENVIRONMENTS
