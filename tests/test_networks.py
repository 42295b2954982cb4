from types import SimpleNamespace

import pytest

from fundme.constants import ETHERSCAN_API_KEY_ENVVAR, SEPOLIA_CHAIN_ID
from fundme.networks import NetworkContext, classify, is_local_network, should_verify


@pytest.mark.parametrize(
    "chain_id,has_credential,expected",
    [
        (SEPOLIA_CHAIN_ID, True, True),
        (SEPOLIA_CHAIN_ID, False, False),
        (1, True, False),
        (1, False, False),
        (1337, True, False),
        (137, True, False),
    ],
)
def test_should_verify(chain_id, has_credential, expected):
    assert should_verify(chain_id, has_credential) is expected


def test_context_from_provider():
    provider = SimpleNamespace(chain_id=SEPOLIA_CHAIN_ID, network=SimpleNamespace(name="sepolia"))

    context = NetworkContext.from_provider(provider, environ={ETHERSCAN_API_KEY_ENVVAR: "KEY"})
    assert context == NetworkContext(SEPOLIA_CHAIN_ID, "sepolia", True)

    context = NetworkContext.from_provider(provider, environ={})
    assert not context.has_verification_credential

    # an empty key counts as missing
    context = NetworkContext.from_provider(provider, environ={ETHERSCAN_API_KEY_ENVVAR: ""})
    assert not context.has_verification_credential


def test_classify_traces_decision_inputs(capsys, sepolia_context):
    assert classify(sepolia_context)
    output = capsys.readouterr().out
    assert "Network chainId: 0xaa36a7" in output
    assert f"Network chainId (decimal): {SEPOLIA_CHAIN_ID}" in output
    assert f"{ETHERSCAN_API_KEY_ENVVAR} exists: True" in output
    assert "Network name: sepolia" in output


def test_classify_mainnet_with_credential():
    context = NetworkContext(chain_id=1, network_name="mainnet", has_verification_credential=True)
    assert not classify(context)


def test_is_local_network(local_context, sepolia_context):
    assert is_local_network(local_context)
    assert not is_local_network(sepolia_context)
