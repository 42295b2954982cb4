from decimal import Decimal, InvalidOperation

import click
import pytest
from eth_utils import to_checksum_address

from fundme.types import ChecksumAddress, EtherAmount, MinInt, parse_amount


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0.5", 5 * 10**17),
        ("0.05", 5 * 10**16),
        ("0.5 ether", 5 * 10**17),
        ("50 gwei", 50 * 10**9),
        ("1 ETHER", 10**18),
        (Decimal("0.1"), 10**17),
        (12345, 12345),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


def test_parse_amount_is_exact():
    # 0.1 + 0.2 in floating point is not 0.3; in wei it must be
    assert parse_amount("0.1") + parse_amount("0.2") == parse_amount("0.3")


@pytest.mark.parametrize(
    "value", ["0", "-1", "1 lightyear", "half", "1 2 3", "1.0000000000000000001", "0.5 wei"]
)
def test_parse_amount_rejects(value):
    with pytest.raises((ValueError, InvalidOperation)):
        parse_amount(value)


def test_parse_amount_never_truncates():
    assert parse_amount("1.000000000000000001") == 10**18 + 1
    with pytest.raises(ValueError, match="whole number of wei"):
        parse_amount("1.0000000000000000001")
    with pytest.raises(ValueError, match="whole number of wei"):
        parse_amount("1.5 wei")


def test_ether_amount_param():
    assert EtherAmount().convert("0.05", None, None) == 5 * 10**16
    with pytest.raises(click.BadParameter):
        EtherAmount().convert("lots", None, None)
    # finer than one wei
    with pytest.raises(click.BadParameter):
        EtherAmount().convert("1.0000000000000000001", None, None)


def test_min_int_param():
    assert MinInt(1).convert("300", None, None) == 300
    with pytest.raises(click.BadParameter):
        MinInt(1).convert("0", None, None)
    with pytest.raises(click.BadParameter):
        MinInt(1).convert("soon", None, None)


def test_checksum_address_param():
    address = "0x" + "ab" * 20
    assert ChecksumAddress().convert(address, None, None) == to_checksum_address(address)
    with pytest.raises(click.BadParameter):
        ChecksumAddress().convert("0x1234", None, None)
