from decimal import Decimal, InvalidOperation, localcontext

import click
from eth_utils import to_checksum_address, to_wei
from eth_utils.units import units


class MinInt(click.ParamType):
    name = "minint"

    def __init__(self, min_value):
        self.min_value = min_value

    def convert(self, value, param, ctx):
        try:
            ivalue = int(value)
        except ValueError:
            self.fail(f"{value} is not a valid integer", param, ctx)
        if ivalue < self.min_value:
            self.fail(
                f"{value} is less than the minimum allowed value of {self.min_value}", param, ctx
            )
        return ivalue


class ChecksumAddress(click.ParamType):
    name = "checksum_address"

    def convert(self, value, param, ctx):
        try:
            value = to_checksum_address(value=value)
        except ValueError:
            self.fail(f"{value} is not a valid ethereum address", param, ctx)
        else:
            return value


def parse_amount(value) -> int:
    """
    Converts a human amount such as "0.5", "0.5 ether" or "100 gwei" to wei.
    Bare numbers are ether. Integers are taken as wei already.
    """
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        number, unit = value, "ether"
    else:
        parts = str(value).split()
        if len(parts) not in (1, 2):
            raise ValueError(f"{value} is not a valid amount")
        number = Decimal(parts[0])
        unit = parts[1].lower() if len(parts) == 2 else "ether"
    if unit not in units:
        raise ValueError(f"{unit} is not a known ether unit")
    with localcontext() as ctx:
        ctx.prec = 999
        scaled = number * units[unit]
        if scaled != scaled.to_integral_value():
            raise ValueError(f"{value} is not a whole number of wei")
    wei = to_wei(number, unit)
    if wei <= 0:
        raise ValueError(f"{value} must be a positive amount")
    return wei


class EtherAmount(click.ParamType):
    name = "ether_amount"

    def convert(self, value, param, ctx):
        try:
            return parse_amount(value)
        except (ValueError, InvalidOperation) as e:
            self.fail(f"{value} is not a valid amount: {e}", param, ctx)
