from decimal import Decimal, localcontext
from typing import Union

from ..errors import InvalidAmountError
from .validation import validate_amount


NATIVE_DECIMALS = 18
MAX_DECIMALS = 255  # decimals() is a uint8
MAX_UINT256 = 2**256 - 1


def _check_decimals(decimals: int) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"decimals must be an int, got {type(decimals).__name__}")
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}")
    return decimals


def parse_units(amount: Union[str, Decimal, int], decimals: int) -> int:
    """
    Converts a human-readable amount to its integer smallest-unit value.

    Args:
        amount: The amount (as string, Decimal, or int), e.g. "10.5"
        decimals: Power-of-ten exponent of the unit

    Returns:
        int: amount * 10**decimals

    Raises:
        InvalidAmountError: If amount is invalid, has more fractional
            digits than ``decimals`` allows, or does not fit in a uint256
    """
    decimals = _check_decimals(decimals)
    amount_decimal = validate_amount(amount)
    if amount_decimal == 0:
        return 0

    if _fraction_places(amount_decimal) > decimals:
        raise InvalidAmountError(
            f"Too many decimal places in {amount!r} (max {decimals})"
        )
    # 2**256 has 78 digits
    if amount_decimal.adjusted() + decimals >= 78:
        raise InvalidAmountError(f"Amount {amount!r} does not fit in a uint256")

    digits = len(amount_decimal.as_tuple().digits)
    try:
        with localcontext() as ctx:
            ctx.prec = max(28, digits + decimals + 2)
            value = int(amount_decimal.scaleb(decimals))
    except ArithmeticError as e:
        raise InvalidAmountError(f"Invalid amount: {amount!r}") from e

    if value > MAX_UINT256:
        raise InvalidAmountError(f"Amount {amount!r} does not fit in a uint256")
    return value


def _fraction_places(amount: Decimal) -> int:
    # Read from the digit tuple so no decimal context can round or overflow
    _, digits, exponent = amount.as_tuple()
    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return max(0, -(exponent + trailing_zeros))


def format_units(value: Union[int, str], decimals: int) -> str:
    """
    Converts an integer smallest-unit value to a decimal string.

    The result always carries at least one fractional digit ("1.0",
    "0.0") and trailing zeros are trimmed. The conversion is exact.
    """
    decimals = _check_decimals(decimals)
    value = int(value)
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)

    fraction_str = str(fraction).zfill(decimals).rstrip("0") if decimals else ""
    return f"{sign}{whole}.{fraction_str or '0'}"


def parse_ether(amount: Union[str, Decimal, int]) -> int:
    """Converts a native-coin amount (BNB, ETH, ...) to wei."""
    return parse_units(amount, NATIVE_DECIMALS)


def format_ether(value_wei: Union[int, str]) -> str:
    """Converts wei to a native-coin decimal string."""
    return format_units(value_wei, NATIVE_DECIMALS)
