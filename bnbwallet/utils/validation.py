# bnbwallet/utils/validation.py
from decimal import Decimal
from typing import Union

from eth_utils import is_address, is_checksum_address, to_checksum_address

from ..errors import InvalidAddressError, InvalidAmountError


def validate_address(address: str) -> str:
    """
    Validate an EVM address and return its checksummed form.

    Lower- and upper-case hex addresses are accepted as-is; mixed-case
    addresses must carry a valid EIP-55 checksum.

    Raises:
        InvalidAddressError: If the address is malformed
    """
    if not isinstance(address, str) or not is_address(address):
        raise InvalidAddressError(f"Invalid address: {address!r}")
    hex_part = address[2:] if address[:2] in ("0x", "0X") else address
    if (
        hex_part != hex_part.lower()
        and hex_part != hex_part.upper()
        and not is_checksum_address(address)
    ):
        raise InvalidAddressError(f"Bad EIP-55 checksum: {address!r}")
    return to_checksum_address(address)


def validate_amount(amount: Union[str, Decimal, int]) -> Decimal:
    """
    Validate and convert a human-readable amount to Decimal.

    Args:
        amount: The amount to validate (as string, Decimal or int)

    Returns:
        Decimal: The validated amount as a Decimal

    Raises:
        InvalidAmountError: If amount is invalid
    """
    if isinstance(amount, float):
        raise InvalidAmountError(
            f"Float values [{amount}] are not allowed to avoid precision loss"
        )
    if isinstance(amount, bool) or not isinstance(amount, (str, Decimal, int)):
        raise InvalidAmountError(
            f"Unsupported amount type: {type(amount).__name__}"
        )

    try:
        amount_decimal = Decimal(amount.strip() if isinstance(amount, str) else amount)
        if not amount_decimal.is_finite():
            raise InvalidAmountError(f"Amount must be finite: {amount!r}")
        if amount_decimal < 0:
            raise InvalidAmountError("Negative values are not allowed")
    except (ValueError, TypeError, ArithmeticError) as e:
        raise InvalidAmountError(f"Invalid amount format: {amount!r}") from e
    return amount_decimal
