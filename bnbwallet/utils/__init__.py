# In utils/__init__.py
from .conversion import parse_units, format_units, parse_ether, format_ether
from .validation import validate_amount, validate_address
from .decorators import translate_errors

__all__ = [
    "parse_units",
    "format_units",
    "parse_ether",
    "format_ether",
    "validate_amount",
    "validate_address",
    "translate_errors",
]
