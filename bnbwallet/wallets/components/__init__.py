from .query_operations import QueryOperations, TokenProbe
from .transfer_operations import TransferOperations

__all__ = [
    "QueryOperations",
    "TokenProbe",
    "TransferOperations",
]
