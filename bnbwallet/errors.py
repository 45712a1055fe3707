from __future__ import annotations
import asyncio

import aiohttp
from web3.exceptions import (
    BadFunctionCallOutput,
    ContractLogicError,
    InvalidAddress,
    MismatchedABI,
    TimeExhausted,
    Web3Exception,
)


class WalletException(Exception):
    """Base exception for all wallet errors."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(self.message)


class TimeoutException(WalletException):
    """Raised when a caller-imposed wait runs out."""

    def __init__(self, message: str):
        super().__init__(message, "TIMEOUT")


class InvalidKeyError(WalletException):
    """Raised when a private key or mnemonic cannot be loaded."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_KEY")


class InvalidAddressError(WalletException):
    """Raised when an address is malformed."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_ADDRESS")


class InvalidAmountError(WalletException):
    """Raised when an amount is invalid (negative, wrong type, too precise, etc.)."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_AMOUNT")


class NetworkError(WalletException):
    """Raised when the endpoint is unreachable or rejects a request."""

    def __init__(self, message: str):
        super().__init__(message, "NETWORK_ERROR")


class ContractError(WalletException):
    """Raised when a contract is missing or its answers cannot be decoded."""

    def __init__(self, message: str):
        super().__init__(message, "CONTRACT_ERROR")


class SigningError(WalletException):
    """Raised when a built transaction cannot be signed."""

    def __init__(self, message: str):
        super().__init__(message, "SIGNING_ERROR")


class TransactionFailedError(WalletException):
    """Raised when a mined transaction reports a failed status."""

    def __init__(self, message: str, receipt=None):
        super().__init__(message, "TRANSACTION_FAILED")
        self.receipt = receipt


#
# Mapping of transport exceptions onto the wallet error tree
#

CONTRACT_EXCEPTIONS = (BadFunctionCallOutput, ContractLogicError, MismatchedABI)
NETWORK_EXCEPTIONS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    ConnectionError,
    TimeExhausted,
)


def error_message(exc: BaseException) -> str:
    """Message of the underlying exception, falling back to its type name."""
    message = str(exc)
    return message if message else type(exc).__name__


def translate_error(exc: BaseException) -> WalletException:
    """
    Convert an exception raised by web3 or the HTTP transport into a
    WalletException, keeping the original message.
    """
    if isinstance(exc, WalletException):
        return exc
    message = error_message(exc)
    if isinstance(exc, CONTRACT_EXCEPTIONS):
        return ContractError(message)
    if isinstance(exc, InvalidAddress):
        return InvalidAddressError(message)
    if isinstance(exc, NETWORK_EXCEPTIONS):
        return NetworkError(message)
    if isinstance(exc, (Web3Exception, ValueError)):
        # JSON-RPC error responses (insufficient funds, nonce too low, ...)
        return NetworkError(message)
    return NetworkError(f"Unexpected transport error: {message}")
