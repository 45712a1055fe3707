import asyncio

import aiohttp
import pytest
from web3.exceptions import (
    BadFunctionCallOutput,
    ContractLogicError,
    InvalidAddress,
    TimeExhausted,
)

from bnbwallet.errors import (
    WalletException,
    TimeoutException,
    InvalidKeyError,
    InvalidAddressError,
    InvalidAmountError,
    NetworkError,
    ContractError,
    SigningError,
    TransactionFailedError,
    translate_error,
)
from bnbwallet.utils.decorators import translate_errors


class TestWalletExceptions:
    """Tests for the wallet exception classes."""

    def test_wallet_exception_base(self):
        exception = WalletException("Test message", "TEST_CODE")
        assert exception.message == "Test message"
        assert exception.code == "TEST_CODE"
        assert str(exception) == "Test message"

    @pytest.mark.parametrize(
        "cls, code",
        [
            (TimeoutException, "TIMEOUT"),
            (InvalidKeyError, "INVALID_KEY"),
            (InvalidAddressError, "INVALID_ADDRESS"),
            (InvalidAmountError, "INVALID_AMOUNT"),
            (NetworkError, "NETWORK_ERROR"),
            (ContractError, "CONTRACT_ERROR"),
            (SigningError, "SIGNING_ERROR"),
            (TransactionFailedError, "TRANSACTION_FAILED"),
        ],
    )
    def test_subclass_codes(self, cls, code):
        exception = cls("something went wrong")
        assert exception.message == "something went wrong"
        assert exception.code == code
        assert isinstance(exception, WalletException)

    def test_transaction_failed_keeps_receipt(self):
        exception = TransactionFailedError("reverted", receipt={"status": 0})
        assert exception.receipt == {"status": 0}


class TestTranslateError:
    """Tests for mapping transport exceptions to wallet errors."""

    def test_wallet_exception_is_returned_unchanged(self):
        original = InvalidAmountError("bad")
        assert translate_error(original) is original

    def test_connection_error(self):
        error = translate_error(aiohttp.ClientConnectionError("Cannot connect to host"))
        assert isinstance(error, NetworkError)
        assert error.message == "Cannot connect to host"

    def test_timeout_without_message_uses_type_name(self):
        error = translate_error(asyncio.TimeoutError())
        assert isinstance(error, NetworkError)
        assert error.message == "TimeoutError"

    def test_time_exhausted(self):
        assert isinstance(translate_error(TimeExhausted("gave up")), NetworkError)

    def test_rpc_value_error_keeps_message(self):
        error = translate_error(
            ValueError("insufficient funds for gas * price + value")
        )
        assert isinstance(error, NetworkError)
        assert error.message == "insufficient funds for gas * price + value"

    def test_decode_failure_is_contract_error(self):
        error = translate_error(BadFunctionCallOutput("Could not decode contract function call"))
        assert isinstance(error, ContractError)

    def test_revert_is_contract_error(self):
        error = translate_error(ContractLogicError("execution reverted"))
        assert isinstance(error, ContractError)
        assert "execution reverted" in error.message

    def test_invalid_address(self):
        error = translate_error(InvalidAddress("not checksummed"))
        assert isinstance(error, InvalidAddressError)

    def test_unknown_exception(self):
        error = translate_error(RuntimeError("boom"))
        assert isinstance(error, NetworkError)
        assert "boom" in error.message


class TestTranslateErrorsDecorator:

    @pytest.mark.asyncio
    async def test_passes_result_through(self):
        @translate_errors
        async def ok():
            return 42

        assert await ok() == 42

    @pytest.mark.asyncio
    async def test_translates_and_chains(self):
        original = aiohttp.ClientConnectionError("refused")

        @translate_errors
        async def failing():
            raise original

        with pytest.raises(NetworkError) as excinfo:
            await failing()
        assert excinfo.value.message == "refused"
        assert excinfo.value.__cause__ is original

    @pytest.mark.asyncio
    async def test_wallet_exceptions_propagate_untouched(self):
        @translate_errors
        async def failing():
            raise ContractError("no code")

        with pytest.raises(ContractError, match="no code"):
            await failing()
