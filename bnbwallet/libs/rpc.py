from typing import Any, Dict, Mapping, Optional, Protocol
import logging

import aiohttp
from eth_utils import to_hex
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import TransactionNotFound

from .erc20 import ERC20_ABI
from ..utils.decorators import translate_errors

# Configure logging
logger = logging.getLogger(__name__)


class IEvmRpc(Protocol):
    """Protocol defining required RPC operations"""

    url: str

    async def get_balance(self, address: str) -> int:
        """Native balance in wei"""

    async def get_transaction_count(self, address: str) -> int:
        """Next nonce, counting pending transactions"""

    async def chain_id(self) -> int:
        """Chain id of the endpoint"""

    async def gas_price(self) -> int:
        """Current gas price in wei"""

    async def block_number(self) -> int:
        """Latest block number"""

    async def estimate_gas(self, transaction: Dict[str, Any]) -> int:
        """Gas estimate for a transaction"""

    async def get_code(self, address: str) -> bytes:
        """Deployed bytecode at an address"""

    async def send_raw_transaction(self, raw_transaction: bytes) -> str:
        """Submit a signed transaction, returning its hash"""

    async def get_transaction_receipt(
        self, tx_hash: str
    ) -> Optional[Mapping[str, Any]]:
        """Receipt of a mined transaction, None if unknown or pending"""

    async def token_balance_of(self, token_address: str, owner: str) -> int:
        """ERC20 balanceOf(owner)"""

    async def token_decimals(self, token_address: str) -> int:
        """ERC20 decimals()"""

    async def build_token_transfer(
        self,
        token_address: str,
        to: str,
        amount: int,
        tx_params: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Unsigned ERC20 transfer(to, amount) transaction"""


class BNBWalletRpc(IEvmRpc):
    """Abstraction layer over web3's AsyncWeb3 for one JSON-RPC endpoint"""

    def __init__(self, url: str, request_timeout: float = 30):
        """
        Initialize RPC client with connection details. No request is sent.

        Args:
            url: JSON-RPC endpoint URL
            request_timeout: Seconds allowed for each HTTP request
        """
        if not url:
            raise ValueError("An RPC endpoint URL is required")
        self.url = url
        self._w3 = AsyncWeb3(
            AsyncHTTPProvider(
                url,
                request_kwargs={
                    "timeout": aiohttp.ClientTimeout(total=request_timeout)
                },
                # failures surface to the caller, never retried
                exception_retry_configuration=None,
            )
        )
        logger.debug("Initialized RPC client with URL: %s", url)

    def _token(self, token_address: str):
        return self._w3.eth.contract(address=token_address, abi=ERC20_ABI)

    @translate_errors
    async def get_balance(self, address: str) -> int:
        logger.debug("Fetching balance for %s", address)
        return int(await self._w3.eth.get_balance(address))

    @translate_errors
    async def get_transaction_count(self, address: str) -> int:
        logger.debug("Fetching pending nonce for %s", address)
        return int(await self._w3.eth.get_transaction_count(address, "pending"))

    @translate_errors
    async def chain_id(self) -> int:
        return int(await self._w3.eth.chain_id)

    @translate_errors
    async def gas_price(self) -> int:
        return int(await self._w3.eth.gas_price)

    @translate_errors
    async def block_number(self) -> int:
        return int(await self._w3.eth.block_number)

    @translate_errors
    async def estimate_gas(self, transaction: Dict[str, Any]) -> int:
        logger.debug("Estimating gas for transaction to %s", transaction.get("to"))
        return int(await self._w3.eth.estimate_gas(transaction))

    @translate_errors
    async def get_code(self, address: str) -> bytes:
        return bytes(await self._w3.eth.get_code(address))

    @translate_errors
    async def send_raw_transaction(self, raw_transaction: bytes) -> str:
        """
        Publish a signed transaction to the network.

        Args:
            raw_transaction: Signed RLP payload

        Returns:
            str: 0x-prefixed transaction hash
        """
        tx_hash = await self._w3.eth.send_raw_transaction(raw_transaction)
        logger.debug("Endpoint accepted transaction %s", to_hex(tx_hash))
        return to_hex(tx_hash)

    @translate_errors
    async def get_transaction_receipt(
        self, tx_hash: str
    ) -> Optional[Mapping[str, Any]]:
        """
        Get the receipt of a transaction.

        Returns:
            The web3 receipt, or None when the transaction is unknown or not mined
        """
        logger.debug("Fetching receipt for %s", tx_hash)
        try:
            return await self._w3.eth.get_transaction_receipt(tx_hash)
        except TransactionNotFound:
            logger.debug("No receipt for %s", tx_hash)
            return None

    @translate_errors
    async def token_balance_of(self, token_address: str, owner: str) -> int:
        logger.debug("Fetching %s token balance for %s", token_address, owner)
        return int(await self._token(token_address).functions.balanceOf(owner).call())

    @translate_errors
    async def token_decimals(self, token_address: str) -> int:
        logger.debug("Fetching decimals of %s", token_address)
        return int(await self._token(token_address).functions.decimals().call())

    @translate_errors
    async def build_token_transfer(
        self,
        token_address: str,
        to: str,
        amount: int,
        tx_params: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Build an unsigned transfer(to, amount) call. Fields missing from
        tx_params (gas, gasPrice) are filled in by web3 from the node.
        """
        transfer = self._token(token_address).functions.transfer(to, amount)
        return dict(await transfer.build_transaction(tx_params))
