# bnbwallet/models.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional

from eth_utils import to_hex

from .errors import TimeoutException, TransactionFailedError

if TYPE_CHECKING:
    from .libs.rpc import IEvmRpc

logger = logging.getLogger(__name__)

MNEMONIC_UNAVAILABLE = "Not available"


@dataclass
class WalletConfig:
    """Configuration for BNBWallet"""

    # Exponent of the chain's native coin (18 on every EVM chain)
    native_decimals: int = 18
    native_symbol: str = "BNB"
    # Queried from the node when left unset
    chain_id: Optional[int] = None
    # Estimated by the node when left unset
    gas_limit: Optional[int] = None
    gas_price_wei: Optional[int] = None
    # Seconds allowed for a single HTTP request to the endpoint
    request_timeout: float = 30
    # Seconds between receipt polls in TransactionHandle.wait()
    poll_interval: float = 1.0


@dataclass(frozen=True)
class SigningIdentity:
    """Private key, its derived address and, for generated keys, the mnemonic"""

    address: str
    private_key: str = field(repr=False)
    mnemonic: Optional[str] = field(default=None, repr=False)

    @property
    def has_mnemonic(self) -> bool:
        return bool(self.mnemonic)

    @property
    def mnemonic_or_unavailable(self) -> str:
        return self.mnemonic or MNEMONIC_UNAVAILABLE


@dataclass(frozen=True)
class WalletCreated:
    """Diagnostic event handed to the on_created callback of a new wallet.

    Carries secrets; do not forward it to shared logs in production.
    """

    address: str
    private_key: str = field(repr=False)
    mnemonic: Optional[str] = field(default=None, repr=False)
    generated: bool = False

    @property
    def mnemonic_or_unavailable(self) -> str:
        return self.mnemonic or MNEMONIC_UNAVAILABLE


def _hex(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.startswith("0x") else "0x" + value
    return to_hex(value)


@dataclass(frozen=True)
class TransactionReceipt:
    """Outcome of a mined transaction"""

    transaction_hash: str
    block_number: int
    block_hash: Optional[str]
    status: int
    gas_used: int
    effective_gas_price: Optional[int] = None
    from_address: Optional[str] = None
    to_address: Optional[str] = None
    contract_address: Optional[str] = None
    logs_count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status == 1

    @classmethod
    def from_web3(cls, receipt: Mapping[str, Any]) -> "TransactionReceipt":
        """Build from the AttributeDict returned by web3's eth_getTransactionReceipt."""
        return cls(
            transaction_hash=_hex(receipt["transactionHash"]),
            block_number=int(receipt["blockNumber"]),
            block_hash=_hex(receipt.get("blockHash")),
            status=int(receipt.get("status", 0)),
            gas_used=int(receipt.get("gasUsed", 0)),
            effective_gas_price=(
                int(receipt["effectiveGasPrice"])
                if receipt.get("effectiveGasPrice") is not None
                else None
            ),
            from_address=receipt.get("from"),
            to_address=receipt.get("to"),
            contract_address=receipt.get("contractAddress"),
            logs_count=len(receipt.get("logs") or []),
        )


class TransactionHandle:
    """
    A submitted transaction. Returned as soon as the endpoint acknowledges
    the submission; confirmation is only observed through wait().
    """

    def __init__(
        self,
        tx_hash: str,
        rpc: "IEvmRpc",
        *,
        sender: str,
        to: str,
        value: int = 0,
        nonce: Optional[int] = None,
        token: Optional[str] = None,
        poll_interval: float = 1.0,
    ):
        self.hash = tx_hash
        self.sender = sender
        self.to = to
        self.value = value
        self.nonce = nonce
        # ERC20 contract for token transfers, None for native transfers
        self.token = token
        self._rpc = rpc
        self._poll_interval = poll_interval

    async def wait(
        self, confirmations: int = 1, timeout: Optional[float] = None
    ) -> TransactionReceipt:
        """
        Wait until the transaction is mined and ``confirmations`` blocks deep.

        There is no default timeout. Pass ``timeout`` (seconds) to bound the wait.

        Raises:
            TimeoutException: If ``timeout`` elapses first
            TransactionFailedError: If the transaction was mined but reverted
            NetworkError: If polling the endpoint fails
        """
        if confirmations < 1:
            raise ValueError("confirmations must be at least 1")

        loop = asyncio.get_running_loop()
        started = loop.time()
        attempt = 1
        logger.debug(
            "Waiting for %s (confirmations=%d, timeout=%s)",
            self.hash,
            confirmations,
            timeout,
        )

        while True:
            raw_receipt = await self._rpc.get_transaction_receipt(self.hash)
            if raw_receipt is not None:
                receipt = TransactionReceipt.from_web3(raw_receipt)
                depth = 1
                if confirmations > 1:
                    depth = await self._rpc.block_number() - receipt.block_number + 1
                if depth >= confirmations:
                    break
                logger.debug(
                    "Check %d: %s mined, %d/%d confirmations",
                    attempt,
                    self.hash,
                    depth,
                    confirmations,
                )

            elapsed = loop.time() - started
            if timeout is not None and elapsed >= timeout:
                raise TimeoutException(
                    f"Transaction {self.hash} not confirmed within {timeout}s"
                )
            await asyncio.sleep(self._poll_interval)
            attempt += 1

        if not receipt.succeeded:
            logger.warning("Transaction %s reverted in block %d", self.hash, receipt.block_number)
            raise TransactionFailedError(
                f"Transaction {self.hash} failed in block {receipt.block_number}",
                receipt=receipt,
            )

        logger.info("Transaction %s confirmed in block %d", self.hash, receipt.block_number)
        return receipt

    def __repr__(self) -> str:
        return f"TransactionHandle(hash={self.hash}, to={self.to}, value={self.value})"
