import logging
from dataclasses import dataclass
from typing import Optional

from ...libs.rpc import IEvmRpc
from ...models import SigningIdentity, TransactionReceipt, WalletConfig
from ...errors import ContractError
from ...utils.conversion import format_units

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenProbe:
    """Answers of a token contract that passed the ERC20 capability check"""

    token_address: str
    decimals: int
    balance: int


class QueryOperations:
    """Handles read-only wallet operations."""

    def __init__(self, identity: SigningIdentity, config: WalletConfig, rpc: IEvmRpc):
        self.identity = identity
        self.config = config
        self._rpc = rpc
        logger.debug("QueryOperations initialized for account: %s", identity.address)

    async def native_balance(self) -> str:
        """Native coin balance as a decimal string."""
        balance_wei = await self._rpc.get_balance(self.identity.address)
        logger.debug(
            "QueryOperations: %s holds %d wei", self.identity.address, balance_wei
        )
        return format_units(balance_wei, self.config.native_decimals)

    async def probe_token(self, token_address: str) -> TokenProbe:
        """
        Check that ``token_address`` hosts a contract answering ``decimals()``
        and ``balanceOf(owner)``.

        Raises:
            ContractError: If no code is deployed there or either call cannot be decoded
        """
        code = await self._rpc.get_code(token_address)
        if not code:
            raise ContractError(f"No contract deployed at {token_address}")

        try:
            decimals = await self._rpc.token_decimals(token_address)
        except ContractError as e:
            raise ContractError(
                f"Contract at {token_address} does not answer decimals(): {e.message}"
            ) from e

        try:
            balance = await self._rpc.token_balance_of(
                token_address, self.identity.address
            )
        except ContractError as e:
            raise ContractError(
                f"Contract at {token_address} does not answer balanceOf(): {e.message}"
            ) from e

        logger.debug(
            "QueryOperations: token %s decimals=%d balance=%d",
            token_address,
            decimals,
            balance,
        )
        return TokenProbe(token_address=token_address, decimals=decimals, balance=balance)

    async def token_balance(self, token_address: str) -> str:
        """ERC20 balance of the wallet as a decimal string."""
        probe = await self.probe_token(token_address)
        return format_units(probe.balance, probe.decimals)

    async def transaction_receipt(self, tx_hash: str) -> Optional[TransactionReceipt]:
        """Receipt of ``tx_hash``, or None while it is unknown or unmined."""
        receipt = await self._rpc.get_transaction_receipt(tx_hash)
        if receipt is None:
            return None
        return TransactionReceipt.from_web3(receipt)
