import logging
from decimal import Decimal
from typing import Any, Dict

from .query_operations import QueryOperations
from ...libs.account_helper import AccountHelper
from ...libs.rpc import IEvmRpc
from ...models import SigningIdentity, TransactionHandle, WalletConfig
from ...utils.conversion import parse_units
from ...utils.validation import validate_address, validate_amount

logger = logging.getLogger(__name__)


class TransferOperations:
    """Builds, signs and submits native and ERC20 transfers without waiting for them."""

    def __init__(
        self,
        identity: SigningIdentity,
        config: WalletConfig,
        rpc: IEvmRpc,
        query_operations: QueryOperations,
    ):
        self.identity = identity
        self.config = config
        self._rpc = rpc
        self._query_operations = query_operations
        logger.debug("TransferOperations initialized for account: %s", identity.address)

    # --- Internal Helper Methods ---

    async def _base_params(self) -> Dict[str, Any]:
        """Sender, nonce, chain id and gas price shared by every transaction."""
        chain_id = self.config.chain_id
        if chain_id is None:
            chain_id = await self._rpc.chain_id()
        gas_price = self.config.gas_price_wei
        if gas_price is None:
            gas_price = await self._rpc.gas_price()
        nonce = await self._rpc.get_transaction_count(self.identity.address)
        params = {
            "from": self.identity.address,
            "nonce": nonce,
            "chainId": chain_id,
            "gasPrice": gas_price,
        }
        if self.config.gas_limit is not None:
            params["gas"] = self.config.gas_limit
        return params

    async def _sign_and_submit(
        self, transaction: Dict[str, Any], to: str, value: int, token: str = None
    ) -> TransactionHandle:
        raw_transaction = AccountHelper.sign_transaction(self.identity, transaction)
        tx_hash = await self._rpc.send_raw_transaction(raw_transaction)
        logger.info(
            "TransferOperations: submitted %s (nonce %s) from %s",
            tx_hash,
            transaction.get("nonce"),
            self.identity.address,
        )
        return TransactionHandle(
            tx_hash,
            self._rpc,
            sender=self.identity.address,
            to=to,
            value=value,
            nonce=transaction.get("nonce"),
            token=token,
            poll_interval=self.config.poll_interval,
        )

    # --- Transfers ---

    async def send_native(
        self, to: str, amount: Decimal | str | int
    ) -> TransactionHandle:
        """Transfer native coin. Inputs are validated before any network call."""
        recipient = validate_address(to)
        value = parse_units(amount, self.config.native_decimals)
        logger.info(
            "TransferOperations: sending %s %s (%d wei) to %s",
            amount,
            self.config.native_symbol,
            value,
            recipient,
        )

        transaction = await self._base_params()
        transaction.update({"to": recipient, "value": value})
        if "gas" not in transaction:
            transaction["gas"] = await self._rpc.estimate_gas(
                {"from": self.identity.address, "to": recipient, "value": value}
            )
        return await self._sign_and_submit(transaction, recipient, value)

    async def send_token(
        self, token_address: str, to: str, amount: Decimal | str | int
    ) -> TransactionHandle:
        """Transfer ERC20 tokens, scaling ``amount`` by the token's decimals."""
        token = validate_address(token_address)
        recipient = validate_address(to)
        validate_amount(amount)

        probe = await self._query_operations.probe_token(token)
        value = parse_units(amount, probe.decimals)
        logger.info(
            "TransferOperations: sending %s of token %s (%d base units, %d decimals) to %s",
            amount,
            token,
            value,
            probe.decimals,
            recipient,
        )

        params = await self._base_params()
        transaction = await self._rpc.build_token_transfer(token, recipient, value, params)
        return await self._sign_and_submit(transaction, recipient, value, token=token)
