import logging
from decimal import Decimal
from typing import Callable, Optional

from ..libs.account_helper import AccountHelper
from ..libs.rpc import BNBWalletRpc, IEvmRpc
from ..models import (
    SigningIdentity,
    TransactionHandle,
    TransactionReceipt,
    WalletConfig,
    WalletCreated,
)
from ..utils.validation import validate_address
from .components import QueryOperations, TransferOperations
from .protocols import IWallet

# Configure logging
logger = logging.getLogger(__name__)

DiagnosticsCallback = Callable[[WalletCreated], None]


class BNBWallet(IWallet):
    """
    Wallet for BNB Smart Chain or any EVM-compatible chain.

    Binds a signing identity to a JSON-RPC endpoint and exposes native and
    ERC20 balances and transfers in human-readable decimal units. Transfers
    return a TransactionHandle as soon as the endpoint accepts them; call
    ``await handle.wait()`` to observe confirmation.
    """

    def __init__(
        self,
        private_key: Optional[str] = None,
        provider_url: Optional[str] = None,
        *,
        config: Optional[WalletConfig] = None,
        rpc: Optional[IEvmRpc] = None,
        identity: Optional[SigningIdentity] = None,
        on_created: Optional[DiagnosticsCallback] = None,
    ):
        """
        Initialize the wallet. No network request is made.

        Args:
            private_key: Hex private key of an existing wallet. When omitted
                or empty a new key and mnemonic are generated.
            provider_url: JSON-RPC endpoint URL
            config: Optional wallet configuration
            rpc: Prebuilt RPC client, used instead of one built from provider_url
            identity: Prebuilt identity, e.g. restored from a mnemonic
            on_created: Called once with a WalletCreated event holding the
                address, private key and mnemonic. The event carries secrets.

        Raises:
            InvalidKeyError: If private_key is malformed
            ValueError: If no endpoint is given, or both private_key and identity are
        """
        self.config = config or WalletConfig()

        if identity is not None and private_key:
            raise ValueError("Pass either private_key or identity, not both")
        generated = False
        if identity is None:
            if private_key:
                identity = AccountHelper.from_private_key(private_key)
            else:
                identity = AccountHelper.generate()
                generated = True
        self.identity = identity

        if rpc is None:
            rpc = BNBWalletRpc(provider_url, request_timeout=self.config.request_timeout)
        self.provider_url = provider_url or getattr(rpc, "url", None)
        self._rpc = rpc

        # Instantiate Components
        self._query_operations = QueryOperations(self.identity, self.config, self._rpc)
        self._transfer_operations = TransferOperations(
            self.identity, self.config, self._rpc, self._query_operations
        )

        logger.info(
            "Initialized %s wallet %s on %s",
            "new" if generated else "imported",
            self.identity.address,
            self.provider_url,
        )
        if on_created is not None:
            on_created(
                WalletCreated(
                    address=self.identity.address,
                    private_key=self.identity.private_key,
                    mnemonic=self.identity.mnemonic,
                    generated=generated,
                )
            )

    # --- Identity ---

    def get_address(self) -> str:
        """Checksummed public address of the wallet."""
        return self.identity.address

    def get_private_key(self) -> str:
        """
        Raw 0x-prefixed private key.

        Anyone holding this value controls the funds. Avoid logging or
        displaying it outside of local development.
        """
        return self.identity.private_key

    def get_mnemonic(self) -> Optional[str]:
        """Mnemonic phrase for generated wallets, None for imported keys."""
        return self.identity.mnemonic

    # --- Queries ---

    async def get_balance(self) -> str:
        """Native coin balance (e.g. BNB) as a decimal string such as "0.01"."""
        return await self._query_operations.native_balance()

    async def get_transaction_receipt(
        self, tx_hash: str
    ) -> Optional[TransactionReceipt]:
        """Receipt of a transaction, or None if it is unknown or not mined yet."""
        return await self._query_operations.transaction_receipt(tx_hash)

    async def get_token_balance(self, token_address: str) -> str:
        """
        ERC20 balance of the wallet as a decimal string.

        Raises:
            InvalidAddressError: If token_address is malformed
            ContractError: If no ERC20 contract answers at token_address
            NetworkError: If the endpoint cannot be reached
        """
        token = validate_address(token_address)
        return await self._query_operations.token_balance(token)

    # --- Transfers ---

    async def send_transaction(
        self, to: str, amount: Decimal | str | int
    ) -> TransactionHandle:
        """
        Send native coin.

        Args:
            to: Recipient address
            amount: Amount in whole units, e.g. "0.01"

        Raises:
            InvalidAddressError: If the recipient is malformed
            InvalidAmountError: If the amount is invalid
            NetworkError: If the endpoint rejects the transaction
        """
        return await self._transfer_operations.send_native(to, amount)

    async def send_token(
        self, token_address: str, to: str, amount: Decimal | str | int
    ) -> TransactionHandle:
        """
        Send ERC20 tokens.

        Args:
            token_address: Token contract address
            to: Recipient address
            amount: Amount in the token's whole units, e.g. "10.5"

        Raises:
            InvalidAddressError: If an address is malformed
            InvalidAmountError: If the amount is invalid for the token's decimals
            ContractError: If no ERC20 contract answers at token_address
            NetworkError: If the endpoint rejects the transaction
        """
        return await self._transfer_operations.send_token(token_address, to, amount)

    def __str__(self) -> str:
        return f"BNBWallet: Address={self.identity.address}, Provider={self.provider_url}"
