from typing import Protocol, Optional
from decimal import Decimal

from ..models import SigningIdentity, TransactionHandle, TransactionReceipt


class IWallet(Protocol):
    """Protocol defining the interface of a signing EVM wallet."""

    identity: SigningIdentity
    provider_url: Optional[str]

    def get_address(self) -> str: ...
    def get_private_key(self) -> str: ...
    def get_mnemonic(self) -> Optional[str]: ...

    async def get_balance(self) -> str: ...
    async def send_transaction(
        self, to: str, amount: Decimal | str | int
    ) -> TransactionHandle: ...
    async def get_transaction_receipt(
        self, tx_hash: str
    ) -> Optional[TransactionReceipt]: ...
    async def get_token_balance(self, token_address: str) -> str: ...
    async def send_token(
        self, token_address: str, to: str, amount: Decimal | str | int
    ) -> TransactionHandle: ...
