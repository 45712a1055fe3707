from .protocols import IWallet
from .wallet import BNBWallet
from .wallet_factory import (
    create_wallet,
    create_wallet_from_private_key,
    create_random_wallet,
    create_wallet_from_mnemonic,
)
from ..libs.rpc import BNBWalletRpc

__all__ = [
    "IWallet",
    "BNBWallet",
    "create_wallet",
    "create_wallet_from_private_key",
    "create_random_wallet",
    "create_wallet_from_mnemonic",
    "BNBWalletRpc",
]
