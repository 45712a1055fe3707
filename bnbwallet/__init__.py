# bnbwallet/__init__.py

# Protocols
from .wallets import IWallet

# Wallet Classes
from .wallets import (
    BNBWallet,
    create_wallet,
    create_wallet_from_private_key,
    create_random_wallet,
    create_wallet_from_mnemonic,
)
from .libs.rpc import BNBWalletRpc, IEvmRpc
from .libs.account_helper import AccountHelper
from .libs.erc20 import ERC20_ABI

# Models
from .models import (
    WalletConfig,
    SigningIdentity,
    WalletCreated,
    TransactionHandle,
    TransactionReceipt,
)

# Errors
from .errors import (
    WalletException,
    InvalidKeyError,
    InvalidAddressError,
    InvalidAmountError,
    NetworkError,
    ContractError,
    SigningError,
    TransactionFailedError,
    TimeoutException,
)

# Utilities
from .utils.conversion import parse_units, format_units, parse_ether, format_ether
from .utils.validation import validate_amount, validate_address

__all__ = [
    # Protocols
    "IWallet",
    "IEvmRpc",
    # ------------------------
    # Wallet classes
    "BNBWallet",
    "create_wallet",
    "create_wallet_from_private_key",
    "create_random_wallet",
    "create_wallet_from_mnemonic",
    "BNBWalletRpc",
    "AccountHelper",
    "ERC20_ABI",
    # ------------------------
    # Models
    "WalletConfig",
    "SigningIdentity",
    "WalletCreated",
    "TransactionHandle",
    "TransactionReceipt",
    # ------------------------
    # Errors
    "WalletException",
    "InvalidKeyError",
    "InvalidAddressError",
    "InvalidAmountError",
    "NetworkError",
    "ContractError",
    "SigningError",
    "TransactionFailedError",
    "TimeoutException",
    # ------------------------
    # Utils
    "parse_units",
    "format_units",
    "parse_ether",
    "format_ether",
    "validate_amount",
    "validate_address",
]
