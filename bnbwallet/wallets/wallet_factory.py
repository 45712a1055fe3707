from typing import Optional

from ..libs.account_helper import AccountHelper, DEFAULT_ACCOUNT_PATH
from ..libs.rpc import IEvmRpc
from ..models import WalletConfig
from .protocols import IWallet
from .wallet import BNBWallet, DiagnosticsCallback


def create_wallet(
    provider_url: str,
    private_key: Optional[str] = None,
    config: Optional[WalletConfig] = None,
    *,
    rpc: Optional[IEvmRpc] = None,
    on_created: Optional[DiagnosticsCallback] = None,
) -> IWallet:
    """
    Creates a wallet bound to ``provider_url``, loading ``private_key`` when
    given and generating a new key with a mnemonic otherwise.
    """
    return BNBWallet(
        private_key,
        provider_url,
        config=config,
        rpc=rpc,
        on_created=on_created,
    )


def create_wallet_from_private_key(
    provider_url: str,
    private_key: str,
    config: Optional[WalletConfig] = None,
    *,
    rpc: Optional[IEvmRpc] = None,
) -> IWallet:
    """
    Creates a wallet from an existing private key.

    Raises:
        InvalidKeyError: If the private key is empty or malformed
    """
    identity = AccountHelper.from_private_key(private_key)
    return BNBWallet(provider_url=provider_url, config=config, rpc=rpc, identity=identity)


def create_random_wallet(
    provider_url: str,
    config: Optional[WalletConfig] = None,
    *,
    rpc: Optional[IEvmRpc] = None,
    on_created: Optional[DiagnosticsCallback] = None,
) -> IWallet:
    """
    Creates a wallet with a freshly generated key. The mnemonic returned by
    ``get_mnemonic()`` is the only way to recover it later.
    """
    return BNBWallet(
        provider_url=provider_url, config=config, rpc=rpc, on_created=on_created
    )


def create_wallet_from_mnemonic(
    provider_url: str,
    mnemonic: str,
    account_path: str = DEFAULT_ACCOUNT_PATH,
    config: Optional[WalletConfig] = None,
    *,
    rpc: Optional[IEvmRpc] = None,
) -> IWallet:
    """
    Restores a wallet from a BIP39 mnemonic phrase.

    Raises:
        InvalidKeyError: If the phrase is not a valid mnemonic
    """
    identity = AccountHelper.from_mnemonic(mnemonic, account_path=account_path)
    return BNBWallet(provider_url=provider_url, config=config, rpc=rpc, identity=identity)
