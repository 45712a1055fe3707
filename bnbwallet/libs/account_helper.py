from typing import Any, Dict

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_hex

from ..errors import InvalidKeyError, SigningError, error_message
from ..models import SigningIdentity

# BIP44 path of the first Ethereum account, shared by BNB Smart Chain wallets
DEFAULT_ACCOUNT_PATH = "m/44'/60'/0'/0/0"

Account.enable_unaudited_hdwallet_features()


class AccountHelper:
    """Encapsulates all eth-account key operations"""

    @staticmethod
    def _identity(account: LocalAccount, mnemonic: str = None) -> SigningIdentity:
        return SigningIdentity(
            address=account.address,
            private_key=to_hex(account.key),
            mnemonic=mnemonic,
        )

    @staticmethod
    def from_private_key(private_key: str) -> SigningIdentity:
        """Load an identity from a hex private key (with or without 0x)"""
        if not isinstance(private_key, str) or not private_key:
            raise InvalidKeyError("Private key must be a non-empty hex string")
        try:
            account = Account.from_key(private_key)
        except Exception as e:
            raise InvalidKeyError("Invalid private key") from e
        return AccountHelper._identity(account)

    @staticmethod
    def generate() -> SigningIdentity:
        """Generate a new identity from the OS random source, with its mnemonic"""
        account, mnemonic = Account.create_with_mnemonic(
            account_path=DEFAULT_ACCOUNT_PATH
        )
        return AccountHelper._identity(account, mnemonic)

    @staticmethod
    def from_mnemonic(
        mnemonic: str, account_path: str = DEFAULT_ACCOUNT_PATH
    ) -> SigningIdentity:
        """Restore an identity from a BIP39 mnemonic phrase"""
        try:
            account = Account.from_mnemonic(mnemonic, account_path=account_path)
        except Exception as e:
            raise InvalidKeyError("Invalid mnemonic phrase") from e
        return AccountHelper._identity(account, " ".join(mnemonic.split()))

    @staticmethod
    def sign_transaction(identity: SigningIdentity, transaction: Dict[str, Any]) -> bytes:
        """Sign a transaction dict and return the raw payload for eth_sendRawTransaction"""
        try:
            signed = Account.sign_transaction(transaction, identity.private_key)
        except (TypeError, ValueError, KeyError) as e:
            raise SigningError(f"Could not sign transaction: {error_message(e)}") from e
        return signed.raw_transaction
