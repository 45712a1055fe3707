import pytest

from bnbwallet.libs.account_helper import AccountHelper, DEFAULT_ACCOUNT_PATH
from bnbwallet.errors import InvalidKeyError, SigningError
from bnbwallet.models import SigningIdentity, MNEMONIC_UNAVAILABLE

from conftest import TEST_ADDRESS, TEST_MNEMONIC, TEST_PRIVATE_KEY, RECIPIENT


class TestAccountHelper:
    """Tests for key loading, generation and signing."""

    def test_from_private_key(self):
        identity = AccountHelper.from_private_key(TEST_PRIVATE_KEY)

        assert isinstance(identity, SigningIdentity)
        assert identity.address == TEST_ADDRESS
        assert identity.private_key == TEST_PRIVATE_KEY
        assert identity.mnemonic is None
        assert identity.has_mnemonic is False
        assert identity.mnemonic_or_unavailable == MNEMONIC_UNAVAILABLE

    def test_from_private_key_without_prefix(self):
        identity = AccountHelper.from_private_key(TEST_PRIVATE_KEY[2:])
        assert identity.address == TEST_ADDRESS
        assert identity.private_key == TEST_PRIVATE_KEY

    def test_address_is_deterministic(self):
        addresses = {
            AccountHelper.from_private_key(TEST_PRIVATE_KEY).address for _ in range(3)
        }
        assert addresses == {TEST_ADDRESS}

    def test_eth_account_docs_key(self):
        identity = AccountHelper.from_private_key(
            "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
        )
        assert identity.address == "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"

    @pytest.mark.parametrize(
        "bad_key",
        ["", "0x1234", "z" * 64, "0x" + "0" * 64, None, 12345],
    )
    def test_invalid_private_key(self, bad_key):
        with pytest.raises(InvalidKeyError):
            AccountHelper.from_private_key(bad_key)

    def test_generate_has_mnemonic(self):
        identity = AccountHelper.generate()

        assert identity.has_mnemonic
        assert len(identity.mnemonic.split()) == 12
        assert identity.private_key.startswith("0x")
        assert len(identity.private_key) == 66

        # the phrase restores the same key
        restored = AccountHelper.from_mnemonic(identity.mnemonic)
        assert restored.address == identity.address
        assert restored.private_key == identity.private_key

    def test_generate_is_random(self):
        assert AccountHelper.generate().address != AccountHelper.generate().address

    def test_from_mnemonic(self):
        identity = AccountHelper.from_mnemonic(TEST_MNEMONIC)
        assert identity.address == TEST_ADDRESS
        assert identity.private_key == TEST_PRIVATE_KEY
        assert identity.mnemonic == TEST_MNEMONIC

    def test_from_mnemonic_other_index(self):
        identity = AccountHelper.from_mnemonic(
            TEST_MNEMONIC, account_path=DEFAULT_ACCOUNT_PATH[:-1] + "1"
        )
        assert identity.address == RECIPIENT

    def test_from_mnemonic_invalid(self):
        with pytest.raises(InvalidKeyError):
            AccountHelper.from_mnemonic("not a real mnemonic phrase at all")

    def test_repr_hides_secrets(self):
        identity = AccountHelper.from_mnemonic(TEST_MNEMONIC)
        assert TEST_PRIVATE_KEY not in repr(identity)
        assert "junk" not in repr(identity)

    def test_sign_transaction(self):
        identity = AccountHelper.from_private_key(TEST_PRIVATE_KEY)
        raw = AccountHelper.sign_transaction(
            identity,
            {
                "to": RECIPIENT,
                "value": 1,
                "gas": 21000,
                "gasPrice": 10**9,
                "nonce": 0,
                "chainId": 97,
            },
        )
        assert isinstance(raw, (bytes, bytearray))
        assert len(raw) > 0

    def test_invalid_private_key_message_hides_key(self):
        bad_key = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff"
        with pytest.raises(InvalidKeyError) as exc_info:
            AccountHelper.from_private_key(bad_key)
        assert "0xac09" not in str(exc_info.value)

    def test_invalid_mnemonic_message_hides_words(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            AccountHelper.from_mnemonic(" ".join(["notaword"] * 12))
        assert "notaword" not in str(exc_info.value)

    def test_sign_transaction_malformed_field(self):
        identity = AccountHelper.from_private_key(TEST_PRIVATE_KEY)
        with pytest.raises(SigningError):
            AccountHelper.sign_transaction(
                identity,
                {
                    "to": RECIPIENT,
                    "value": 1,
                    "gas": 21000,
                    "gasPrice": 10**9,
                    "nonce": "not-a-number",
                    "chainId": 97,
                },
            )
