import pytest
from unittest.mock import AsyncMock

from bnbwallet.libs.rpc import IEvmRpc

# Hardhat / anvil development account #0
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TEST_MNEMONIC = "test test test test test test test test test test test junk"

RECIPIENT = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
# Hardhat account #2, stands in for a token contract
TOKEN = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
PROVIDER_URL = "https://testnet.example/rpc"


def pytest_addoption(parser):
    parser.addoption(
        "--all", action="store_true", help="run all tests, including integration ones"
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--all"):
        skip_integration = pytest.mark.skip(reason="need --all option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: needs a live JSON-RPC endpoint")


@pytest.fixture
def private_key():
    return TEST_PRIVATE_KEY


@pytest.fixture
def address():
    return TEST_ADDRESS


@pytest.fixture
def mock_rpc():
    """Fixture that provides a mocked RPC client instance"""
    mock = AsyncMock(spec=IEvmRpc)
    mock.chain_id.return_value = 97
    mock.gas_price.return_value = 5 * 10**9
    mock.get_transaction_count.return_value = 7
    mock.estimate_gas.return_value = 21000
    mock.send_raw_transaction.return_value = "0x" + "ab" * 32
    return mock
