import pytest

from did_btc1.bitcoin.network import Network
from did_btc1.wallet.keys import derive_key_pair

# BIP-39 reference mnemonic
TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
TEST_MAINNET_P2PKH = "1LqBGSKuX5yYUonjxT5qGfpUsXKYYWeabA"


@pytest.fixture
def mnemonic():
    return TEST_MNEMONIC


@pytest.fixture
def key_pair():
    return derive_key_pair(TEST_MNEMONIC, Network.MAINNET)


@pytest.fixture
def public_key(key_pair):
    return key_pair.public_key
