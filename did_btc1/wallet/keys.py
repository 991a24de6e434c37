"""Hierarchical deterministic key material for did:btc1 identifiers.

A fresh BIP-39 mnemonic is generated for every new identifier and the signing
key is derived from its seed at the BIP-44 path `m/44'/<coin_type>'/0'/0/0`,
where the coin type is 0 on mainnet and 1 on every test network.
"""

import logging
from typing import NamedTuple

from bip_utils import (
    Bip32KeyError,
    Bip32PathError,
    Bip32Slip10Secp256k1,
    Bip39MnemonicGenerator,
    Bip39MnemonicValidator,
    Bip39SeedGenerator,
    Bip39WordsNum,
)

from ..bitcoin.network import Network
from .error import KeyDerivationError

LOGGER = logging.getLogger(__name__)

MNEMONIC_WORDS = 12


class KeyPair(NamedTuple):
    """A secp256k1 key pair: compressed public point and private scalar."""

    public_key: bytes
    private_key: bytes


def derivation_path(network: Network) -> str:
    """Return the BIP-44 derivation path of the identity key on a network."""
    return f"m/44'/{network.coin_type}'/0'/0/0"


def generate_mnemonic() -> str:
    """Generate a new 12 word English mnemonic (128 bits of entropy)."""
    return (
        Bip39MnemonicGenerator().FromWordsNumber(Bip39WordsNum.WORDS_NUM_12).ToStr()
    )


def derive_key_pair(mnemonic: str, network: Network) -> KeyPair:
    """Derive the identity key pair from a mnemonic.

    Args:
        mnemonic: BIP-39 mnemonic, seed passphrase is empty
        network: network selecting the coin type of the derivation path

    Returns:
        The derived key pair

    Raises:
        KeyDerivationError: the mnemonic is invalid or derivation yields no key

    """
    if not Bip39MnemonicValidator().IsValid(mnemonic):
        raise KeyDerivationError("Failed to derive hd keypair: invalid mnemonic")

    path = derivation_path(network)
    LOGGER.debug("Deriving identity key at %s", path)
    try:
        seed = Bip39SeedGenerator(mnemonic).Generate()
        child = Bip32Slip10Secp256k1.FromSeed(seed).DerivePath(path)
        public_key = child.PublicKey().RawCompressed().ToBytes()
        private_key = child.PrivateKey().Raw().ToBytes()
    except (Bip32KeyError, Bip32PathError) as err:
        raise KeyDerivationError("Failed to derive hd keypair") from err

    if not (public_key and private_key):
        raise KeyDerivationError("Failed to derive hd keypair")

    return KeyPair(public_key=public_key, private_key=private_key)
