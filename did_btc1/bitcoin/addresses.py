"""Bitcoin address encodings of a secp256k1 public key."""

from typing import NamedTuple

from bip_utils import P2PKHAddrEncoder, P2TRAddrEncoder, P2WPKHAddrEncoder

from .network import Network

BITCOIN_URI_SCHEME = "bitcoin"


class BeaconAddresses(NamedTuple):
    """The three standard addresses of one public key."""

    p2pkh: str
    p2wpkh: str
    p2tr: str


def p2pkh_address(public_key: bytes, network: Network) -> str:
    """Legacy pay-to-public-key-hash address."""
    return P2PKHAddrEncoder.EncodeKey(public_key, net_ver=network.p2pkh_version)


def p2wpkh_address(public_key: bytes, network: Network) -> str:
    """Segwit v0 pay-to-witness-public-key-hash address."""
    return P2WPKHAddrEncoder.EncodeKey(
        public_key, hrp=network.segwit_hrp, wit_ver=0
    )


def p2tr_address(public_key: bytes, network: Network) -> str:
    """Taproot address, key path only, with the key as internal key."""
    return P2TRAddrEncoder.EncodeKey(public_key, hrp=network.segwit_hrp)


def beacon_addresses(public_key: bytes, network: Network) -> BeaconAddresses:
    """Encode a compressed public key as legacy, segwit and taproot addresses."""
    return BeaconAddresses(
        p2pkh=p2pkh_address(public_key, network),
        p2wpkh=p2wpkh_address(public_key, network),
        p2tr=p2tr_address(public_key, network),
    )


def bitcoin_uri(address: str) -> str:
    """Format an address as a `bitcoin:` URI."""
    return f"{BITCOIN_URI_SCHEME}:{address}"
