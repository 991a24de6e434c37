"""Bitcoin networks recognized by the did:btc1 method."""

from enum import Enum
from typing import NamedTuple, Optional

NetworkSpec = NamedTuple(
    "NetworkSpec",
    [
        ("network_name", str),
        ("coin_type", int),
        ("p2pkh_version", bytes),
        ("segwit_hrp", str),
    ],
)


class Network(Enum):
    """Network enum with the parameters needed to derive keys and addresses."""

    MAINNET = NetworkSpec("mainnet", 0, b"\x00", "bc")
    TESTNET = NetworkSpec("testnet", 1, b"\x6f", "tb")
    SIGNET = NetworkSpec("signet", 1, b"\x6f", "tb")
    REGTEST = NetworkSpec("regtest", 1, b"\x6f", "bcrt")

    @property
    def network_name(self) -> str:
        """Getter for the network name used in creation options."""
        return self.value.network_name

    @property
    def coin_type(self) -> int:
        """Getter for the BIP-44 coin type."""
        return self.value.coin_type

    @property
    def p2pkh_version(self) -> bytes:
        """Getter for the legacy address version byte."""
        return self.value.p2pkh_version

    @property
    def segwit_hrp(self) -> str:
        """Getter for the segwit and taproot human-readable part."""
        return self.value.segwit_hrp

    @classmethod
    def from_name(cls, network_name: str) -> Optional["Network"]:
        """Get Network instance from its name. Returns None if not found."""
        for network in Network:
            if network.network_name == network_name:
                return network

        return None

    @classmethod
    def names(cls) -> list:
        """List the recognized network names."""
        return [network.network_name for network in Network]


DEFAULT_NETWORK = Network.MAINNET
