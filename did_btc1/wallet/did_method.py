"""did method.py describes the did methods and the key types they accept."""

from typing import List

from .key_type import SECP256K1, KeyType


class DIDMethod:
    """Class to represent a did method."""

    def __init__(self, name: str, key_types: List[KeyType]):
        """Construct did method class."""
        self._method_name: str = name
        self._supported_key_types: List[KeyType] = key_types

    @property
    def method_name(self):
        """Get method name."""
        return self._method_name

    @property
    def supported_key_types(self):
        """Get supported key types."""
        return self._supported_key_types

    def supports_algorithm(self, algorithm: str) -> bool:
        """Check whether a requested key algorithm maps to a supported key type."""
        return any(
            key_type.key_type == algorithm for key_type in self.supported_key_types
        )


BTC1 = DIDMethod(name="btc1", key_types=[SECP256K1])
