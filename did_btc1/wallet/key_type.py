"""Key type code."""


class KeyType:
    """Key Type class."""

    def __init__(self, key_type: str, jwk_crv: str):
        """Construct key type."""
        self._type: str = key_type
        self._jwk_crv: str = jwk_crv

    @property
    def key_type(self) -> str:
        """Get Key type, type. Also the algorithm name accepted at creation."""
        return self._type

    @property
    def jwk_crv(self) -> str:
        """Get the JWK `crv` value for keys of this type."""
        return self._jwk_crv

    def __repr__(self) -> str:
        """Return a human readable representation."""
        return f"<KeyType({self._type})>"


SECP256K1: KeyType = KeyType("secp256k1", "secp256k1")
