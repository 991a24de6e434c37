"""JSON Web Key representation of secp256k1 keys."""

from ecdsa import SECP256k1, MalformedPointError, VerifyingKey

from .error import WalletError
from .key_type import SECP256K1
from .util import bytes_to_b64, int_to_bytes


def _b64url(val: bytes) -> str:
    return bytes_to_b64(val, urlsafe=True, pad=False)


def public_key_coordinates(public_key: bytes) -> tuple:
    """Decompress a SEC1 encoded public key into its affine (x, y) coordinates."""
    try:
        point = VerifyingKey.from_string(public_key, curve=SECP256k1).pubkey.point
    except MalformedPointError as err:
        raise WalletError("Public key is not a valid secp256k1 point") from err
    return point.x(), point.y()


def jwk_from_key_pair(public_key: bytes, private_key: bytes = None) -> dict:
    """Build an EC JWK from a compressed public key and optional private scalar."""
    x, y = public_key_coordinates(public_key)
    jwk = {
        "kty": "EC",
        "crv": SECP256K1.jwk_crv,
        "x": _b64url(int_to_bytes(x)),
        "y": _b64url(int_to_bytes(y)),
    }
    if private_key:
        jwk["d"] = _b64url(private_key)
    return jwk
