"""Wallet utility functions."""

import base64


def unpad(val: str) -> str:
    """Remove padding from base64 values if need be."""
    return val.rstrip("=")


def bytes_to_b64(val: bytes, urlsafe=False, pad=True, encoding: str = "ascii") -> str:
    """Convert a byte string to base 64."""
    b64 = (
        base64.urlsafe_b64encode(val).decode(encoding)
        if urlsafe
        else base64.b64encode(val).decode(encoding)
    )
    return b64 if pad else unpad(b64)


def int_to_bytes(val: int, length: int = 32) -> bytes:
    """Big-endian encoding of a field element, left padded to `length` bytes."""
    return val.to_bytes(length, "big")
