"""Wallet-related exceptions."""

from ..core.error import BaseError


class WalletError(BaseError):
    """General wallet exception."""


class KeyDerivationError(WalletError):
    """Hierarchical deterministic derivation did not yield a usable key pair."""

    def __init__(self, *args, **kwargs):
        """Initialize the error with its stable error code."""
        kwargs.setdefault("error_code", "keyDerivationFailure")
        super().__init__(*args, **kwargs)
