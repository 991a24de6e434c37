"""Exceptions raised by did:btc1 operations."""

from ..core.error import BaseError


class DIDBtc1Error(BaseError):
    """Base class for did:btc1 errors. Subclasses carry a stable error code."""

    ERROR_CODE = None

    def __init__(self, *args, **kwargs):
        """Initialize the error, defaulting the error code to the class code."""
        kwargs.setdefault("error_code", self.ERROR_CODE)
        super().__init__(*args, **kwargs)


class DIDCreationError(DIDBtc1Error):
    """Creation options were rejected before any key material was generated."""


class InvalidOptionsError(DIDCreationError):
    """Creation options do not have the expected shape."""

    ERROR_CODE = "invalidOptions"


class UnsupportedAlgorithmError(DIDCreationError):
    """A requested verification method algorithm is not supported."""

    ERROR_CODE = "unsupportedAlgorithm"


class DuplicateMethodIdError(DIDCreationError):
    """Requested verification method ids are not unique."""

    ERROR_CODE = "duplicateMethodId"


class IncompleteServiceError(DIDCreationError):
    """A requested service lacks an id, type or endpoint."""

    ERROR_CODE = "incompleteService"


class InvalidNetworkError(DIDCreationError):
    """The requested network is not a recognized Bitcoin network."""

    ERROR_CODE = "invalidNetwork"


class SigningMethodError(DIDBtc1Error):
    """No verification method could be selected for signing."""


class MethodNotSupportedError(SigningMethodError):
    """The DID document does not belong to the did:btc1 method."""

    ERROR_CODE = "methodNotSupported"


class NoSigningKeyError(SigningMethodError):
    """No verification method with key material matches the request."""

    ERROR_CODE = "noSigningKey"


class InvalidIdentifierError(DIDBtc1Error):
    """A string is not a well formed did:btc1 identifier."""

    ERROR_CODE = "invalidDid"
