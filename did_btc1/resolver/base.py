"""Base Class for DID Resolvers."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Mapping, NamedTuple, Optional, Pattern, Union

from pydid import DID

from ..core.error import BaseError


class ResolverError(BaseError):
    """Base class for resolver exceptions."""

    ERROR_CODE = "internalError"

    def __init__(self, *args, **kwargs):
        """Initialize the error, defaulting the error code to the class code."""
        kwargs.setdefault("error_code", self.ERROR_CODE)
        super().__init__(*args, **kwargs)


class DIDNotFound(ResolverError):
    """Raised when DID is not found in verifiable data registry."""

    ERROR_CODE = "notFound"


class DIDMethodNotSupported(ResolverError):
    """Raised when no resolver is registered for a given did method."""

    ERROR_CODE = "methodNotSupported"


class InvalidDIDError(ResolverError):
    """Raised when a DID is not well formed for its method."""

    ERROR_CODE = "invalidDid"


class ResolverType(Enum):
    """Resolver Type declarations."""

    NATIVE = "native"
    NON_NATIVE = "non-native"


class ResolutionMetadata(NamedTuple):
    """Resolution Metadata."""

    resolver_type: ResolverType
    resolver: str
    retrieved_time: str
    duration: int

    def serialize(self) -> dict:
        """Return serialized resolution metadata."""
        return {
            "resolverType": self.resolver_type.value,
            "resolver": self.resolver,
            "retrieved": self.retrieved_time,
            "duration": self.duration,
        }


class DidResolutionResult(NamedTuple):
    """Outcome of a resolution: a document or an error, with their metadata."""

    did_document: Optional[dict] = None
    did_resolution_metadata: dict = {}
    did_document_metadata: dict = {}

    @classmethod
    def from_error(cls, error: str, message: str = None) -> "DidResolutionResult":
        """Build an empty result carrying an error code and optional message."""
        metadata = {"error": error}
        if message:
            metadata["errorMessage"] = message
        return cls(did_resolution_metadata=metadata)

    @property
    def error(self) -> Optional[str]:
        """Accessor for the resolution error code."""
        return self.did_resolution_metadata.get("error")

    def serialize(self) -> dict:
        """Return serialized resolution result."""
        return {
            "didDocument": self.did_document,
            "didResolutionMetadata": dict(self.did_resolution_metadata),
            "didDocumentMetadata": dict(self.did_document_metadata),
        }


class BaseDIDResolver(ABC):
    """Base Class for DID Resolvers."""

    def __init__(self, type_: Optional[ResolverType] = None):
        """Initialize BaseDIDResolver.

        Args:
            type_ (Type): Type of resolver, native or non-native
        """
        self.type = type_ or ResolverType.NON_NATIVE

    @property
    def native(self):
        """Return if this resolver is native."""
        return self.type == ResolverType.NATIVE

    @property
    def supported_did_regex(self) -> Pattern:
        """Supported DID regex for matching this resolver to DIDs it can resolve.

        Override this property with a class var or similar to use regex
        matching on DIDs to determine if this resolver supports a given DID.
        """
        raise NotImplementedError(
            "supported_did_regex must be overriden by subclasses of BaseResolver "
            "to use default supports method"
        )

    async def supports(self, did: str) -> bool:
        """Return if this resolver supports the given DID."""
        return bool(self.supported_did_regex.match(did))

    async def resolve(
        self, did: Union[str, DID], options: Optional[Mapping] = None
    ) -> dict:
        """Resolve a DID using this resolver."""
        if isinstance(did, DID):
            did = str(did)
        else:
            DID.validate(did)
        if not await self.supports(did):
            raise DIDMethodNotSupported(
                f"{self.__class__.__name__} does not support DID method for: {did}"
            )

        return await self._resolve(did, options or {})

    @abstractmethod
    async def _resolve(self, did: str, options: Mapping) -> dict:
        """Resolve a DID using this resolver."""
