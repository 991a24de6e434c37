"""the did resolver.

responsible for keeping track of all resolvers. more importantly
retrieving did's from different sources provided by the method type.
Resolution failures are reported as result data, never raised.
"""

import asyncio
from datetime import datetime, timezone
from itertools import chain
import logging
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from pydid import DID, DIDError

from .base import (
    BaseDIDResolver,
    DIDMethodNotSupported,
    DIDNotFound,
    DidResolutionResult,
    InvalidDIDError,
    ResolutionMetadata,
    ResolverError,
)

LOGGER = logging.getLogger(__name__)


class DIDResolver:
    """did resolver registry."""

    DEFAULT_TIMEOUT = 30

    def __init__(self, resolvers: Optional[List[BaseDIDResolver]] = None):
        """Create DID Resolver."""
        self.resolvers = resolvers or []

    def register_resolver(self, resolver: BaseDIDResolver):
        """Register a new resolver."""
        self.resolvers.append(resolver)

    async def _resolve(
        self,
        did: Union[str, DID],
        options: Optional[Mapping] = None,
        *,
        timeout: Optional[int] = None,
    ) -> Tuple[BaseDIDResolver, dict]:
        """Retrieve doc and return with resolver."""
        if isinstance(did, DID):
            did = str(did)
        elif not isinstance(did, str):
            raise InvalidDIDError(f"Invalid DID: {did}")
        else:
            try:
                DID.validate(did)
            except DIDError as err:
                raise InvalidDIDError(f"Invalid DID: {did}") from err

        for resolver in await self._match_did_to_resolver(did):
            try:
                LOGGER.debug("Resolving DID %s with %s", did, resolver)
                document = await asyncio.wait_for(
                    resolver.resolve(did, options),
                    timeout if timeout is not None else self.DEFAULT_TIMEOUT,
                )
                LOGGER.debug("Resolved DID %s with %s", did, resolver)
                return resolver, document
            except DIDNotFound as err:
                LOGGER.debug("DID %s not found by resolver %s: %s", did, resolver, err)
                not_found = err

        raise not_found

    async def resolve_with_metadata(
        self,
        did: Union[str, DID],
        options: Optional[Mapping] = None,
        *,
        timeout: Optional[int] = None,
    ) -> DidResolutionResult:
        """Resolve a DID and return a DidResolutionResult.

        Every failure, including a timeout, becomes an error result.
        """
        resolution_start_time = datetime.now(tz=timezone.utc)

        try:
            resolver, doc = await self._resolve(did, options, timeout=timeout)
        except asyncio.TimeoutError:
            LOGGER.warning("Timed out resolving DID %s", did)
            return DidResolutionResult.from_error(
                ResolverError.ERROR_CODE, f"Timed out resolving {did}"
            )
        except ResolverError as err:
            LOGGER.debug("Failed to resolve DID %s: %s", did, err.roll_up)
            return DidResolutionResult.from_error(err.error_code, err.message)

        time_now = datetime.now(tz=timezone.utc)
        duration = int((time_now - resolution_start_time).total_seconds() * 1000)
        retrieved_time = time_now.strftime("%Y-%m-%dT%H:%M:%SZ")
        resolver_metadata = ResolutionMetadata(
            resolver.type, type(resolver).__qualname__, retrieved_time, duration
        )
        return DidResolutionResult(
            did_document=doc,
            did_resolution_metadata=resolver_metadata.serialize(),
        )

    async def _match_did_to_resolver(self, did: str) -> Sequence[BaseDIDResolver]:
        """Generate supported DID Resolvers.

        Native resolvers are yielded first, in registered order followed by
        non-native resolvers in registered order.
        """
        valid_resolvers = [
            resolver for resolver in self.resolvers if await resolver.supports(did)
        ]
        LOGGER.debug("Valid resolvers for DID %s: %s", did, valid_resolvers)
        native_resolvers = filter(lambda resolver: resolver.native, valid_resolvers)
        non_native_resolvers = filter(
            lambda resolver: not resolver.native, valid_resolvers
        )
        resolvers = list(chain(native_resolvers, non_native_resolvers))
        if not resolvers:
            raise DIDMethodNotSupported(f'No resolver supporting DID "{did}" loaded')
        return resolvers
