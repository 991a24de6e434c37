"""Tooling to validate DID creation parameters."""

from itertools import combinations

from ..bitcoin.network import Network
from ..wallet.did_method import BTC1, DIDMethod
from .error import (
    DuplicateMethodIdError,
    IncompleteServiceError,
    InvalidNetworkError,
    UnsupportedAlgorithmError,
)
from .models import CreateOptions

REQUIRED_SERVICE_PROPERTIES = ("id", "type", "serviceEndpoint")


class CreateParametersValidation:
    """Check creation options before any key material is generated.

    Checks run in a fixed order and the first failure is raised.
    """

    def __init__(self, did_method: DIDMethod = BTC1):
        """:param did_method: DID method whose key types are accepted."""
        self.did_method = did_method

    def validate(self, options: CreateOptions):
        """Run every check against the options."""
        self.validate_algorithms(options)
        self.validate_method_ids(options)
        self.validate_services(options)
        self.validate_network(options)

    def validate_algorithms(self, options: CreateOptions):
        """Every requested verification method must use a supported key type."""
        if any(
            not self.did_method.supports_algorithm(vm.get("algorithm"))
            for vm in options.verification_methods
        ):
            raise UnsupportedAlgorithmError(
                "One or more verification method algorithms are not supported"
            )

    @staticmethod
    def validate_method_ids(options: CreateOptions):
        """Verification method ids that are given must be pairwise unique."""
        method_ids = [vm["id"] for vm in options.verification_methods if "id" in vm]
        if any(first == second for first, second in combinations(method_ids, 2)):
            raise DuplicateMethodIdError(
                "One or more verification method IDs are not unique"
            )

    @staticmethod
    def validate_services(options: CreateOptions):
        """Every requested service needs a non-empty id, type and endpoint."""
        if any(
            not service.get(prop)
            for service in options.services or ()
            for prop in REQUIRED_SERVICE_PROPERTIES
        ):
            raise IncompleteServiceError(
                "One or more services are missing required properties"
            )

    @staticmethod
    def validate_network(options: CreateOptions):
        """A requested network must be one of the recognized networks."""
        if options.network and not Network.from_name(options.network):
            raise InvalidNetworkError(f"Invalid network: {options.network}")
