from unittest import TestCase

from ..error import (
    DIDCreationError,
    DuplicateMethodIdError,
    IncompleteServiceError,
    InvalidNetworkError,
    UnsupportedAlgorithmError,
)
from ..models import CreateOptions, load_create_options
from ..validation import CreateParametersValidation

SERVICE = {"id": "#beacon", "type": "SingletonBeacon", "serviceEndpoint": "bitcoin:a"}


class TestCreateParametersValidation(TestCase):
    def setUp(self):
        self.validation = CreateParametersValidation()

    def test_valid(self):
        self.validation.validate(CreateOptions())
        self.validation.validate(
            CreateOptions(
                network="regtest",
                verification_methods=(
                    {"id": "#key-1", "algorithm": "secp256k1"},
                    {"id": "#key-2", "algorithm": "secp256k1"},
                    {"algorithm": "secp256k1"},
                ),
                services=(SERVICE,),
            )
        )

    def test_unsupported_algorithm(self):
        for method in ({"algorithm": "ed25519"}, {"id": "#key-1"}):
            with self.assertRaises(UnsupportedAlgorithmError) as context:
                self.validation.validate(
                    CreateOptions(verification_methods=(method,))
                )
            assert context.exception.error_code == "unsupportedAlgorithm"

    def test_duplicate_method_id(self):
        with self.assertRaises(DuplicateMethodIdError) as context:
            self.validation.validate(
                CreateOptions(
                    verification_methods=(
                        {"id": "#key-1", "algorithm": "secp256k1"},
                        {"id": "#key-1", "algorithm": "secp256k1"},
                    )
                )
            )
        assert context.exception.error_code == "duplicateMethodId"

    def test_incomplete_service(self):
        for prop in ("id", "type", "serviceEndpoint"):
            missing = {k: v for k, v in SERVICE.items() if k != prop}
            empty = dict(SERVICE, **{prop: ""})
            for service in (missing, empty):
                with self.assertRaises(IncompleteServiceError) as context:
                    self.validation.validate(
                        CreateOptions(services=(SERVICE, service))
                    )
                assert context.exception.error_code == "incompleteService"

    def test_invalid_network(self):
        with self.assertRaises(InvalidNetworkError) as context:
            self.validation.validate(CreateOptions(network="mainnet2"))
        assert context.exception.error_code == "invalidNetwork"
        assert "mainnet2" in context.exception.message

    def test_check_order(self):
        options = CreateOptions(
            network="mainnet2",
            verification_methods=(
                {"id": "#key-1", "algorithm": "ed25519"},
                {"id": "#key-1", "algorithm": "secp256k1"},
            ),
            services=({"id": "#beacon"},),
        )
        with self.assertRaises(UnsupportedAlgorithmError):
            self.validation.validate(options)

        options = options._replace(
            verification_methods=tuple(
                dict(vm, algorithm="secp256k1") for vm in options.verification_methods
            )
        )
        with self.assertRaises(DuplicateMethodIdError):
            self.validation.validate(options)

        options = options._replace(verification_methods=())
        with self.assertRaises(IncompleteServiceError):
            self.validation.validate(options)

        options = options._replace(services=None)
        with self.assertRaises(InvalidNetworkError):
            self.validation.validate(options)

    def test_errors_are_creation_errors(self):
        with self.assertRaises(DIDCreationError):
            self.validation.validate(CreateOptions(network="moon"))

    def test_unhashable_method_ids(self):
        options = load_create_options(
            {"verificationMethods": [{"id": ["#a"], "algorithm": "secp256k1"}]}
        )
        self.validation.validate(options)

        options = load_create_options(
            {
                "verificationMethods": [
                    {"id": ["#a"], "algorithm": "secp256k1"},
                    {"id": ["#a"], "algorithm": "secp256k1"},
                ]
            }
        )
        with self.assertRaises(DuplicateMethodIdError):
            self.validation.validate(options)
