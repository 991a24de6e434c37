import copy
import hashlib
import re
from unittest import IsolatedAsyncioTestCase, mock

from bip_utils import Bip39MnemonicValidator

from ...bitcoin.addresses import p2pkh_address
from ...bitcoin.network import Network
from ...wallet.error import KeyDerivationError
from ..encoding import bech32_decode_bytes, canonicalize
from ..error import (
    DuplicateMethodIdError,
    IncompleteServiceError,
    InvalidNetworkError,
    InvalidOptionsError,
    MethodNotSupportedError,
    UnsupportedAlgorithmError,
)
from .. import btc1 as test_module

TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
TEST_MAINNET_P2PKH = "1LqBGSKuX5yYUonjxT5qGfpUsXKYYWeabA"
DID_V1_RE = re.compile(r"^did:btc1:[a-z0-9]+$")


def intermediate_of(document: dict) -> dict:
    return {
        k: v for k, v in document.items() if k not in ("id", "verificationMethod")
    }


class TestDIDBtc1Create(IsolatedAsyncioTestCase):
    def setUp(self):
        self.method = test_module.DIDBtc1()

    async def test_create_default(self):
        result = await self.method.create()

        assert DID_V1_RE.match(result.did)
        assert result.did_document["id"] == result.did
        assert len(result.mnemonic.split()) == 12
        assert Bip39MnemonicValidator().IsValid(result.mnemonic)

        (vm,) = result.did_document["verificationMethod"]
        assert vm["id"] == "#initialKey"
        assert vm["type"] == "JsonWebKey"
        assert vm["controller"] == result.did
        assert vm["publicKeyJwk"]["kty"] == "EC"
        assert vm["publicKeyJwk"]["crv"] == "secp256k1"
        assert "d" in vm["publicKeyJwk"]

        endpoints = [s["serviceEndpoint"] for s in result.did_document["service"]]
        assert endpoints[0].startswith("bitcoin:1")
        assert endpoints[1].startswith("bitcoin:bc1q")
        assert endpoints[2].startswith("bitcoin:bc1p")

        serialized = result.serialize()
        assert serialized["mnemonic"] == result.mnemonic
        assert serialized["didDocument"] == result.did_document

    async def test_create_known_mnemonic(self):
        with mock.patch.object(
            test_module, "generate_mnemonic", mock.MagicMock(return_value=TEST_MNEMONIC)
        ):
            first = await self.method.create()
            second = await self.method.create({"type": "deterministic"})

        assert first == second
        assert first.mnemonic == TEST_MNEMONIC
        hrp, public_key = bech32_decode_bytes(first.did.split(":")[-1])
        assert hrp == "k"
        assert p2pkh_address(public_key, Network.MAINNET) == TEST_MAINNET_P2PKH
        assert (
            first.did_document["service"][0]["serviceEndpoint"]
            == f"bitcoin:{TEST_MAINNET_P2PKH}"
        )

    async def test_create_versioned(self):
        result = await self.method.create({"version": 2})
        assert result.did.startswith("did:btc1:2:k1:")

        result = await self.method.create({"version": 4, "type": "sidecar"})
        assert result.did.startswith("did:btc1:4:x1:")

    async def test_create_case_insensitive_type(self):
        result = await self.method.create({"type": "Deterministic"})
        assert result.mnemonic

    async def test_create_sidecar(self):
        result = await self.method.create({"type": "sidecar"})

        assert result.mnemonic is None
        assert "mnemonic" not in result.serialize()
        assert DID_V1_RE.match(result.did)
        assert "k1" not in result.did

        hrp, payload = bech32_decode_bytes(result.did.split(":")[-1])
        assert hrp == "x"
        canonical = canonicalize(intermediate_of(result.did_document))
        assert payload[:5] == b"\x01\x80\x04\x12\x20"
        assert payload[5:] == hashlib.sha256(canonical).digest()
        assert "d" in result.did_document["verificationMethod"][0]["publicKeyJwk"]

    async def test_create_unknown_type_is_sidecar(self):
        result = await self.method.create({"type": "other"})
        assert result.mnemonic is None
        assert result.did.startswith("did:btc1:x1")

    async def test_create_network(self):
        with mock.patch.object(
            test_module, "generate_mnemonic", mock.MagicMock(return_value=TEST_MNEMONIC)
        ):
            mainnet = await self.method.create()
            regtest = await self.method.create({"network": "regtest"})

        assert mainnet.did != regtest.did
        endpoints = [s["serviceEndpoint"] for s in regtest.did_document["service"]]
        assert endpoints[0].startswith(("bitcoin:m", "bitcoin:n"))
        assert endpoints[1].startswith("bitcoin:bcrt1q")
        assert endpoints[2].startswith("bitcoin:bcrt1p")

    async def test_create_services(self):
        services = [
            {"id": "#beacon", "type": "SingletonBeacon", "serviceEndpoint": "x:y"}
        ]
        options = {
            "network": "signet",
            "services": services,
            "verificationMethods": [{"id": "#initialKey", "algorithm": "secp256k1"}],
        }
        original = copy.deepcopy(options)

        result = await self.method.create(options)

        assert result.did_document["service"] == services
        assert options == original

    async def test_create_validation_x(self):
        cases = [
            (
                {"verificationMethods": [{"algorithm": "ed25519"}]},
                UnsupportedAlgorithmError,
            ),
            (
                {
                    "verificationMethods": [
                        {"id": "#a", "algorithm": "secp256k1"},
                        {"id": "#a", "algorithm": "secp256k1"},
                    ]
                },
                DuplicateMethodIdError,
            ),
            (
                {"services": [{"id": "#beacon", "type": "SingletonBeacon"}]},
                IncompleteServiceError,
            ),
            ({"network": "mainnet2"}, InvalidNetworkError),
            ({"version": "1"}, InvalidOptionsError),
            ("mainnet", InvalidOptionsError),
        ]
        for options, error in cases:
            with mock.patch.object(
                test_module, "generate_mnemonic", mock.MagicMock()
            ) as mock_generate:
                with self.assertRaises(error):
                    await self.method.create(options)
                mock_generate.assert_not_called()

    async def test_create_key_derivation_x(self):
        with mock.patch.object(
            test_module,
            "derive_key_pair",
            mock.MagicMock(side_effect=KeyDerivationError("Failed")),
        ):
            with self.assertRaises(KeyDerivationError) as context:
                await self.method.create()
        assert context.exception.error_code == "keyDerivationFailure"

    def test_method_name(self):
        assert test_module.DIDBtc1.method_name == "btc1"


class TestDIDBtc1SigningMethod(IsolatedAsyncioTestCase):
    async def test_get_signing_method(self):
        method = test_module.DIDBtc1()
        for options in (None, {"type": "sidecar"}):
            result = await method.create(options)
            signing_method = await method.get_signing_method(result.did_document)
            assert signing_method == result.did_document["verificationMethod"][0]

    async def test_get_signing_method_x(self):
        method = test_module.DIDBtc1()
        with self.assertRaises(MethodNotSupportedError):
            await method.get_signing_method({"id": "did:example:123"})


class TestDIDBtc1Resolve(IsolatedAsyncioTestCase):
    async def test_resolve(self):
        method = test_module.DIDBtc1()
        created = await method.create()
        sidecar = await method.create({"type": "sidecar", "version": 2})

        cases = [
            ("not-a-did", "invalidDid"),
            ("did:example:123", "methodNotSupported"),
            ("did:btc1:k1qqqq", "invalidDid"),
            (created.did, "notFound"),
            (sidecar.did, "notFound"),
        ]
        for did, error in cases:
            result = await method.resolve(did)
            assert result.error == error
            assert result.did_document is None
            serialized = result.serialize()
            assert serialized["didResolutionMetadata"]["error"] == error
            assert serialized["didResolutionMetadata"]["errorMessage"]
            assert serialized["didDocumentMetadata"] == {}

    async def test_resolve_custom_resolver(self):
        resolver = mock.MagicMock(resolve_with_metadata=mock.AsyncMock())
        method = test_module.DIDBtc1(resolver=resolver, timeout=5)

        result = await method.resolve("did:btc1:k1qqqq", {"network": "signet"})

        assert result is resolver.resolve_with_metadata.return_value
        resolver.resolve_with_metadata.assert_awaited_once_with(
            "did:btc1:k1qqqq", {"network": "signet"}, timeout=5
        )
