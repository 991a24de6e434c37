"""Parameter and result structures of did:btc1 creation."""

from typing import Mapping, NamedTuple, Optional, Tuple

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load
from marshmallow.validate import Range

from ..config.settings import Settings
from .error import InvalidOptionsError


class CreateOptions(NamedTuple):
    """Caller options of a creation request, as received."""

    network: Optional[str] = None
    version: Optional[int] = None
    did_type: Optional[str] = None
    verification_methods: Tuple[Mapping, ...] = ()
    services: Optional[Tuple[Mapping, ...]] = None

    @property
    def is_sidecar(self) -> bool:
        """Any explicit type other than `deterministic` selects sidecar mode."""
        return bool(self.did_type) and self.did_type.lower() != "deterministic"

    @classmethod
    def from_settings(cls, settings: Settings) -> "CreateOptions":
        """Build options from `btc1.*` settings."""
        return load_create_options(
            {
                "network": settings.get_str("btc1.network"),
                "version": settings.get_int("btc1.version"),
                "type": settings.get_str("btc1.type"),
                "verificationMethods": settings.get_value("btc1.verification_methods"),
                "services": settings.get_value("btc1.services"),
            }
        )


class CreateResult(NamedTuple):
    """A new DID, its document and, for generated deterministic keys, the mnemonic."""

    did: str
    did_document: dict
    mnemonic: Optional[str] = None

    def serialize(self) -> dict:
        """Return the JSON shape of the result; `mnemonic` only when present."""
        result = {"did": self.did, "didDocument": self.did_document}
        if self.mnemonic is not None:
            result["mnemonic"] = self.mnemonic
        return result


class CreateOptionsSchema(Schema):
    """Shape of creation options."""

    class Meta:
        """CreateOptionsSchema metadata."""

        unknown = EXCLUDE

    network = fields.Str(
        required=False,
        allow_none=True,
        metadata={"description": "Bitcoin network", "example": "mainnet"},
    )
    version = fields.Int(
        required=False,
        allow_none=True,
        strict=True,
        validate=Range(min=1),
        metadata={"description": "did:btc1 version number", "example": 1},
    )
    did_type = fields.Str(
        data_key="type",
        required=False,
        allow_none=True,
        metadata={"description": "deterministic or sidecar", "example": "sidecar"},
    )
    verification_methods = fields.List(
        fields.Dict(),
        data_key="verificationMethods",
        required=False,
        allow_none=True,
        metadata={"description": "Requested verification methods"},
    )
    services = fields.List(
        fields.Dict(),
        required=False,
        allow_none=True,
        metadata={"description": "Services replacing the default beacons"},
    )

    @post_load
    def make_options(self, data, **kwargs):
        """Return immutable options, dropping unset values."""
        return CreateOptions(
            network=data.get("network"),
            version=data.get("version"),
            did_type=data.get("did_type"),
            verification_methods=tuple(data.get("verification_methods") or ()),
            services=(
                tuple(data["services"])
                if data.get("services") is not None
                else None
            ),
        )


def load_create_options(options: Optional[Mapping] = None) -> CreateOptions:
    """Load raw creation options into a `CreateOptions` instance.

    Raises:
        InvalidOptionsError: a known option has the wrong type

    """
    if options is None:
        return CreateOptions()
    if isinstance(options, CreateOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidOptionsError("Creation options must be a mapping")
    try:
        return CreateOptionsSchema().load(dict(options))
    except ValidationError as err:
        raise InvalidOptionsError(f"Invalid creation options: {err.messages}") from err
