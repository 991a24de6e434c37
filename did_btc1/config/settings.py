"""Settings implementation."""

from typing import Any, Iterator, Mapping, Optional

from ..core.error import BaseError

DEFAULT_SETTINGS = {
    "btc1.network": "mainnet",
    "btc1.version": 1,
    "btc1.type": "deterministic",
    "resolver.timeout": 30,
}


class ConfigError(BaseError):
    """A base exception for all configuration errors."""


class SettingsError(ConfigError):
    """Raised when a setting cannot be read in the requested format."""


class Settings(Mapping[str, Any]):
    """Settings mapping with dotted keys such as `btc1.network`."""

    def __init__(self, values: Mapping[str, Any] = None):
        """Initialize a Settings object.

        Args:
            values: An optional dictionary of settings
        """
        self._values = {}
        if values:
            self._values.update(values)

    @classmethod
    def with_defaults(cls, values: Mapping[str, Any] = None) -> "Settings":
        """Build settings on top of `DEFAULT_SETTINGS`."""
        return cls(DEFAULT_SETTINGS).extend(
            {k: v for k, v in (values or {}).items() if v is not None}
        )

    def get_value(self, *var_names, default: Optional[Any] = None) -> Any:
        """Fetch a setting.

        Args:
            var_names: A list of variable name alternatives
            default: The default value to return if none are defined
        """
        for k in var_names:
            if k in self._values:
                return self._values[k]
        return default

    def get_int(self, *var_names, default: Optional[int] = None) -> Optional[int]:
        """Fetch a setting as an integer value."""
        value = self.get_value(*var_names, default=default)
        if value is not None:
            try:
                value = int(value)
            except (TypeError, ValueError) as err:
                raise SettingsError(
                    f"Setting {var_names[0]} is not an integer: {value}"
                ) from err
        return value

    def get_str(self, *var_names, default: Optional[str] = None) -> Optional[str]:
        """Fetch a setting as a string value."""
        value = self.get_value(*var_names, default=default)
        if value is not None:
            value = str(value)
        return value

    def __getitem__(self, index):
        """Fetch as an array index."""
        if not isinstance(index, str):
            raise TypeError(f"Index {index} must be a string")
        missing = object()
        result = self.get_value(index, default=missing)
        if result is missing:
            raise KeyError("Undefined index: {}".format(index))
        return result

    def __contains__(self, index):
        """Define 'in' operator."""
        return index in self._values

    def __iter__(self) -> Iterator:
        """Iterate settings keys."""
        return iter(self._values)

    def __len__(self):
        """Fetch the length of the mapping."""
        return len(self._values)

    def extend(self, other: Mapping[str, Any]) -> "Settings":
        """Merge another mapping to produce a new settings instance."""
        vals = self._values.copy()
        vals.update(other)
        return Settings(vals)

    def __repr__(self) -> str:
        """Provide a human readable representation of this object."""
        items = ("{}={}".format(k, self[k]) for k in self)
        return "<{}({})>".format(self.__class__.__name__, ", ".join(items))
