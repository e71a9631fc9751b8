from __future__ import annotations

import configparser
import dataclasses
import logging
import typing

from . import numeric
from .vector import vector_type

__all__ = [
    "Config",
    "parse_config_overrides",
]

_logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Config:
    """Configuration for the vector2 command line."""
    vector_element_type: str = "float"

    format_precision: int = 6

    def __post_init__(self):
        try:
            numeric.element_type(self.vector_element_type)
        except KeyError as e:
            raise ValueError(e.args[0]) from e

    @property
    def vector_type(self):
        return vector_type(self.vector_element_type)

    @property
    def format_spec(self) -> str:
        """Format spec applied to printed results. A negative precision prints values unformatted."""
        if self.format_precision < 0:
            return ""
        return f".{self.format_precision}f"

    @classmethod
    def from_file(cls, file) -> "Config":
        cp = configparser.ConfigParser()
        cp.read_file(file)

        defaults = cls()

        return cls(
            vector_element_type=cp.get("vector", "element-type", fallback=defaults.vector_element_type),

            format_precision=cp.getint("format", "precision", fallback=defaults.format_precision),
        )

    @classmethod
    def from_filepath(cls, filepath: str) -> "Config":
        with open(filepath) as f:
            return cls.from_file(f)

    @staticmethod
    def get_section_and_key(attribute_name: str) -> tuple[str, str]:
        """Split an attribute name into the config header name and the key name."""

        section, key = attribute_name.split("_", 1)

        return section, key.replace("_", "-")

    @staticmethod
    def get_attribute_name(section: str, key: str) -> str:
        return f"{section}_{key.replace('-', '_')}"

    @classmethod
    def get_field_type(cls, field_name: str) -> typing.Literal["float", "int", "str"]:
        field_types = {f.name: f.type for f in dataclasses.fields(cls)}
        return field_types[field_name]

    @staticmethod
    def value_from_str(value: str, type_: typing.Literal["float", "int", "str"]):
        if type_ == "float":
            return float(value)
        elif type_ == "int":
            return int(value)
        else:
            return value.strip()

    def to_properties(self) -> dict[str, str]:
        properties = {}
        for attribute_name, value in dataclasses.asdict(self).items():
            section, key = self.get_section_and_key(attribute_name)
            properties[f"{section}.{key}"] = str(value)

        return properties

    @classmethod
    def from_properties(cls, properties: dict[str, str]) -> "Config":
        """Build a Config from ``section.key`` properties. Missing properties take their default value."""
        kwargs = {}
        for name, value in properties.items():
            section, _, key = name.partition(".")
            field_name = cls.get_attribute_name(section, key)

            try:
                field_type = cls.get_field_type(field_name)
            except KeyError:
                raise KeyError(name) from None

            try:
                kwargs[field_name] = cls.value_from_str(value, field_type)
            except ValueError as e:
                raise ValueError(f"Invalid value {value!r} for config option {name!r}.") from e

        config = cls(**kwargs)
        _logger.debug(f"Loaded config {config!r}.")
        return config


def parse_config_overrides(overrides: list[str]) -> dict[str, str]:
    parsed = {}

    for override in overrides:
        if "=" not in override:
            raise ValueError(f"Invalid config override {override!r}. "
                             f"Use the form option=value, e.g. format.precision=3")

        option, value = override.split("=", maxsplit=1)

        parsed[option.strip()] = value.strip()

    return parsed
