# config.py
# SPDX-License-Identifier: MIT
"""Configuration models and helpers for licensekit.

Declarative dataclasses describe where license definitions are discovered,
how free text is sectioned, and how the package logger behaves. Helpers
serialize configurations to dicts/JSON and load them from JSON or TOML.
"""
from __future__ import annotations

import json
import types
try:  # pragma: no cover - optional dependency
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    try:
        import tomli as tomllib  # type: ignore[assignment]
    except Exception:  # pragma: no cover
        tomllib = None  # type: ignore[assignment]
from collections.abc import Sequence as ABCSequence
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .log import PACKAGE_LOGGER_NAME, configure_logging

DEFAULT_LICENSE_MODULES = ("licensekit.licenses",)
DEFAULT_PLUGIN_GROUP = "licensekit.licenses"

TEXT_SYNTAXES = ("pod", "markdown")


@dataclass(slots=True)
class CatalogConfig:
    """Where license definitions are discovered.

    Attributes:
        modules (tuple[str, ...]): Packages whose submodules are scanned for
            ``License`` subclasses, in order.
        load_plugins (bool): Whether to also load entry-point plugins.
        plugin_group (str): Entry-point group searched for plugins.
    """
    modules: Tuple[str, ...] = DEFAULT_LICENSE_MODULES
    load_plugins: bool = True
    plugin_group: str = DEFAULT_PLUGIN_GROUP


@dataclass(slots=True)
class TextConfig:
    """Default documentation syntax used when sectioning free text."""
    syntax: str = "pod"

    def validate(self) -> None:
        if self.syntax not in TEXT_SYNTAXES:
            raise ValueError(
                f"Invalid text syntax: {self.syntax!r}. Expected one of {sorted(TEXT_SYNTAXES)}"
            )


@dataclass(slots=True)
class LoggingConfig:
    """Controls the package logger; set propagate=True/logger_name to
    integrate with host apps.
    """
    level: int | str = "INFO"
    propagate: bool = False
    fmt: Optional[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logger_name: str = PACKAGE_LOGGER_NAME

    def apply(self) -> None:
        """Apply this logging configuration to the package logger."""
        configure_logging(
            level=self.level,
            propagate=self.propagate,
            fmt=self.fmt,
            logger_name=self.logger_name or PACKAGE_LOGGER_NAME,
        )


T = TypeVar("T")


@dataclass(slots=True)
class LicenseKitConfig:
    """Top-level configuration.

    The TOML layout mirrors this dataclass: ``[catalog]``, ``[text]`` and
    ``[logging]`` tables.
    """
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    text: TextConfig = field(default_factory=TextConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        self.text.validate()
        if not self.catalog.plugin_group:
            raise ValueError("catalog.plugin_group must be a non-empty string.")

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of this configuration."""
        return _dataclass_to_dict(self)

    def to_json(self, path: Path | str, *, indent: int = 2) -> str:
        """Serialize the configuration to JSON and write it to disk.

        Returns:
            str: String path to the written file.
        """
        target = Path(path)
        target.write_text(json.dumps(self.to_dict(), indent=indent, sort_keys=True), encoding="utf-8")
        return str(target)

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any]) -> T:
        return _dataclass_from_dict(cls, data)

    @classmethod
    def from_json(cls: Type[T], path: Path | str) -> T:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(payload)

    @classmethod
    def from_toml(cls: Type[T], path: Path | str) -> T:
        """Load a configuration from a TOML file."""
        if tomllib is None:
            raise RuntimeError(
                "TOML support requires Python 3.11+ (tomllib) or installing the 'tomli' package."
            )
        data = tomllib.loads(Path(path).read_bytes().decode("utf-8"))
        if not isinstance(data, Mapping):
            raise TypeError(f"Top-level TOML document must be a mapping; got {type(data).__name__}.")
        return cls.from_dict(data)


def load_config_from_path(path: str | Path) -> LicenseKitConfig:
    """Load a LicenseKitConfig from a JSON or TOML file.

    Raises:
        ValueError: If the file extension is not ``.toml`` or ``.json``.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".toml":
        cfg = LicenseKitConfig.from_toml(p)
    elif suffix == ".json":
        cfg = LicenseKitConfig.from_json(p)
    else:
        raise ValueError(f"Unsupported config extension {p.suffix!r}; expected .toml or .json.")
    cfg.validate()
    return cfg


def _dataclass_to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize dataclasses to JSON-friendly dicts, skipping None fields."""
    result: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        serialized = _serialize_value(value)
        if serialized is not None:
            result[f.name] = serialized
    return result


def _serialize_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _serialize_value(v) for k, v in value.items() if v is not None}
    if is_dataclass(value):
        return _dataclass_to_dict(value)
    return None


def _dataclass_from_dict(cls: Type[T], data: Mapping[str, Any] | None) -> T:
    """Instantiate a dataclass of type ``cls`` from a mapping.

    Unknown keys raise ``ValueError`` so that typos in config files surface
    early instead of being ignored.
    """
    if data is None:
        return cls()  # type: ignore[call-arg]
    type_hints = get_type_hints(cls)
    known = {f.name for f in fields(cls)}
    unknown = sorted(k for k in data if k not in known)
    if unknown:
        raise ValueError(
            f"Unsupported options for {cls.__name__}: {', '.join(unknown)}. "
            f"Allowed keys: {', '.join(sorted(known))}"
        )

    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _coerce_value(type_hints.get(f.name, f.type), data[f.name])
    return cls(**kwargs)  # type: ignore[arg-type]


def _coerce_value(expected_type: Any, value: Any) -> Any:
    """Coerce ``value`` into the shape implied by ``expected_type``."""
    base_type = _strip_optional(expected_type)
    if value is None:
        return None
    if isinstance(base_type, type) and is_dataclass(base_type):
        return _dataclass_from_dict(base_type, value)
    origin = get_origin(base_type)
    if origin in (list, tuple, ABCSequence):
        args = [a for a in get_args(base_type) if a is not Ellipsis]
        inner = args[0] if args else Any
        if isinstance(value, str):
            value = [value]
        items = [_coerce_value(inner, v) for v in value]
        return tuple(items) if origin is tuple else list(items)
    if base_type is Path:
        return Path(value)
    if base_type in {str, int, float, bool}:
        return base_type(value)
    return value


def _strip_optional(typ: Any) -> Any:
    origin = get_origin(typ)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(typ) if arg is not type(None)]
        if len(args) == 1:
            return _strip_optional(args[0])
    return typ


__all__ = [
    "CatalogConfig",
    "TextConfig",
    "LoggingConfig",
    "LicenseKitConfig",
    "load_config_from_path",
    "DEFAULT_LICENSE_MODULES",
    "DEFAULT_PLUGIN_GROUP",
    "TEXT_SYNTAXES",
]
