# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Weblet configuration: packaged defaults, an optional YAML or TOML file, env vars.

Keys are dotted paths such as ``weblet.session.store``. Lookups check the
environment first, using the key without its ``weblet.`` prefix, upper-cased,
with dots and dashes turned into underscores (``WEBLET_SESSION_STORE``).
String values may embed ``${NAME}`` or ``${NAME:default}`` placeholders,
where ``NAME`` is an environment variable or another dotted key.
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_MAX_PLACEHOLDER_DEPTH = 10
_CONFIG_PROPERTIES_ATTR = "__weblet_config_prefix__"

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_COERCIONS: dict[Any, Callable[[str], Any]] = {
    int: int,
    float: float,
    bool: lambda s: s.strip().lower() in _TRUE_STRINGS,
}


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass or Pydantic model as bindable to *prefix*.

    Usage:
        @config_properties(prefix="weblet.session")
        @dataclass
        class SessionProperties:
            store: str = "memory"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def _env_key(key: str) -> str:
    # weblet.session.store -> WEBLET_SESSION_STORE
    name = key.removeprefix("weblet.").upper().replace(".", "_").replace("-", "_")
    return f"WEBLET_{name}"


def _walk(data: dict[str, Any], key: str) -> Any:
    current: Any = data
    for part in key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_file(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_defaults() -> dict[str, Any]:
    resource = importlib.resources.files("weblet.resources").joinpath("weblet-defaults.yaml")
    return yaml.safe_load(resource.read_text(encoding="utf-8")) or {}


class Config:
    """Read-only view over merged configuration data."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path | None = None, load_defaults: bool = True) -> Config:
        """Merge the YAML or TOML file at *path* over the packaged defaults.

        A *path* that does not exist is skipped, so the sample app runs
        without any config file.
        """
        data = _read_defaults() if load_defaults else {}
        if path is not None and Path(path).is_file():
            data = _merge(data, _read_file(Path(path)))
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Value at dotted *key*, with env override and placeholders resolved."""
        env_value = os.environ.get(_env_key(key))
        if env_value is not None:
            return env_value
        value = _walk(self._data, key)
        if value is None:
            return default
        if isinstance(value, str) and "${" in value:
            return self._resolve(value, 0)
        return value

    def _resolve(self, value: str, depth: int) -> str:
        if depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(f"Placeholders in '{value}' nest too deeply; check for circular references")

        def substitute(match: re.Match[str]) -> str:
            name, separator, fallback = match.group(1).partition(":")
            env_value = os.environ.get(name)
            if env_value is not None:
                return env_value
            found = _walk(self._data, name)
            if found is not None:
                text = str(found)
                return self._resolve(text, depth + 1) if "${" in text else text
            if separator:
                return fallback
            raise ValueError(f"Cannot resolve placeholder '${{{name}}}': not in environment or config")

        return _PLACEHOLDER_RE.sub(substitute, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """The mapping under *prefix*, or an empty dict."""
        section = _walk(self._data, prefix)
        return section if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Build a ``@config_properties`` class from its section.

        Every field goes through :meth:`get`, so env overrides and
        placeholders reach bound values. Dataclass fields typed ``int``,
        ``float`` or ``bool`` accept the strings env vars produce; Pydantic
        models validate their own fields.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        if issubclass(config_cls, BaseModel):
            names = list(config_cls.model_fields)
        else:
            names = [f.name for f in dataclasses.fields(config_cls)]  # type: ignore[arg-type]
        values = {name: self.get(f"{prefix}.{name}") for name in names}
        values = {name: value for name, value in values.items() if value is not None}

        if issubclass(config_cls, BaseModel):
            try:
                return cast(T, config_cls.model_validate(values))
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        hints = get_type_hints(config_cls)
        for name, value in values.items():
            coerce = _COERCIONS.get(hints.get(name))
            if coerce is not None and isinstance(value, str):
                values[name] = coerce(value)
        return config_cls(**values)
