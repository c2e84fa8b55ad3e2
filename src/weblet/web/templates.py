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
"""Jinja2 template loaders consumed by the response renderer."""

from __future__ import annotations

import glob
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog
from jinja2 import DictLoader, Environment, TemplateError, select_autoescape

from weblet.kernel.exceptions import TemplateLoadException

logger = structlog.get_logger("weblet.web")


@runtime_checkable
class TemplateLoader(Protocol):
    """Supplies the compiled template set; must be safe for concurrent reads."""

    def load(self) -> Environment: ...


class DefaultTemplateLoader:
    """Loads every file matching a glob pattern into a Jinja2 environment.

    Templates are registered under their base file name (``index.html``)
    and compiled eagerly, so syntax errors surface from :meth:`load`.

    Args:
        pattern: Glob pattern, e.g. ``"assets/templates/*.html"``.
        globals: Names made available to every template.
        filters: Extra Jinja2 filters.
        reload: Re-parse on every :meth:`load` (development). When ``False``
            the templates are parsed once here and cached.

    Raises:
        TemplateLoadException: When ``reload`` is ``False`` and parsing fails.
    """

    def __init__(
        self,
        pattern: str,
        globals: Mapping[str, Any] | None = None,
        filters: Mapping[str, Callable[..., Any]] | None = None,
        reload: bool = False,
    ) -> None:
        self._pattern = pattern
        self._globals = dict(globals or {})
        self._filters = dict(filters or {})
        self._cached: Environment | None = None
        if not reload:
            self._cached = self._parse()

    def load(self) -> Environment:
        if self._cached is not None:
            return self._cached
        return self._parse()

    def _parse(self) -> Environment:
        paths = sorted(glob.glob(self._pattern))
        if not paths:
            raise TemplateLoadException(
                f"cannot parse templates: pattern matches no files: {self._pattern}",
                code="TEMPLATE_LOAD",
                context={"pattern": self._pattern},
            )
        try:
            sources = {Path(p).name: Path(p).read_text(encoding="utf-8") for p in paths}
            env = Environment(
                loader=DictLoader(sources),
                autoescape=select_autoescape(["html", "htm", "xml"]),
            )
            env.globals.update(self._globals)
            env.filters.update(self._filters)
            for name in sources:
                env.get_template(name)
        except (OSError, TemplateError) as exc:
            raise TemplateLoadException(
                f"cannot parse templates: {exc}",
                code="TEMPLATE_LOAD",
                context={"pattern": self._pattern},
            ) from exc
        logger.debug("templates_parsed", pattern=self._pattern, count=len(sources))
        return env


class NullTemplateLoader:
    """A loader that never loads anything; for apps without HTML templates."""

    def load(self) -> Environment:
        raise TemplateLoadException("NullTemplateLoader cannot load anything", code="TEMPLATE_LOAD")


class PageParams(dict):
    """Carries data between included templates.

    ``{{ params.set("title", "Home") }}`` stores a value and renders nothing.
    """

    def set(self, key: str, value: Any) -> str:
        self[key] = value
        return ""

    def is_(self, key: str, value: Any) -> bool:
        return self.get(key) == value

    def has(self, key: str) -> bool:
        return key in self
