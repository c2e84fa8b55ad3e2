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
"""StructlogAdapter: configures structlog from the ``weblet.logging`` section."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from weblet.config.properties.logging import LoggingProperties
from weblet.core.config import Config


def _level_number(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


class StructlogAdapter:
    """Routes structlog events through stdlib logging to stdout.

    ``weblet.logging.level`` is either a plain level name, which sets the
    root level, or a mapping with a ``root`` entry plus one entry per logger
    name. ``WEBLET_LOGGING_LEVEL=DEBUG`` therefore raises the root level,
    and ``WEBLET_LOGGING_LEVEL_ROOT`` replaces only the root entry of the
    mapping form.
    """

    def __init__(self) -> None:
        self._root_level = "INFO"
        self._format = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        props = config.bind(LoggingProperties)
        self._format = str(props.format).lower()
        if isinstance(props.level, str):
            self._root_level = props.level.upper()
            self._module_levels = {}
        else:
            levels = {name: str(value).upper() for name, value in props.level.items()}
            root = levels.pop("root", "INFO")
            self._root_level = str(config.get("weblet.logging.level.root", root)).upper()
            self._module_levels = levels

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.UnicodeDecoder(),
                self._renderer(),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=_level_number(self._root_level), force=True)
        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(_level_number(level))

    def _renderer(self) -> structlog.types.Processor:
        if self._format == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer()
