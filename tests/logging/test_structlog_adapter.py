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
"""Tests for StructlogAdapter."""

import logging

import pytest

from weblet.core.config import Config
from weblet.logging.port import LoggingPort
from weblet.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_from_packaged_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config.from_file())
        assert adapter._root_level == "INFO"
        assert adapter._module_levels == {}

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"weblet": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"weblet": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_reads_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"weblet": {"logging": {"level": {"root": "INFO", "weblet.session": "WARNING"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"weblet.session": "WARNING"}
        assert logging.getLogger("weblet.session").level == logging.WARNING

    def test_env_string_level_sets_root(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBLET_LOGGING_LEVEL", "debug")
        adapter = StructlogAdapter()
        adapter.configure(Config.from_file())
        assert adapter._root_level == "DEBUG"
        assert adapter._module_levels == {}
        assert logging.getLogger().level == logging.DEBUG

    def test_env_root_level_keeps_module_levels(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBLET_LOGGING_LEVEL_ROOT", "WARNING")
        adapter = StructlogAdapter()
        adapter.configure(Config({"weblet": {"logging": {"level": {"root": "INFO", "weblet.web": "DEBUG"}}}}))
        assert adapter._root_level == "WARNING"
        assert adapter._module_levels == {"weblet.web": "DEBUG"}


class TestStructlogAdapterGetLogger:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("weblet.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))


class TestStructlogAdapterSetLevel:
    def test_set_level_updates_module_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        adapter.set_level("weblet.web", "DEBUG")
        assert logging.getLogger("weblet.web").level == logging.DEBUG
