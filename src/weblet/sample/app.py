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
"""Wires the sample handlers into a Starlette application."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from starlette.applications import Starlette

from weblet.config.properties.session import SessionProperties
from weblet.config.properties.web import WebProperties
from weblet.core.config import Config
from weblet.sample.handlers import SampleHandlers
from weblet.session.factory import create_session_store, session_id_factory
from weblet.web.app import create_app
from weblet.web.renderer import ResponseRenderer
from weblet.web.templates import DefaultTemplateLoader

TEMPLATES_PATTERN = str(Path(__file__).parent / "templates" / "*.html")


def build_app(config: Config | None = None) -> Starlette:
    """Build the sample application from *config* (packaged defaults if omitted)."""
    if config is None:
        config = Config.from_file()
    web = config.bind(WebProperties)
    session_props = config.bind(SessionProperties)

    loader = DefaultTemplateLoader(web.templates or TEMPLATES_PATTERN, reload=web.reload_templates)
    handlers = SampleHandlers(
        create_session_store(config),
        id_factory=session_id_factory(config),
        cookie_name=session_props.cookie_name,
        cookie_max_age=timedelta(seconds=session_props.cookie_max_age),
    )
    return create_app(
        handlers.bindings(),
        ResponseRenderer(loader),
        static_dir=web.static_dir,
        static_path=web.static_path,
    )
