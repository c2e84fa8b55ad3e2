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
"""'weblet run': serve the sample application with uvicorn."""

from __future__ import annotations

import click
import uvicorn
from rich.markup import escape

from weblet.cli.console import console
from weblet.config.properties.web import WebProperties
from weblet.core.config import Config
from weblet.kernel.exceptions import WebletException
from weblet.logging.structlog_adapter import StructlogAdapter
from weblet.sample.app import build_app


@click.command()
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False), help="YAML or TOML config file.")
@click.option("--host", default=None, help="Bind address (default: weblet.web.host).")
@click.option("--port", default=None, type=int, help="Port number (default: weblet.web.port).")
def run_command(config_path: str | None, host: str | None, port: int | None) -> None:
    """Start the sample application server."""
    config = Config.from_file(config_path)
    try:
        StructlogAdapter().configure(config)
        web = config.bind(WebProperties)
        app = build_app(config)
    except (WebletException, ValueError) as exc:
        console.print(f"[error]Cannot start: {escape(str(exc))}[/error]")
        raise SystemExit(1) from exc

    host = host or web.host
    port = port or web.port
    console.print(f"[weblet]weblet sample[/weblet] listening on [info]http://{host}:{port}[/info]")
    uvicorn.run(app, host=host, port=port, log_level="warning")
