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
"""Weblet CLI: run the sample app and manage session files."""

from __future__ import annotations

import click

from weblet.cli.run import run_command
from weblet.cli.sessions import sessions_group


@click.group()
@click.version_option(package_name="weblet")
def cli() -> None:
    """Weblet: sessions and response rendering for small web apps."""


cli.add_command(run_command, name="run")
cli.add_command(sessions_group, name="sessions")
