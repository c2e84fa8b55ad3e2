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
"""'weblet sessions': inspect and prune a file-backed session store."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from weblet.cli.console import console
from weblet.kernel.exceptions import SessionPersistenceException, SessionStoreLoadException
from weblet.session.adapters.file import FileSessionStore


def _open_store(path: str) -> FileSessionStore:
    try:
        return FileSessionStore(path)
    except SessionStoreLoadException as exc:
        console.print(f"[error]{escape(str(exc))}[/error]")
        raise SystemExit(1) from exc


@click.group()
def sessions_group() -> None:
    """Inspect a session file."""


@sessions_group.command("list")
@click.option("--file", "path", required=True, type=click.Path(dir_okay=False), help="Session JSON file.")
def list_command(path: str) -> None:
    """List stored sessions, ordered by id."""
    store = _open_store(path)
    sessions = store.find_all()
    if not sessions:
        console.print("[dim]No sessions.[/dim]")
        return

    table = Table(title="[weblet]Sessions[/weblet]", border_style="dim")
    table.add_column("Id", style="bold")
    table.add_column("Values")
    for session in sessions:
        values = ", ".join(f"{k}={session.get(k)}" for k in session.keys())
        table.add_row(session.id, values)
    console.print(table)


@sessions_group.command("delete")
@click.argument("session_id")
@click.option("--file", "path", required=True, type=click.Path(dir_okay=False), help="Session JSON file.")
def delete_command(session_id: str, path: str) -> None:
    """Delete one session by id."""
    store = _open_store(path)
    try:
        store.delete(session_id)
    except SessionPersistenceException as exc:
        console.print(f"[error]{escape(str(exc))}[/error]")
        raise SystemExit(1) from exc
    console.print(f"[success]Deleted[/success] {session_id}")
