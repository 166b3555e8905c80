import os
import json
from typing import List, Dict, Any
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "RRHH_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_people_result(people: List[Dict[str, Any]]) -> None:
    """Print users in the current output mode.
    - plain: 'id - nombre (edad)' lines, or 'No users found.'
    - json: JSON array as returned by the API
    - rich: Rich table
    """
    mode = get_output_mode()

    if not people:
        print("No users found.")
        return

    if mode == "json":
        print(json.dumps(people, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Usuarios", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Nombre", style="white")
        table.add_column("Edad", style="white")
        for p in people:
            table.add_row(escape(str(p.get("id", ""))), escape(str(p.get("nombre", ""))), escape(str(p.get("edad", ""))))
        _console.print(table)
    else:
        for p in people:
            print(f"{p.get('id', '')} - {p.get('nombre', '')} ({p.get('edad', '')})")

def print_books_result(books: List[Dict[str, Any]]) -> None:
    """Print books in the current output mode.
    - plain: 'id - Title by Author' lines, or 'No books found.'
    - json: JSON array
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books found.")
        return

    if mode == "json":
        print(json.dumps(books, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        for b in books:
            table.add_row(escape(str(b.get("id", ""))), escape(str(b.get("title", ""))), escape(str(b.get("author", ""))))
        _console.print(table)
    else:
        for b in books:
            print(f"{b.get('id', '')} - {b.get('title', '')} by {b.get('author', '')}")

def print_message_result(payload: Dict[str, Any]) -> None:
    """Print a '{message, usuario}' API response."""
    mode = get_output_mode()
    if mode == "json":
        print(json.dumps(payload, ensure_ascii=False))
        return

    print(payload.get("message", ""))
    user = payload.get("usuario")
    if user:
        if mode == "rich":
            _console.print(f"[bold]{escape(str(user.get('id')))}[/] - {escape(str(user.get('nombre')))} ({escape(str(user.get('edad')))})")
        else:
            print(f"{user.get('id')} - {user.get('nombre')} ({user.get('edad')})")
