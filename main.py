import json
from typing import Any, Optional

import httpx
import typer
import uvicorn

from config import settings
from ui_helpers import set_output_mode, print_people_result, print_books_result, print_message_result

APP_NAME = "Recursos Humanos CLI"

app = typer.Typer(help=APP_NAME)


def get_client() -> httpx.Client:
    """HTTP client pointed at the configured server."""
    return httpx.Client(base_url=settings.api_url, timeout=settings.http_timeout)


def _request(method: str, path: str, **kwargs) -> Any:
    try:
        with get_client() as client:
            response = client.request(method, path, **kwargs)
    except httpx.RequestError as exc:
        print(f"Server unreachable at {settings.api_url}: {exc}")
        raise typer.Exit(code=1)

    if response.status_code >= 400:
        try:
            message = response.json().get("message")
        except ValueError:
            message = None
        print(f"Error: {message or response.text}")
        raise typer.Exit(code=1)
    return response.json()


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    if output:
        set_output_mode(output)


@app.command("serve")
def cli_serve(
    host: str = typer.Option(settings.api_host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.api_port, "--port", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes (development)"),
):
    """Run the API with uvicorn."""
    print(f"Server is running at http://{host}:{port}")
    uvicorn.run("api:app", host=host, port=port, reload=reload, log_level=settings.log_level.lower())


@app.command("openapi")
def cli_openapi():
    """Print the generated OpenAPI document."""
    from api import app as api_app

    print(json.dumps(api_app.openapi(), ensure_ascii=False, indent=2))


@app.command("list")
def cli_list():
    """List all users."""
    print_people_result(_request("GET", "/usuarios"))


@app.command("books")
def cli_books():
    """List all books."""
    print_books_result(_request("GET", "/books"))


@app.command("add")
def cli_add(name: str, age: str):
    """Add a user."""
    print_message_result(_request("POST", "/usuarios", json={"nombre": name, "edad": age}))


@app.command("update")
def cli_update(
    user_id: int,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    age: Optional[str] = typer.Option(None, "--age", "-a", help="New age"),
):
    """Update a user's name and/or age. Omitted fields are kept."""
    body = {"nombre": name, "edad": age}
    print_message_result(_request("PUT", f"/usuarios/{user_id}", json={k: v for k, v in body.items() if v is not None}))


@app.command("remove")
def cli_remove(user_id: int):
    """Remove a user by id."""
    print_message_result(_request("DELETE", f"/usuarios/{user_id}"))


if __name__ == "__main__":
    app()
