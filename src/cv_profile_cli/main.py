"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import importlib.util
import json
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from cv_profile_core.config.settings import Settings
from cv_profile_core.exceptions import CVProfileError, RequestError
from cv_profile_engine.aggregator import build_profile
from cv_profile_engine.observability import configure_logging
from cv_profile_engine.service import CVProfileService
from cv_profile_engine.tools.document_parser import DocumentParser

app = typer.Typer(
    name="cv-profile",
    help="Serve a CV as prompts and resources for language-model clients",
)
console = Console()
logger = structlog.get_logger()

__version__ = "1.0.0"

CvOption = typer.Option(None, "--cv", help="Path to the CV document (overrides CV_PDF_PATH)")
VerboseOption = typer.Option(False, "-v", "--verbose", help="Enable debug logging")


def _load_settings(cv: Path | None, verbose: bool) -> Settings:
    """Build settings from the environment plus CLI overrides, and configure logging."""
    settings = Settings()
    if cv is not None:
        settings.pdf_path = cv
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _parse_args(pairs: list[str]) -> dict[str, str]:
    """Turn ["key=value", ...] into a dict."""
    arguments: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            console.print(f"[red]Error:[/red] Expected key=value, got {pair!r}")
            raise typer.Exit(code=1)
        arguments[key.strip()] = value
    return arguments


@app.command()
def serve(cv: Path | None = CvOption, verbose: bool = VerboseOption) -> None:
    """Run the MCP server on stdio."""
    settings = _load_settings(cv, verbose)

    from cv_profile_server.server import serve as run_server

    asyncio.run(run_server(settings))


@app.command()
def prompts() -> None:
    """List available prompts."""
    service = CVProfileService(Settings())
    table = Table(title="Prompts")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Arguments")
    for d in service.list_prompts():
        args = ", ".join(f"{a.name}{'*' if a.required else ''}" for a in d.arguments)
        table.add_row(str(d.name), d.description, args or "-")
    console.print(table)


@app.command()
def prompt(
    name: str = typer.Argument(..., help="Prompt name, e.g. cover-letter"),
    arg: list[str] = typer.Option([], "--arg", "-a", help="Prompt argument as key=value"),
    cv: Path | None = CvOption,
    verbose: bool = VerboseOption,
) -> None:
    """Render a prompt against the CV and print it."""
    arguments = _parse_args(arg)
    service = CVProfileService(_load_settings(cv, verbose))
    try:
        result = asyncio.run(service.get_prompt(name, arguments))
    except RequestError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    for message in result.messages:
        typer.echo(message.text)


@app.command()
def resources() -> None:
    """List available resources."""
    service = CVProfileService(Settings())
    table = Table(title="Resources")
    table.add_column("URI", style="bold")
    table.add_column("Name")
    table.add_column("MIME type")
    for d in service.list_resources():
        table.add_row(str(d.uri), d.name, d.mime_type)
    console.print(table)


@app.command()
def resource(
    uri: str = typer.Argument(..., help="Resource URI, e.g. cv://raw-text"),
    cv: Path | None = CvOption,
    verbose: bool = VerboseOption,
) -> None:
    """Read a resource and print it."""
    service = CVProfileService(_load_settings(cv, verbose))
    try:
        contents = asyncio.run(service.read_resource(uri))
    except RequestError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(contents.text)


@app.command()
def check(cv: Path | None = CvOption, verbose: bool = VerboseOption) -> None:
    """Validate the installation and the CV document."""
    settings = _load_settings(cv, verbose)
    results: list[tuple[str, bool, str]] = []

    version = f"{sys.version_info.major}.{sys.version_info.minor}"
    results.append(("Python version", sys.version_info >= (3, 11), version))

    has_sdk = importlib.util.find_spec("mcp") is not None
    results.append(("MCP SDK", has_sdk, "installed" if has_sdk else "run: pip install mcp"))

    parser = DocumentParser(max_size_mb=settings.max_document_size_mb)
    try:
        text = asyncio.run(parser.extract_text(settings.pdf_path))
    except (CVProfileError, OSError) as exc:
        results.append(("CV document", False, str(exc)))
    else:
        results.append(("CV document", True, f"{settings.pdf_path} ({len(text)} characters)"))
        profile = build_profile(text)
        summary = (
            f"name={profile.personal_info.name!r}, "
            f"skills={profile.technical_skills.skills_count}, "
            f"years={profile.experience.experience_years}"
        )
        results.append(("Extraction", True, summary))

    for name, ok, details in results:
        status = "[green]OK[/green]" if ok else "[red]FAIL[/red]"
        console.print(f"{status} {name}: {details}")

    if not all(ok for _, ok, _ in results):
        raise typer.Exit(code=1)


@app.command("client-config")
def client_config(cv: Path | None = CvOption) -> None:
    """Print the mcpServers block for a desktop MCP client configuration."""
    settings = Settings()
    cv_path = (cv or settings.pdf_path).expanduser().resolve()
    config = {
        "mcpServers": {
            settings.server_name: {
                "command": "cv-profile",
                "args": ["serve"],
                "env": {"CV_PDF_PATH": str(cv_path)},
            }
        }
    }
    typer.echo(json.dumps(config, indent=2))


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"cv-profile-server v{__version__}")


if __name__ == "__main__":
    app()
