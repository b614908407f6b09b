"""
notifykit CLI entry point.

Commands:
    notifykit send     — Compose and send one notification
    notifykit config   — Show the effective configuration
    notifykit version  — Show version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="notifykit",
    help="notifykit — compose notifications and fan them out to channels.",
    add_completion=False,
)

console = Console()


@app.command()
def send(
    text: str = typer.Argument(..., help="Notification text"),
    email: str = typer.Option(None, "--email", "-e", help="Deliver to this email address"),
    sms: str = typer.Option(None, "--sms", "-s", help="Deliver to this phone number"),
    popup: Optional[bool] = typer.Option(None, "--popup/--no-popup", help="Show an on-screen popup"),
    stamp: bool = typer.Option(False, "--stamp", help="Prefix with the current time"),
    timestamp: str = typer.Option(None, "--timestamp", "-t", help="Prefix with this timestamp"),
    signature: str = typer.Option(None, "--signature", help="Append a signature line"),
    isolate: Optional[bool] = typer.Option(
        None, "--isolate/--no-isolate", help="Keep delivering when one channel fails"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
) -> None:
    """Send a notification through every configured channel."""
    from notifykit.bootstrap import build_service, compose_content
    from notifykit.core.config import NotifyConfig
    from notifykit.core.errors import NotifyError
    from notifykit.core.logging import setup_logging

    overrides: dict[str, Any] = {}
    if email is not None:
        overrides.setdefault("email", {})["address"] = email
    if sms is not None:
        overrides.setdefault("sms", {})["phone_number"] = sms
    if popup is not None:
        overrides.setdefault("popup", {})["enabled"] = popup
    if isolate is not None:
        overrides.setdefault("delivery", {})["isolate_failures"] = isolate
    if signature is not None:
        overrides.setdefault("content", {})["signature"] = signature

    try:
        config = NotifyConfig.load(overrides=overrides)
    except NotifyError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    log_dir = Path(config.logging.log_dir) if config.logging.log_dir else None
    logger = logging.getLogger("notifykit")

    try:
        setup_logging(level=logging.DEBUG if verbose else config.logging.level, log_dir=log_dir)
        service = build_service(config, console=console)
    except NotifyError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    content = compose_content(
        text,
        timestamp=timestamp,
        signature=config.content.signature or None,
        stamp=stamp,
        timestamp_format=config.content.timestamp_format,
    )
    logger.info("Sending notification from CLI")
    service.send_notification(content)


@app.command()
def config() -> None:
    """Show the effective configuration (files, env, defaults merged)."""
    from notifykit.core.config import NotifyConfig, get_notifykit_home
    from notifykit.core.errors import ConfigError

    console.print(f"[bold]User config:[/bold] {get_notifykit_home() / 'config.toml'}")
    try:
        loaded = NotifyConfig.load()
    except ConfigError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)
    console.print_json(loaded.model_dump_json())


@app.command()
def version() -> None:
    """Show notifykit version."""
    from notifykit import __version__
    console.print(f"notifykit v{__version__}")


if __name__ == "__main__":
    app()
