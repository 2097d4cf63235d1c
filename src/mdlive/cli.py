"""mdlive CLI entry point."""

import ipaddress
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mdlive.config import (
    DEFAULT_HOST,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    PollWindow,
    ServerConfig,
)
from mdlive.errors import WatcherStartupError

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def _validate_host(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        return str(ipaddress.ip_address(value))
    except ValueError as e:
        raise click.BadParameter(f"{value!r} is not an IP address") from e


@click.command()
@click.argument("markdown_file", type=click.Path(path_type=Path))
@click.option("--host", default=DEFAULT_HOST, callback=_validate_host, help="IP to bind the server to")
@click.option("--port", default=DEFAULT_PORT, type=click.IntRange(0, 65535), help="Port to bind the server to")
@click.option(
    "--static-dir",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory served under /static",
)
@click.option(
    "--timeout",
    default=DEFAULT_TIMEOUT_SECONDS,
    type=click.IntRange(min=1),
    help="Checks per reload poll before answering no",
)
@click.option(
    "--poll-interval",
    default=DEFAULT_POLL_INTERVAL_MS,
    type=click.IntRange(min=1),
    help="Milliseconds between checks",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
def cli(
    markdown_file: Path,
    host: str,
    port: int,
    static_dir: Path,
    timeout: int,
    poll_interval: int,
    verbose: bool,
) -> None:
    """mdlive - an offline GitHub-style markdown previewer.

    Serves MARKDOWN_FILE as HTML and reloads the browser when it changes.
    """
    import uvicorn

    from mdlive.api import create_app
    from mdlive.reload import ChangeSignal, FileWatcher

    setup_logging(verbose)

    if not markdown_file.exists():
        console.print(f"[red]Error: {escape(str(markdown_file))} does not exist![/red]")
        raise SystemExit(1)

    if not markdown_file.is_file():
        console.print(f"[red]Error: {escape(str(markdown_file))} is not a file![/red]")
        raise SystemExit(1)

    config = ServerConfig(
        markdown_file=markdown_file,
        host=host,
        port=port,
        static_dir=static_dir,
        poll_window=PollWindow(timeout_seconds=timeout, poll_interval_ms=poll_interval),
    )

    watcher = FileWatcher(config.markdown_file, ChangeSignal())
    try:
        watcher.start()
    except WatcherStartupError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1) from e

    app = create_app(config, watcher)

    console.print(f"[bold green]Server running at http://{host}:{port}[/bold green]")
    console.print("Press Ctrl-C to exit")

    uvicorn.run(app, host=host, port=port)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
