"""Fuzzy Menu: pick one line from piped input.

Main Textual application and command-line entry point.
"""

import logging
import sys
from dataclasses import dataclass

import click
from textual.app import App
from textual.binding import Binding
from textual.worker import Worker, WorkerState

from fuzzy_menu import __version__
from fuzzy_menu.models.candidate import Candidate, SearchResult
from fuzzy_menu.models.exceptions import (
    ConfigError,
    InputReadError,
    MenuError,
    NoInputError,
)
from fuzzy_menu.screens.menu import MenuScreen
from fuzzy_menu.services.config import MenuConfig
from fuzzy_menu.services.fuzzy import ScoreConfig
from fuzzy_menu.services.input_loader import StreamInputLoader
from fuzzy_menu.services.logging_config import configure_logging
from fuzzy_menu.services.output_writer import StandardOutputWriter
from fuzzy_menu.services.protocols import (
    InputLoaderProtocol,
    OutputWriterProtocol,
    SearchEngineProtocol,
)
from fuzzy_menu.services.search import SearchEngine
from fuzzy_menu.styles import BASE_CSS


logger = logging.getLogger(__name__)

EXIT_CANCELLED = 1
EXIT_NO_INPUT = 1
EXIT_READ_ERROR = 2


@dataclass
class Services:
    """Application service container for dependency injection."""

    loader: InputLoaderProtocol
    engine: SearchEngineProtocol
    writer: OutputWriterProtocol

    @classmethod
    def create(
        cls,
        config: MenuConfig,
        loader: InputLoaderProtocol | None = None,
    ) -> "Services":
        """Wire up the default collaborators.

        Args:
            config: Resolved runtime configuration
            loader: Input source (defaults to standard input)

        Returns:
            Services container with all dependencies injected
        """
        scoring = ScoreConfig(strict_runs=config.strict_runs)
        return cls(
            loader=loader or StreamInputLoader.from_stdin(),
            engine=SearchEngine(scoring),
            writer=StandardOutputWriter(include_index=config.include_index),
        )


class FuzzyMenuApp(App[SearchResult | None]):
    """The line selector application."""

    TITLE = "Fuzzy Menu"
    CSS = BASE_CSS

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        services: Services,
        config: MenuConfig | None = None,
        **kwargs,
    ):
        """Initialize the app with injected services.

        Args:
            services: Service container
            config: Runtime configuration (defaults if not provided)
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services
        self.config = config or MenuConfig()
        self.load_error: MenuError | None = None
        self._menu: MenuScreen | None = None

    @property
    def menu(self) -> MenuScreen | None:
        return self._menu

    def on_mount(self) -> None:
        """Push the menu and start reading input in the background."""
        self._menu = MenuScreen(self.services.engine, self.config)
        self.push_screen(self._menu, self._on_menu_dismissed)
        self.run_worker(
            self._load_candidates,
            name="load_input",
            thread=True,
            exclusive=True,
            exit_on_error=False,
        )

    def _load_candidates(self) -> list[Candidate]:
        """Worker task: read every line and build candidates."""
        return Candidate.from_lines(self.services.loader.load())

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Handle loader completion."""
        if event.worker.name != "load_input":
            return

        if event.state == WorkerState.SUCCESS:
            candidates = event.worker.result or []
            logger.info(f"Ready with {len(candidates)} candidates")
            if self._menu is not None:
                self._menu.set_candidates(candidates)

        elif event.state == WorkerState.ERROR:
            error = event.worker.error
            if not isinstance(error, MenuError):
                error = InputReadError(f"failed to read input: {error}")
            logger.error(f"Input loading failed: {error}")
            self.load_error = error
            self.exit(None)

    def _on_menu_dismissed(self, result: SearchResult | None) -> None:
        self.exit(result)


HELP_TEXT = """Pick one line from piped input with fuzzy search.

\b
Examples:
  ls | fuzzy-menu
  git branch | fuzzy-menu --index
"""


@click.command(
    help=HELP_TEXT,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(
    __version__, "-v", "--version", prog_name="fuzzy-menu", message="%(prog)s %(version)s"
)
@click.option(
    "-i",
    "--index",
    "include_index",
    is_flag=True,
    help="Also print the selected line's zero-based input position.",
)
@click.argument("command", required=False, type=click.Choice(["help", "version"]))
@click.pass_context
def main(ctx: click.Context, include_index: bool, command: str | None) -> None:
    """Run the Fuzzy Menu application."""
    if command == "help":
        click.echo(ctx.get_help())
        ctx.exit(0)
    if command == "version":
        click.echo(f"fuzzy-menu {__version__}")
        ctx.exit(0)

    try:
        config = MenuConfig.from_env().merge_with(include_index=include_index or None)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.log_file)
    logger.debug(f"Resolved config: {config.to_dict()}")

    # Nothing piped in - never start the UI
    if _stdin_is_terminal():
        _report_no_input(
            NoInputError("no input provided", suggestion="pipe lines in, e.g. ls | fuzzy-menu")
        )
        ctx.exit(EXIT_NO_INPUT)

    try:
        services = Services.create(config)
    except MenuError as e:
        raise click.ClickException(str(e)) from e

    app = FuzzyMenuApp(services=services, config=config)
    result = app.run()

    if app.load_error is not None:
        if isinstance(app.load_error, NoInputError):
            _report_no_input(app.load_error)
            ctx.exit(EXIT_NO_INPUT)
        click.echo(f"Error: {app.load_error}", err=True)
        ctx.exit(EXIT_READ_ERROR)

    if result is None:
        ctx.exit(EXIT_CANCELLED)

    services.writer.write(result)


def _stdin_is_terminal() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _report_no_input(error: NoInputError) -> None:
    click.echo(f"Error: {error}", err=True)
    click.echo("Use 'fuzzy-menu --help' to learn more about how to use the program.", err=True)


if __name__ == "__main__":
    main()
