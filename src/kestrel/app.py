# =============================================================================
# Kestrel Main Application
# =============================================================================
# This is the main Textual application class that wires the browser
# together.
#
# Textual owns the terminal: raw mode, the alternate screen, painting and
# key events. The app manages:
#   - Configuration loading
#   - Logging (to a file, since the terminal is taken)
#   - Building the HTTP client and navigator
#   - Global keybindings
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kestrel import __version__, __app_name__
from kestrel.config import Config, ConfigError, ensure_directories, print_paths
from kestrel.navigation import Fetcher, Navigator
from kestrel.net import HTTPClient
from kestrel.ui.screens.browse import BrowseScreen

logger = logging.getLogger(__name__)


class KestrelApp(App):
    """
    The main Kestrel application.

    Attributes:
        config: The loaded application configuration.
        navigator: Navigation state machine shared with the browse screen.
        TITLE: Window title shown in terminal.
        SUB_TITLE: Subtitle shown in header (the current address).
        BINDINGS: Global keyboard shortcuts.
    """

    # Application metadata
    TITLE = "Kestrel"
    SUB_TITLE = "Terminal Browser"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "show_help", "Help"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        start_url: str | None = None,
        fetch: Fetcher | None = None,
        config_path: Path | None = None,
    ) -> None:
        """
        Initialize the Kestrel application.

        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from config_path or the
                    default location.
            start_url: First page to load. Defaults to general.home_url.
            fetch: Transport override; an HTTPClient is built otherwise.
            config_path: Config file to load when config is not given.
        """
        super().__init__()

        # Initialize config error tracking
        self._config_error: str | None = None

        if config is None:
            try:
                self.config = Config.load(config_path)
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

        try:
            styles = self.config.rendering.styles()
        except ConfigError as e:
            self._config_error = str(e)
            styles = None

        self._client: HTTPClient | None = None
        if fetch is None:
            self._client = HTTPClient(self.config.network)
            fetch = self._client.fetch

        self.navigator = Navigator(fetch, styles)
        self.start_url = start_url or self.config.general.home_url

    def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        if self.config.ui.theme == "light":
            self.theme = "textual-light"

        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        self.push_screen(
            BrowseScreen(self.navigator, self.config.ui, start_url=self.start_url)
        )

    def on_unmount(self) -> None:
        """Release network resources."""
        if self._client is not None:
            self._client.close()

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_quit(self) -> None:
        """Quit the application."""
        self.navigator.quit()
        self.exit()

    def action_show_help(self) -> None:
        """Show the key bindings."""
        self.notify(
            "Keybindings: Tab/Shift+Tab=select link, Enter=follow, j/k=scroll, "
            "Space/b=page, o=open, r=reload, q=quit",
            timeout=10,
        )


# =============================================================================
# Logging
# =============================================================================

def setup_logging(debug: bool = False) -> Path:
    """
    Send log records to the log file in the XDG state directory.

    Args:
        debug: Log at DEBUG level instead of INFO.

    Returns:
        Path of the log file.
    """
    ensure_directories()
    log_path = Config.log_file_path()
    logging.basicConfig(
        filename=log_path,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return log_path


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Kestrel: a terminal hypertext browser",
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Address to open (default: general.home_url from the config)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default config file and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Kestrel.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --init-config, --version)
        3. Sets up logging
        4. Starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    # Handle --init-config flag
    if args.init_config:
        target = args.config or Config.config_file_path()
        if target.exists():
            print(f"Config file already exists: {target}", file=sys.stderr)
            return 1
        print(f"Wrote default config to {Config().save(target)}")
        return 0

    setup_logging(args.debug)
    logger.info(f"Starting {__app_name__} {__version__}")

    app = KestrelApp(start_url=args.url, config_path=args.config)
    try:
        app.run()
    except Exception as e:
        # Without a working terminal there is nothing to fall back to
        logger.exception("Terminal session failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
