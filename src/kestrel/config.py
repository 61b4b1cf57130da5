# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Kestrel configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/kestrel/  (default: ~/.config/kestrel/)
#   - State:   $XDG_STATE_HOME/kestrel/   (default: ~/.local/state/kestrel/)
#
# Files:
#   - config.toml: User configuration (home page, network, styles, keys)
#   - kestrel.log: Log file (in state directory; the TUI owns the terminal)
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)
from rich.errors import StyleSyntaxError

from kestrel import __version__
from kestrel.rendering.projector import LinkStyles


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "kestrel"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Kestrel.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/kestrel/
    This is where user configuration files live (config.toml).
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for Kestrel.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/kestrel/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates all required XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

DEFAULT_HOME_URL = "https://en.wikipedia.org/wiki/Main_Page"


@dataclass
class GeneralConfig:
    """
    General settings.

    Attributes:
        home_url: Page opened when no URL is given on the command line.
    """
    home_url: str = DEFAULT_HOME_URL


@dataclass
class NetworkConfig:
    """
    Configuration for the HTTP transport.

    Attributes:
        timeout: Seconds to wait for connect and read before giving up.
        user_agent: User-Agent header sent with every request.
    """
    timeout: float = 10.0
    user_agent: str = f"kestrel/{__version__}"


@dataclass
class RenderingConfig:
    """
    Configuration for link styling.

    Both values are Rich style definitions, e.g. "blue underline" or
    "bold white on blue".

    Attributes:
        link_style: Style of links that are not selected.
        selected_style: Style of the selected link.
    """
    link_style: str = "blue underline"
    selected_style: str = "bold white on blue"

    def styles(self) -> LinkStyles:
        """
        Parse the style strings.

        Raises:
            ConfigError: If either style is not valid Rich syntax.
        """
        try:
            return LinkStyles.from_strings(self.link_style, self.selected_style)
        except StyleSyntaxError as e:
            raise ConfigError(f"Invalid link style: {e}") from e


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        theme: Color theme ("dark" or "light").
        scroll_step: Lines moved by up/down.
        page_step: Lines moved by page up/page down.
    """
    theme: str = "dark"
    scroll_step: int = 1
    page_step: int = 10


@dataclass
class Config:
    """
    Main configuration container for Kestrel.

    Usage:
        >>> config = Config.load()
        >>> config.general.home_url
        'https://en.wikipedia.org/wiki/Main_Page'
    """
    general: GeneralConfig = field(default_factory=GeneralConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the log file."""
        return get_xdg_state_home() / "kestrel.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        config = cls._from_dict(data)

        # Fail early on bad styles rather than on first render
        config.rendering.styles()

        return config

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration to the config file.

        Creates the parent directory if it doesn't exist.

        Returns:
            The path written to.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        return config_path

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a section is not a table or a value has the
                         wrong type or range.
        """
        config = cls()

        try:
            general = _section(data, "general")
            config.general = GeneralConfig(
                home_url=_value(general, "general.home_url", DEFAULT_HOME_URL, str),
            )

            network = _section(data, "network")
            config.network = NetworkConfig(
                timeout=float(_value(network, "network.timeout", 10.0, (int, float))),
                user_agent=_value(network, "network.user_agent", f"kestrel/{__version__}", str),
            )

            rendering = _section(data, "rendering")
            config.rendering = RenderingConfig(
                link_style=_value(rendering, "rendering.link_style", "blue underline", str),
                selected_style=_value(
                    rendering, "rendering.selected_style", "bold white on blue", str
                ),
            )

            ui = _section(data, "ui")
            config.ui = UIConfig(
                theme=_value(ui, "ui.theme", "dark", str),
                scroll_step=_value(ui, "ui.scroll_step", 1, int),
                page_step=_value(ui, "ui.page_step", 10, int),
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e

        if config.network.timeout <= 0:
            raise ConfigError("network.timeout must be positive")

        if config.ui.scroll_step < 1 or config.ui.page_step < 1:
            raise ConfigError("ui.scroll_step and ui.page_step must be at least 1")

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "general": {
                "home_url": self.general.home_url,
            },
            "network": {
                "timeout": self.network.timeout,
                "user_agent": self.network.user_agent,
            },
            "rendering": {
                "link_style": self.rendering.link_style,
                "selected_style": self.rendering.selected_style,
            },
            "ui": {
                "theme": self.ui.theme,
                "scroll_step": self.ui.scroll_step,
                "page_step": self.ui.page_step,
            },
        }


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the [name] table, or an empty one if it is absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise TypeError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def _value(section: dict[str, Any], key: str, default: Any, kind: type | tuple[type, ...]) -> Any:
    """
    Read one setting and check its type.

    TOML booleans are rejected for numeric settings even though bool is an
    int subclass.
    """
    value = section.get(key.rsplit(".", 1)[-1], default)
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"{key} has the wrong type: {value!r}")
    return value


def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config and logs are stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.log_file_path()}")
