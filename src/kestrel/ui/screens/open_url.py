# =============================================================================
# Open URL Screen
# =============================================================================
# A modal screen for typing an address to navigate to.
#
# The address is returned to the caller, which hands it to the navigator.
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static, Input, Button
from textual.containers import Vertical, Horizontal


def normalize_address(text: str) -> str:
    """
    Tidy up a typed address.

    Bare host names get an https:// prefix; anything with a scheme is left
    alone.

    Example:
        >>> normalize_address("  example.com/docs ")
        'https://example.com/docs'
    """
    address = text.strip()
    if address and "://" not in address and not address.startswith(("about:", "file:", "data:")):
        address = f"https://{address}"
    return address


class OpenURLScreen(ModalScreen[str | None]):
    """
    Modal screen for address input.

    Returns:
        The typed address, or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    OpenURLScreen {
        align: center middle;
    }

    #open-dialog {
        width: 70;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #open-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #open-input {
        margin-bottom: 1;
    }

    #open-buttons {
        align: center middle;
        height: auto;
    }

    #open-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, current_url: str = "") -> None:
        """
        Initialize the open URL screen.

        Args:
            current_url: Address to pre-fill the input with.
        """
        super().__init__()
        self._current_url = current_url

    def compose(self) -> ComposeResult:
        """Compose the address dialog."""
        with Vertical(id="open-dialog"):
            yield Static("Open Address", id="open-title")
            yield Input(
                value=self._current_url,
                placeholder="https://example.com/",
                id="open-input",
            )
            with Horizontal(id="open-buttons"):
                yield Button("Open", id="open-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        """Focus the address input when mounted."""
        self.query_one("#open-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "open-btn":
            self.action_submit()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the input field."""
        self.action_submit()

    def action_submit(self) -> None:
        """Submit the address."""
        address = normalize_address(self.query_one("#open-input", Input).value)
        if address:
            self.dismiss(address)
        else:
            self.notify("Address cannot be empty", severity="warning")

    def action_cancel(self) -> None:
        """Cancel and return None."""
        self.dismiss(None)
