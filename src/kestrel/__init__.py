# =============================================================================
# Kestrel: A Terminal Hypertext Browser
# =============================================================================
#
# Kestrel fetches an HTML page, flattens it into plain lines and links, and
# lets you scroll through it and follow links from the keyboard.
#
# Features:
#   - Depth-first HTML flattening with block-level line breaks
#   - Relative link resolution against the page address
#   - Tab-cycling link selection, Enter to follow
#   - Load errors shown in place, never fatal
#   - XDG Base Directory compliant
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "kestrel"

# Main entry point - this is what gets called by the 'kestrel' command
from kestrel.app import main

__all__ = ["main", "__version__", "__app_name__"]
