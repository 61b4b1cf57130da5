# =============================================================================
# Kestrel Entry Point for `python -m kestrel`
# =============================================================================
# This module allows Kestrel to be run as a Python module:
#
#   python -m kestrel [URL]
#
# This is equivalent to running the 'kestrel' command after installation.
# =============================================================================

import sys

from kestrel.app import main

if __name__ == "__main__":
    sys.exit(main())
