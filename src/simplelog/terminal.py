"""Terminal detection for deciding whether to emit ANSI colors."""

import os
import sys
from typing import Any

# Platforms where a descriptor probe reliably means "ANSI-capable terminal"
SUPPORTED_PLATFORMS = ("linux", "darwin")


def isatty(stream: Any) -> bool:
    """Return True if ``stream`` is backed by an interactive terminal."""
    if sys.platform not in SUPPORTED_PLATFORMS:
        return False
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        # No descriptor: None, StringIO, closed or wrapped streams
        return False
    return os.isatty(fd)


# Probed once at import and never refreshed
STDERR_IS_TTY: bool = isatty(sys.stderr)
