"""
Stderr tracing shared by the calsplit modules.

Off by default; the command line turns it on with --debug.
"""

from datetime import datetime
import sys


_enabled: bool = False


def set_debug(enabled: bool):
    """Enable or disable debug tracing for the whole package."""
    global _enabled
    _enabled = enabled


def debug_print(tag: str, msg: str) -> None:
    if not _enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {tag}: {msg}", file=sys.stderr)
