"""
Console logging for map loads.

Messages go to the console and, once init_logging() is given a path, to a log
file as well. Warnings and errors are counted so the CLI can finish with a
summary of everything that went wrong while loading.

Usage:
    from maploader.utils import log, logWarning, logError, logDebug

    log("Loading maps/n1.xml")                       # progress
    logWarning("No texture specified for model 2")   # scene loads, but differs from the map
    logError("No spawn position defined.")           # map cannot be entered
    logDebug("wall 3 at (1.0, 0.0, 2.0)")            # log file only
"""

import sys
import atexit
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple

# ANSI color codes
YELLOW = '\033[93m'
RED = '\033[91m'
GREEN = '\033[92m'
BOLD = '\033[1m'
RESET = '\033[0m'

# Module state
_log_file = None
_initialized = False
_warnings: List[str] = []
_errors: List[str] = []


def _timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def init_logging(log_path: Optional[Path] = None):
    """
    Start a logging session and reset the warning/error counts.

    Does nothing if a session is already running; call close_logging() first
    to start over.

    Args:
        log_path: Also mirror output to this file. Console only when None.
    """
    global _log_file, _initialized, _warnings, _errors

    if _initialized:
        return

    _warnings = []
    _errors = []
    _initialized = True

    if log_path is None:
        return

    log_path = Path(log_path)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(log_path, 'w', encoding='utf-8')
    except OSError as e:
        print(f"Warning: Could not open log file {log_path}: {e}", file=sys.stderr)
        return

    _write_to_file(f"Map load started: {_timestamp()}\n")
    atexit.register(close_logging)


def close_logging():
    """End the logging session, closing the log file if one is open."""
    global _log_file, _initialized

    if _log_file is not None:
        _write_to_file(f"\nMap load finished: {_timestamp()}")
        _log_file.close()
        _log_file = None

    _initialized = False


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count) for the current session."""
    return len(_errors), len(_warnings)


def print_summary():
    """Print every warning and error of the session, then the counts."""
    log("\n" + "=" * 60)
    log("LOAD SUMMARY")
    log("=" * 60)

    for title, messages, color in (("Errors", _errors, RED), ("Warnings", _warnings, YELLOW)):
        if not messages:
            continue
        print(f"\n{color}{BOLD}{title} ({len(messages)}):{RESET}")
        _write_to_file(f"\n{title} ({len(messages)}):")
        for message in messages:
            print(f"  {color}- {message}{RESET}")
            _write_to_file(f"  - {message}")

    error_color = RED + BOLD if _errors else GREEN
    warning_color = YELLOW + BOLD if _warnings else GREEN
    print(f"\n{error_color}{len(_errors)} Error(s){RESET} | "
          f"{warning_color}{len(_warnings)} Warning(s){RESET}")
    _write_to_file(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)")


def _write_to_file(msg: str, end: str = "\n"):
    """Append to the log file, if one is open."""
    if _log_file is None:
        return
    try:
        _log_file.write(msg + end)
        _log_file.flush()
    except OSError:
        pass


def log(msg: str = "", end: str = "\n"):
    """Log progress to the console and log file."""
    if not _initialized:
        init_logging()

    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning: the scene still loads but will not look as authored
    (placeholder assets, for example). Shown in yellow and counted.
    """
    if not _initialized:
        init_logging()

    print(f"{YELLOW}Warning: {msg}{RESET}", end=end)
    _write_to_file(f"Warning: {msg}", end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error: the map cannot be entered. Shown in red on stderr and counted.
    """
    if not _initialized:
        init_logging()

    print(f"{RED}ERROR: {msg}{RESET}", end=end, file=sys.stderr)
    _write_to_file(f"ERROR: {msg}", end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """Log detail about individual elements. Written to the log file only."""
    if not _initialized:
        init_logging()

    _write_to_file(f"[DEBUG] {msg}", end)
