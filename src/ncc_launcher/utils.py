"""Configuration, logging setup and process execution for the launcher."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys

# Configuration Constants
DELEGATE_NAME = os.environ.get("NCC_LAUNCHER_DELEGATE", "ncc")
RESOLVE_MODE = os.environ.get("NCC_LAUNCHER_RESOLVE", "path").strip().lower()
EXEC_VERSION = os.environ.get("NCC_LAUNCHER_EXEC_VERSION") or None
DEBUG = bool(os.environ.get("NCC_LAUNCHER_DEBUG"))

# "path": search $PATH ourselves, "spawn": let the OS search at spawn time
RESOLVE_MODES = ("path", "spawn")

log = logging.getLogger(__name__)


def setup_logging(debug: bool = DEBUG) -> None:
    """Send launcher debug output to stderr when NCC_LAUNCHER_DEBUG is set."""
    root = logging.getLogger("ncc_launcher")
    if not debug or root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[ncc-launcher] %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def exit_code_from_returncode(returncode: int) -> int:
    """Map a subprocess return code to a process exit status.

    Negative values mean the child was killed by a signal; those are
    reported as 128 + signal number, the way a shell does.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


def run_cmd(argv: list[str]) -> int:
    """Run *argv* in the foreground and wait for it.

    Stdio and the environment are inherited. SIGINT and SIGQUIT are
    ignored while waiting, so a Ctrl-C only reaches the child and the
    launcher still reports the child's status. Raises OSError when the
    program cannot be started.

    Returns:
        The child's exit status.
    """
    log.debug("Spawning %s", argv[0])
    proc = subprocess.Popen(argv)
    saved = {sig: signal.signal(sig, signal.SIG_IGN) for sig in (signal.SIGINT, signal.SIGQUIT)}
    try:
        returncode = proc.wait()
    finally:
        for sig, handler in saved.items():
            signal.signal(sig, handler)
    log.debug("%s exited with return code %d", argv[0], returncode)
    return exit_code_from_returncode(returncode)
