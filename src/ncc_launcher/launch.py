"""CLI entry point that hands the running packaged program over to ncc.

The launcher defines no options of its own. Everything after the program
name is forwarded to ``ncc exec --package=<this executable> --exec-args``
and the delegate's exit status becomes ours.
"""

from __future__ import annotations

import logging
import sys

from ncc_launcher import utils
from ncc_launcher.command import build_command, format_command
from ncc_launcher.errors import AllocationError, LauncherError, SpawnError
from ncc_launcher.resolver import resolve_delegate, resolve_self_path

log = logging.getLogger(__name__)


def launch(args: list[str], argv0: str | None = None) -> int:
    """Resolve, build and run the delegate invocation.

    Raises a LauncherError subclass when any stage fails; in that case
    nothing has been spawned.

    Returns:
        The delegate's exit status.
    """
    delegate = resolve_delegate(utils.DELEGATE_NAME, utils.RESOLVE_MODE)
    self_path = resolve_self_path(argv0)

    try:
        command = build_command(delegate, self_path, args, utils.EXEC_VERSION)
    except MemoryError as e:
        raise AllocationError() from e
    log.debug("Command: %s", format_command(command))

    try:
        return utils.run_cmd(command)
    except OSError as e:
        raise SpawnError(delegate, e) from e


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    utils.setup_logging(utils.DEBUG)

    try:
        return launch(list(argv[1:]), argv[0] if argv else None)
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
