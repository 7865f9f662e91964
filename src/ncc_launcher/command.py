"""Assemble the delegate invocation."""

from __future__ import annotations

from ncc_launcher.utils import EXEC_VERSION

EXEC_SUBCOMMAND = "exec"
EXEC_ARGS_MARKER = "--exec-args"


def build_command(
    delegate: str,
    self_path: str,
    args: list[str],
    exec_version: str | None = EXEC_VERSION,
) -> list[str]:
    """Return the argv that runs the packaged program through the delegate.

    Every forwarded argument is its own element, in the original order.
    """
    argv = [delegate, EXEC_SUBCOMMAND, f"--package={self_path}"]
    if exec_version:
        argv.append(f"--exec-version={exec_version}")
    argv.append(EXEC_ARGS_MARKER)
    argv.extend(args)
    return argv


def format_command(argv: list[str]) -> str:
    """Render an argv from build_command as a single display line.

    The package path and each forwarded argument are wrapped in double
    quotes, e.g. ``ncc exec --package="/opt/app/prog" --exec-args "a" "b c"``.
    Embedded quotes are not escaped; the line is for humans, not a shell.
    """
    marker = argv.index(EXEC_ARGS_MARKER)
    parts = []
    for token in argv[:marker + 1]:
        if token.startswith("--package="):
            token = f'--package="{token[len("--package="):]}"'
        parts.append(token)
    parts.extend(f'"{arg}"' for arg in argv[marker + 1:])
    return " ".join(parts)
