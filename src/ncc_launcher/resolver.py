"""Locate the delegate tool and the launcher's own executable."""

from __future__ import annotations

import errno
import logging
import os
import shutil
import sys

from ncc_launcher.errors import ConfigError, DelegateNotFoundError, SelfPathError
from ncc_launcher.utils import DELEGATE_NAME, RESOLVE_MODE, RESOLVE_MODES

log = logging.getLogger(__name__)

PROC_SELF_EXE = "/proc/self/exe"


def find_in_path(name: str, path_env: str) -> str | None:
    """Return ``<dir>/<name>`` for the first directory in *path_env* holding *name*.

    Directories are probed in listed order and the search stops at the
    first entry that exists. Empty entries are skipped, never taken as
    the current directory.
    """
    for directory in path_env.split(os.pathsep):
        if not directory:
            continue
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_delegate(
    name: str = DELEGATE_NAME,
    mode: str = RESOLVE_MODE,
    path_env: str | None = None,
) -> str:
    """Work out what to spawn for the delegate tool.

    In ``path`` mode the directories of ``$PATH`` are searched here and a
    missing delegate raises DelegateNotFoundError before anything is spawned.
    In ``spawn`` mode the bare name is returned and the lookup happens when
    the process is started.

    A *name* that already contains a path separator is never searched for;
    it has to exist as given.
    """
    if mode not in RESOLVE_MODES:
        raise ConfigError(
            f"NCC_LAUNCHER_RESOLVE must be one of {', '.join(RESOLVE_MODES)}, got '{mode}'"
        )

    if os.sep in name:
        if mode == "path" and not os.path.exists(name):
            raise DelegateNotFoundError(name)
        log.debug("Using delegate %s as configured", name)
        return name

    if mode == "spawn":
        log.debug("Deferring lookup of '%s' to spawn time", name)
        return name

    if path_env is None:
        path_env = os.environ.get("PATH")
    if path_env is None:
        raise DelegateNotFoundError(name)

    found = find_in_path(name, path_env)
    if found is None:
        raise DelegateNotFoundError(name)
    log.debug("Found delegate at %s", found)
    return found


def resolve_self_path(argv0: str | None = None, frozen: bool | None = None) -> str:
    """Return the absolute path of the executable that is currently running.

    A frozen single-file build reads the kernel's self-link. An installed
    console script is the file named by ``argv[0]``, looked up on ``$PATH``
    when it was invoked by bare name.
    """
    if frozen is None:
        frozen = getattr(sys, "frozen", False)

    if frozen:
        try:
            path = os.readlink(PROC_SELF_EXE)
        except OSError as e:
            raise SelfPathError("readlink", e) from e
        log.debug("Resolved self path from %s: %s", PROC_SELF_EXE, path)
        return path

    if argv0 is None:
        argv0 = sys.argv[0]
    if not argv0:
        raise SelfPathError("stat", OSError(errno.ENOENT, os.strerror(errno.ENOENT)))

    if os.sep not in argv0:
        found = shutil.which(argv0)
        if found is None:
            raise SelfPathError("which", OSError(errno.ENOENT, os.strerror(errno.ENOENT)))
        argv0 = found

    path = os.path.realpath(argv0)
    try:
        os.stat(path)
    except OSError as e:
        raise SelfPathError("stat", e) from e
    log.debug("Resolved self path: %s", path)
    return path
