"""Exceptions raised by the launcher stages. Each one ends the run with exit status 1."""


class LauncherError(Exception):
    """Base class for every internal launcher failure."""


class DelegateNotFoundError(LauncherError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"'{name}' needs to be installed on the system or added to the $PATH to execute this program."
        )


class SelfPathError(LauncherError):
    """The path of the running executable could not be determined."""

    def __init__(self, syscall: str, error: OSError):
        self.syscall = syscall
        self.error = error
        super().__init__(f"{syscall}: {error.strerror or error}")


class AllocationError(LauncherError):
    def __init__(self):
        super().__init__("unable to allocate the command line")


class SpawnError(LauncherError):
    """The delegate process could not be started."""

    def __init__(self, program: str, error: OSError):
        self.program = program
        self.error = error
        super().__init__(f"unable to start {program}: {error.strerror or error}")


class ConfigError(LauncherError):
    pass
