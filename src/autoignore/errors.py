"""Custom exceptions for autoignore.

Only failures the user has to act on are raised. Evidence-gathering
problems (unreadable directories, missing git) are absorbed where they
happen and never reach this hierarchy.
"""


class AutoignoreError(RuntimeError):
    """Base class for all autoignore errors."""
    pass


class DirectoryNotFoundError(AutoignoreError):
    """Target directory does not exist."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Directory not found: {directory}")


class GitignoreExistsError(AutoignoreError):
    """Ignore file exists and neither merge nor force was requested."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"{path} already exists. "
            f"Use --force to overwrite or --merge to add new rules."
        )


class GitignoreReadError(AutoignoreError):
    """Existing ignore file could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class ConfigError(AutoignoreError):
    """Configuration file could not be parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration in {path}: {reason}")
