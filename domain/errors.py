from typing import Sequence


class ExecError(RuntimeError):
    """Raised when an external process exits non-zero or cannot be started."""

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        exit_code: int | None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.args_list = list(args)
        self.exit_code = exit_code
        self.stderr = stderr
        command_line = " ".join([command, *self.args_list])
        if exit_code is None:
            message = f"Unable to start process: {command_line}"
        else:
            message = f"Command failed (exit_code={exit_code}): {command_line}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class TranslationSyncError(RuntimeError):
    """Base class for errors that end a translation sync run."""


class ConfigurationError(TranslationSyncError):
    pass


class ToolInstallError(TranslationSyncError):
    pass


class TranslationError(TranslationSyncError):
    pass


class GitConfigError(TranslationSyncError):
    pass


class GitError(TranslationSyncError):
    """Branch, status, commit or push failure."""


class PublishError(TranslationSyncError):
    pass
