"""Exit code taxonomy for the checker-options CLI."""

from __future__ import annotations

from enum import IntEnum

import msgspec

from checker_options.errors import OptionsTransportError, OptionsValidationError


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Exit codes follow Unix conventions:
    - 0: Success
    - 1-9: General errors (parse, validation, config)
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception to an appropriate exit code.

        Parameters
        ----------
        exc
            Exception to classify.

        Returns
        -------
        ExitCode
            Exit code appropriate for the exception type.
        """
        type_code = _exit_code_for_exception_type(exc)
        if type_code is not None:
            return type_code

        return cls.GENERAL_ERROR


def _exit_code_for_exception_type(exc: BaseException) -> ExitCode | None:
    if isinstance(exc, OptionsValidationError):
        return ExitCode.VALIDATION_ERROR
    if isinstance(exc, (OptionsTransportError, msgspec.DecodeError)):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, (FileNotFoundError, PermissionError, IsADirectoryError)):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, (ValueError, TypeError)):
        return ExitCode.VALIDATION_ERROR
    return None


__all__ = ["ExitCode"]
