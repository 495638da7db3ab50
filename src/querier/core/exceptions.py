"""Exception hierarchy for querier.

All exceptions carry an exit_code for CLI return value mapping.
Rendering errors are terminal: no partial output is produced.
"""

from querier.core.exit_codes import ExitCode


class QuerierError(Exception):
    """Base exception for all querier errors."""

    exit_code: int = ExitCode.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputError(QuerierError):
    """File not found, unreadable result dump, invalid parameters."""

    exit_code: int = ExitCode.INPUT_ERROR


class MalformedRowError(InputError):
    """Row does not line up with the column list."""


class OutputError(QuerierError):
    """Output could not be produced or written."""

    exit_code: int = ExitCode.OUTPUT_ERROR


class EncodingError(OutputError):
    """A value cannot be represented in the target format."""


class UnsupportedFormatError(QuerierError):
    """Unknown output format identifier."""

    exit_code: int = ExitCode.USAGE_ERROR


class ConfigError(QuerierError):
    """Malformed config, invalid setting."""

    exit_code: int = ExitCode.CONFIG_ERROR
