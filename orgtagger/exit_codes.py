"""
Standard exit codes for orgtagger commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
INPUT_ERROR = 64         # Malformed input line or repository reference
API_ERROR = 65           # GitHub API call failed
CONFIG_ERROR = 66        # Configuration error (missing token, bad config file)
ABORTED = 67             # User declined the confirmation prompt
AUTH_ERROR = 69          # Authentication/authorization failed
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'ConnectionError': API_ERROR,
    'TimeoutError': API_ERROR,
    'JSONDecodeError': API_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, CommandError):
        return exc.exit_code
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(CommandError):
    """Raised for a missing token, an invalid bump kind or a broken config file."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class InputError(CommandError):
    """Raised when an input line or repository reference can't be parsed."""
    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, INPUT_ERROR)
        self.line_number = line_number


class APIError(CommandError):
    """Raised when a GitHub API call fails."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, API_ERROR)
        self.status_code = status_code


class AuthError(APIError):
    """Raised when GitHub rejects the access token."""
    def __init__(self, message: str, status_code: Optional[int] = 401):
        super().__init__(message, status_code)
        self.exit_code = AUTH_ERROR


class AbortedError(CommandError):
    """Raised when the user declines to create the listed tags."""
    def __init__(self, message: str = "abort"):
        super().__init__(message, ABORTED)
