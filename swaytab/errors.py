"""
Error handling for swaytab.

Every failure the picker can run into is a SwaytabError carrying a structured
code. Recoverable errors (the user cancelled, the filter binary is missing) are
handled by the picker; everything else is fatal and reaches the CLI.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for swaytab.

    - 100-199: Filter errors
    - 200-299: Configuration errors
    - 300-399: Sway IPC errors
    """

    # Filter errors (100-199)
    FILTER_COMMAND_FAILED = 100
    EMPTY_FILTER_RESULT = 101
    PROTOCOL_VIOLATION = 102

    # Configuration errors (200-299)
    CONFIG_LOAD_FAILED = 200
    CONFIG_STORE_FAILED = 201

    # Sway IPC errors (300-399)
    WM_UNAVAILABLE = 300


class SwaytabError(Exception):
    """Base exception for swaytab errors."""

    recoverable = False

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize swaytab error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class FilterCommandFailed(SwaytabError):
    """The filter subprocess could not be spawned."""

    recoverable = True

    def __init__(self, command: str, error: OSError):
        """
        Initialize filter spawn error.

        Args:
            command: Filter command that failed to start
            error: Underlying OS error from the spawn attempt
        """
        self.error = error
        super().__init__(
            code=ErrorCode.FILTER_COMMAND_FAILED,
            message=f"Filter command failed: {command}: {error}",
            suggestion="Check that the filter command is installed and on PATH",
            context={"command": command, "reason": str(error)}
        )


class EmptyFilterResult(SwaytabError):
    """The filter returned no selection."""

    recoverable = True

    def __init__(self):
        super().__init__(
            code=ErrorCode.EMPTY_FILTER_RESULT,
            message="filter command did not return any item"
        )


class ProtocolViolation(SwaytabError):
    """The filter answered with a line that has no integer id."""

    def __init__(self, output: str, reason: str):
        """
        Initialize protocol violation.

        Args:
            output: Raw filter output that could not be parsed
            reason: Why parsing failed
        """
        super().__init__(
            code=ErrorCode.PROTOCOL_VIOLATION,
            message=f"Failed to parse filter output {output!r}: {reason}",
            suggestion="The filter must print the chosen line unchanged",
            context={"output": output, "reason": reason}
        )


class WindowManagerUnavailable(SwaytabError):
    """Sway IPC connection or query failed."""

    def __init__(self, operation: str, reason: str):
        """
        Initialize Sway IPC error.

        Args:
            operation: IPC operation that failed
            reason: Reason for failure
        """
        super().__init__(
            code=ErrorCode.WM_UNAVAILABLE,
            message=f"Sway IPC {operation} failed: {reason}",
            suggestion="Ensure Sway is running and SWAYSOCK is set",
            context={"operation": operation, "reason": reason}
        )


class ConfigLoadError(SwaytabError):
    """Configuration loading error."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize configuration load error.

        Args:
            file_path: Path to configuration file
            reason: Reason for load failure
        """
        super().__init__(
            code=ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and permissions",
            context={"file_path": file_path, "reason": reason}
        )


class ConfigStoreError(SwaytabError):
    """Configuration write error."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            code=ErrorCode.CONFIG_STORE_FAILED,
            message=f"Failed to store configuration to {file_path}: {reason}",
            suggestion="Check directory permissions",
            context={"file_path": file_path, "reason": reason}
        )
