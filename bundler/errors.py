"""
Bundler Error Hierarchy

Defines all custom exceptions used while resolving options, collecting
files and writing a bundle. The CLI catches these and reports them as plain
messages instead of stack traces.

Error Categories:
- Argument Errors: Missing required option, no valid languages
- Collection Errors: No matching source files under the root
- File Access Errors: Read, write or traversal failures
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Iterable


class BundleError(Exception):
    """Base exception for all bundler errors.

    All bundler-specific exceptions inherit from this class,
    allowing for broad exception handling in the CLI.
    """
    pass


class InvalidArgumentError(BundleError):
    """Error resolving command-line arguments.

    Raised when:
    - A required option (languages, output) is absent or blank
    - None of the requested languages maps to a known extension

    Attributes:
        option: Name of the option that failed validation (if applicable)
    """

    def __init__(self, message: str, option: Optional[str] = None):
        super().__init__(message)
        self.option = option


class NoFilesFoundError(BundleError):
    """No source file under the root matched the extension set.

    Attributes:
        root: Directory that was searched
        extensions: Extensions that were searched for
    """

    def __init__(
        self,
        message: str,
        root: Optional[str] = None,
        extensions: Optional[Iterable[str]] = None,
    ):
        super().__init__(message)
        self.root = root
        self.extensions = sorted(extensions or [])


class BundleIOError(BundleError):
    """Error reading a source file, writing the bundle or walking the tree.

    Attributes:
        path: Path where the operation failed
        original_error: The underlying file system error
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.path = path
        self.original_error = original_error


@dataclass
class BundleErrorInfo:
    """Structured error information for user-friendly error reporting.

    Attributes:
        error_type: Type of error (e.g., "NoFilesFoundError")
        message: Human-readable error message
        details: Additional context (path, option name, etc.)
        suggestion: Suggested action for the user
    """
    error_type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    @classmethod
    def from_exception(cls, error: Exception) -> "BundleErrorInfo":
        """Create BundleErrorInfo from an exception.

        Args:
            error: Exception to convert

        Returns:
            BundleErrorInfo with details extracted from the exception
        """
        details = {}
        suggestion = ""

        if isinstance(error, InvalidArgumentError):
            if error.option:
                details["option"] = error.option
            if error.option == "language":
                suggestion = "Supported languages: cs, js, ts, py, java or 'all'."

        elif isinstance(error, NoFilesFoundError):
            if error.root:
                details["root"] = error.root
            details["extensions"] = error.extensions
            suggestion = "Check the --root directory and the requested languages."

        elif isinstance(error, BundleIOError):
            if error.path:
                details["path"] = error.path
            if error.original_error is not None:
                details["original_error"] = type(error.original_error).__name__
            suggestion = "Check file permissions and available disk space."

        return cls(
            error_type=type(error).__name__,
            message=str(error),
            details=details,
            suggestion=suggestion,
        )
