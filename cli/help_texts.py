"""
Centralized Help Text Constants

This module provides all CLI help text constants for commands and options,
together with the exit codes used by the subcommands.
"""

# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    MISSING_REQUIRED_OPTION = 2
    INVALID_ARGUMENT = 3
    NO_FILES_FOUND = 4
    FILE_ACCESS_ERROR = 5


# Command help texts
MAIN_HELP = "Code Bundler CLI"
BUNDLE_HELP = "Bundle code files into a single file"
CREATE_RSP_HELP = "Create a response file for bundle command"

# Option help texts - Bundle command
BUNDLE_LANGUAGE_HELP = (
    "Programming languages to include in the bundle or 'all' for all code files. "
    "Repeat the option or separate languages with commas (cs, js, ts, py, java)."
)

BUNDLE_OUTPUT_HELP = "Output bundle file path"

BUNDLE_NOTE_HELP = "Include code origin as comment in the bundle"

BUNDLE_SORT_HELP = "Sort order: name (default) or type"

BUNDLE_REMOVE_EMPTY_LINES_HELP = "Remove empty lines"

BUNDLE_AUTHOR_HELP = "Author name to include in the bundle"

BUNDLE_ROOT_HELP = "Directory to collect code files from (default: current directory)"

# Generic option help texts
LOG_LEVEL_HELP = "Logging level for diagnostics written to stderr (default: warning)"
LOG_FILE_HELP = "Also write logs to this file (rotated at 10MB)"

# Interactive prompts - create-rsp command
PROMPT_LANGUAGES = "Languages (comma separated, or 'all')"
PROMPT_OUTPUT = "Output file path"
PROMPT_NOTE = "Include code origin? (true/false)"
PROMPT_SORT = "Sort order (name/type)"
PROMPT_REMOVE_EMPTY_LINES = "Remove empty lines? (true/false)"
PROMPT_AUTHOR = "Author name"

# Messages
BUNDLE_CREATED = "Bundle created: {path}"
BUNDLE_WRITE_ERROR = "Error writing bundle: {error}"
RESPONSE_FILE_CREATED = "Response file created: {path}"
RESPONSE_FILE_ERROR = "Error writing response file: {error}"
RESPONSE_FILE_READ_ERROR = "Cannot read response file {arg}: {error}"
HINT = "Hint: {suggestion}"
