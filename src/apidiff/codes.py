"""Exit code constants for the apidiff command line.

CI jobs distinguish "problems found" from "comparison could not run".
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0  # Comparison ran, no problems
    PROBLEMS_FOUND = 1  # Comparison ran, at least one problem
    INPUT_ERROR = 2  # Comparison could not run (missing file, malformed API)
