"""apidiff: breaking-change detection for PhET-iO API descriptions."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("apidiff")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from apidiff.api import compare, compare_macro, format_api_file, ComparisonResult, MacroComparisonResult
from apidiff.kernel.model import APIDescription, ElementMetadata, InvalidAPIError, Problem
from apidiff.kernel.compare import compare_apis
from apidiff.codes import ExitCode

__all__ = [
    "__version__",
    "compare",
    "compare_apis",
    "compare_macro",
    "format_api_file",
    "ComparisonResult",
    "MacroComparisonResult",
    "APIDescription",
    "ElementMetadata",
    "InvalidAPIError",
    "Problem",
    "ExitCode",
]
