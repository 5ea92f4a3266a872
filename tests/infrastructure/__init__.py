"""
Unified test infrastructure for inline-assets.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the command-line surfaces in a subprocess
- testing_utils: Recording reporter and stub minifiers
"""

from .file_utils import write, write_bytes
from .cli_utils import run_cli, run_tasks_cli
from .testing_utils import PNG_BYTES, PNG_B64, RecordingReporter, stub_minifiers, make_options

__all__ = [
    "write",
    "write_bytes",
    "run_cli",
    "run_tasks_cli",
    "PNG_BYTES",
    "PNG_B64",
    "RecordingReporter",
    "stub_minifiers",
    "make_options",
]
