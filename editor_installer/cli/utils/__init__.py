"""CLI utility functions"""

from .output import (
    console,
    format_tool_list,
    format_group_list,
    format_resolution_errors,
    format_summary,
    print_error,
    print_warning,
)
from .actions import build_request, execute

__all__ = [
    # Output utilities
    'console',
    'format_tool_list',
    'format_group_list',
    'format_resolution_errors',
    'format_summary',
    'print_error',
    'print_warning',

    # Execution
    'build_request',
    'execute',
]
