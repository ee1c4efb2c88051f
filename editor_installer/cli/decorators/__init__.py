"""CLI decorators"""

from .selection import selection_options, force_option, symbolic_option

__all__ = [
    'selection_options',
    'force_option',
    'symbolic_option',
]
