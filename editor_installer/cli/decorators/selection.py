"""Selection options shared by the acting commands"""

from functools import wraps
from typing import Callable

import click


def selection_options(func: Callable) -> Callable:
    """Add tool/group/editor selection options to a command

    Also rejects --only-editor together with --except-editor before the
    command body runs.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        if kwargs.get('only_editor') and kwargs.get('except_editor'):
            raise click.UsageError("--only-editor and --except-editor are mutually exclusive")
        return func(*args, **kwargs)

    options = [
        click.option('-t', '--tool', 'tools', multiple=True,
                     help='Tool to act on (repeatable)'),
        click.option('-g', '--group', 'groups', multiple=True,
                     help='Group of tools to act on (repeatable)'),
        click.option('--only-editor', is_flag=True, help='Only handle the editor'),
        click.option('--except-editor', is_flag=True, help='Handle tools but not the editor'),
    ]
    for option in reversed(options):
        wrapper = option(wrapper)
    return wrapper


def force_option(func: Callable) -> Callable:
    """Add --force"""
    return click.option('-f', '--force', is_flag=True,
                        help='Replace or remove without asking')(func)


def symbolic_option(func: Callable) -> Callable:
    """Add --symbolic"""
    return click.option('-s', '--symbolic', is_flag=True,
                        help='Link artifacts instead of copying them')(func)
