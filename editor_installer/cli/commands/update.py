"""Update command implementation"""

import click

from ..decorators import selection_options, symbolic_option
from ..utils.actions import build_request, execute
from ...models import Action


@click.command()
@selection_options
@symbolic_option
@click.pass_context
def update(ctx, tools, groups, only_editor, except_editor, symbolic):
    """Reinstall the editor and tools, replacing what is installed

    Same selection rules as install, but existing destinations are
    replaced without asking.

    Example:
        editor-installer update -t ripgrep
    """
    request = build_request(
        Action.UPDATE, tools, groups,
        symbolic=symbolic,
        only_editor=only_editor, except_editor=except_editor,
        verbose=ctx.obj.verbose,
    )
    execute(ctx, request)
