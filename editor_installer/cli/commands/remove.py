"""Remove command implementation"""

import click

from ..decorators import selection_options, force_option
from ..utils.actions import build_request, execute
from ...models import Action


@click.command()
@selection_options
@force_option
@click.pass_context
def remove(ctx, tools, groups, only_editor, except_editor, force):
    """Remove the installed editor and tools

    Every removal is confirmed (default yes) unless --force is given.

    Examples:

        # Remove one tool without prompting
        editor-installer remove -t fd --force

        # Remove only the editor
        editor-installer remove --only-editor
    """
    request = build_request(
        Action.REMOVE, tools, groups,
        force=force,
        only_editor=only_editor, except_editor=except_editor,
        verbose=ctx.obj.verbose,
    )
    execute(ctx, request)
