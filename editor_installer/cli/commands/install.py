"""Install command implementation"""

import click

from ..decorators import selection_options, force_option, symbolic_option
from ..utils.actions import build_request, execute
from ...models import Action


@click.command()
@selection_options
@force_option
@symbolic_option
@click.pass_context
def install(ctx, tools, groups, only_editor, except_editor, force, symbolic):
    """Install the editor and tools

    Without --tool or --group every configured tool is installed. Existing
    destinations are only overwritten after confirmation, or with --force.

    Examples:

        # Install everything
        editor-installer install

        # Install two tools and whatever they depend on being valid
        editor-installer install -t ripgrep -t fd

        # Link a group instead of copying it
        editor-installer install -g search --symbolic --except-editor
    """
    request = build_request(
        Action.INSTALL, tools, groups,
        force=force, symbolic=symbolic,
        only_editor=only_editor, except_editor=except_editor,
        verbose=ctx.obj.verbose,
    )
    execute(ctx, request)
