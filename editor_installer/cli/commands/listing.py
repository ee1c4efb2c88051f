"""List command implementation"""

import click

from ..utils.actions import build_request, execute
from ..utils.output import (
    format_action_plan,
    format_group_list,
    format_tool_list,
)
from ...models import Action


@click.command(name='list')
@click.option('-t', '--tool', 'tools', multiple=True, help='Tool to show (repeatable)')
@click.option('-g', '--group', 'groups', multiple=True, help='Group to show (repeatable)')
@click.pass_context
def list_packages(ctx, tools, groups):
    """Show declared artifacts, whether they exist and what is broken

    Each tool is listed with its binary, library and configuration paths
    and its dependencies. Problems are tagged NOT FOUND, INVALID DEPENDENCY
    or INVALID PATH.
    """
    request = build_request(Action.LIST, tools, groups, verbose=ctx.obj.verbose)
    summary = execute(ctx, request)
    resolution = summary.resolution
    config = ctx.obj.config

    format_tool_list(config, resolution, include_editor=not request.tools and not request.groups)

    groups_to_show = list(resolution.satisfied_groups.values()) + \
        [g.group for g in resolution.unsatisfied_groups.values()]
    format_group_list(groups_to_show, resolution, config)

    format_action_plan("Would install:", resolution.satisfied_tools.keys())
