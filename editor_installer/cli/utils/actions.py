"""Shared execution of the acting commands"""

import sys
from typing import Optional

import click

from ...api.exceptions import (
    ConfigError,
    DependencyError,
    PackageValidationError,
    RequestError,
)
from ...core import FileActions
from ...models import Action, Request, RunSummary
from ...services import InstallService, PackageService
from .output import (
    format_resolution_errors,
    format_summary,
    print_error,
    print_warning,
)


def build_request(action: Action, tools=(), groups=(), force: bool = False,
                  symbolic: bool = False, only_editor: bool = False,
                  except_editor: bool = False, verbose: bool = False) -> Request:
    """Turn command options into a Request"""
    if tools and groups:
        print_warning("--group is ignored when --tool is given")
    return Request(
        action=action,
        tools=list(tools) or None,
        groups=list(groups) or None,
        force=force,
        symbolic=symbolic,
        only_editor=only_editor,
        except_editor=except_editor,
        verbose=verbose,
    )


def check_groups(ctx_obj, request: Request) -> None:
    """Every explicitly requested group must be configured"""
    if request.tools or not request.groups:
        return
    unknown = [g for g in request.groups if ctx_obj.config.catalog.get_group(g) is None]
    if unknown:
        raise RequestError(f"Group not found in configuration: {', '.join(unknown)}")


def make_service(ctx_obj) -> InstallService:
    """InstallService wired to the configured directories"""
    package_service = PackageService(ctx_obj.path_resolver, FileActions())
    return InstallService(ctx_obj.config, package_service)


def execute(ctx: click.Context, request: Request) -> Optional[RunSummary]:
    """
    Run a request and render its outcome

    Exits with status 1 on request, dependency, validation or
    filesystem errors.
    """
    obj = ctx.obj

    try:
        check_groups(obj, request)
        service = make_service(obj)

        if request.action == Action.LIST:
            return service.run(request)

        summary = service.run(request)

    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)
    except RequestError as e:
        print_error(str(e))
        sys.exit(1)
    except DependencyError as e:
        format_resolution_errors(e.resolution, obj.config)
        print_error("Nothing was done because of the previous explanation")
        sys.exit(1)
    except PackageValidationError as e:
        print_error(str(e))
        sys.exit(1)

    format_summary(summary)

    if not summary.success:
        sys.exit(1)

    return summary
