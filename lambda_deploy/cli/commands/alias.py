"""Alias repair command implementation"""

import sys

import click

from ..utils.output import exit_code_for, format_alias_binding, format_error
from ...api.exceptions import DeployToolError
from ...services import DeployServiceFactory
from ...utils.async_utils import run_async


@click.command(name='set-alias')
@click.option('-f', '--function', 'function_name', required=True,
              help='Function name in the config file')
@click.option('-e', '--environment', 'env_name', required=True,
              help='Environment of the function')
@click.option('--version', 'version', required=True,
              help='Already published version to make live')
@click.pass_context
def set_alias(ctx, function_name, env_name, version):
    """Point the environment's live alias at a published version

    Finishes a deploy whose alias update failed, or switches back to an
    older version. Nothing is built or published.

    Example:

        lambda-deploy set-alias -f orders -e prod --version 7
    """
    try:
        service = DeployServiceFactory.create(ctx.obj.config_dir, ctx.obj.project_root)
        binding = run_async(service.set_alias(function_name, env_name, version))
    except DeployToolError as e:
        format_error(e)
        sys.exit(exit_code_for(e))

    format_alias_binding(binding)
