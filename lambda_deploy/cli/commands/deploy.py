"""Deploy command implementation"""

import sys

import click

from ..utils.output import (
    console,
    exit_code_for,
    format_deploy_result,
    format_deploy_result_json,
    format_error,
)
from ...api.exceptions import DeployToolError
from ...core.archive import ArchiveFactory
from ...models import DeployRequest, full_function_name
from ...services import DeployServiceFactory
from ...utils.async_utils import run_async


@click.command()
@click.option('-f', '--function', 'function_name', required=True,
              help='Function name in the config file to deploy')
@click.option('-e', '--environment', 'env_name', required=True,
              help='Environment of the function to deploy')
@click.option('-c', '--commit-hash', required=True,
              help='Full length (40 character) commit hash being deployed')
@click.option('--format', 'archive_format', default='zip', show_default=True,
              type=click.Choice(ArchiveFactory.get_supported_formats()),
              help='Archive format')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def deploy(ctx, function_name, env_name, commit_hash, archive_format, as_json):
    """Publish a new version and move the live alias to it

    Builds the archive from the function's zipContents, publishes it as a
    new version of <function>_<environment> and points the environment's
    live alias at the new version.

    Examples:

        # Deploy orders to staging
        lambda-deploy deploy -f orders -e staging -c $(git rev-parse HEAD)

        # Use another config directory
        lambda-deploy --config-dir deploy/config deploy -f orders -e prod -c <hash>
    """
    request = DeployRequest(
        function_name=function_name,
        env_name=env_name,
        commit_hash=commit_hash
    )

    try:
        # Fail before touching config files
        request.validate()

        service = DeployServiceFactory.create(
            ctx.obj.config_dir,
            ctx.obj.project_root,
            archive_format=archive_format
        )

        if not as_json:
            console.print(
                f"[cyan]Deploying {full_function_name(function_name, env_name)}...[/cyan]"
            )

        result = run_async(service.deploy(request))

    except DeployToolError as e:
        format_error(e)
        sys.exit(exit_code_for(e))

    if as_json:
        format_deploy_result_json(result)
    else:
        format_deploy_result(result)
