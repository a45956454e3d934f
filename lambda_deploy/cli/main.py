# lambda_deploy/cli/main.py
"""Main CLI entry point for lambda-deploy"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, ENV_CONFIG_DIR, ENV_PROJECT_ROOT, ExitCode
from .utils.output import console, error_console

# Import all commands
from .commands import deploy, alias


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=error_console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )

    # Adjust third-party loggers
    for name in ("asyncio", "aiofiles", "boto3", "botocore", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


class Context:
    """CLI context object shared by all commands"""

    def __init__(self):
        self.config_dir: Optional[Path] = None
        self.project_root: Optional[Path] = None
        self.verbose: bool = False
        self.debug: bool = False


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--config-dir', envvar=ENV_CONFIG_DIR,
              type=click.Path(file_okay=False, path_type=Path),
              help='Directory containing deployConfig and deployCredentials '
                   '(default: ./config)')
@click.option('--project-root', envvar=ENV_PROJECT_ROOT,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Project root the zipContents are relative to (default: .)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_dir, project_root):
    """Lambda Deploy - Publish a project to an AWS Lambda alias

    Packages the files configured for a function into a zip archive,
    publishes it as a new immutable version of <function>_<environment>
    and points the environment's live alias at that version.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context()
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.project_root = (project_root or Path.cwd()).resolve()
    ctx.obj.config_dir = (config_dir or ctx.obj.project_root / "config").resolve()


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(alias.set_alias)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        # Ctrl-C surfaces as click.Abort outside standalone mode
        cli(prog_name=APP_NAME, standalone_mode=False)

    except (KeyboardInterrupt, click.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(ExitCode.INTERRUPTED)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except Exception as e:
        error_console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            error_console.print_exception()
        sys.exit(ExitCode.UNEXPECTED)


if __name__ == "__main__":
    main()
