# lambda_deploy/cli/utils/output.py
"""Output formatting utilities"""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from ...api.exceptions import (
    AliasUpdateFailedError,
    ConfigError,
    DeployToolError,
    InvalidRequestError,
    MissingManifestEntryError,
    PublishFailedError,
)
from ...constants import EMOJI_SUCCESS, EMOJI_ERROR, EMOJI_WARNING, ExitCode
from ...models import AliasBinding, DeployResult

console = Console()
error_console = Console(stderr=True)


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Function", result.function_name)
    table.add_row("Alias", result.alias_name)
    table.add_row("Version", f"[green]{result.function_version}[/green]")
    if result.commit_hash:
        table.add_row("Commit", result.commit_hash)
    table.add_row("Duration", f"{result.duration:.2f}s")

    panel = Panel(
        table,
        title=f"[green]{EMOJI_SUCCESS} Deploy completed[/green]",
        border_style="green"
    )
    console.print(panel)


def format_deploy_result_json(result: DeployResult) -> None:
    """Print the wire format result"""
    console.print_json(json.dumps(result.to_dict()))


def format_alias_binding(binding: AliasBinding) -> None:
    """Format and display alias update result"""
    console.print(
        f"[green]{EMOJI_SUCCESS}[/green] Alias [bold]{binding.alias_name}[/bold] of "
        f"[cyan]{binding.function_name}[/cyan] now points at version "
        f"[green]{binding.function_version}[/green]"
    )


def exit_code_for(error: BaseException) -> int:
    """Map an error to the CLI exit code of the stage that failed"""
    if isinstance(error, InvalidRequestError):
        return ExitCode.INVALID_REQUEST
    if isinstance(error, ConfigError):
        return ExitCode.CONFIG_ERROR
    if isinstance(error, MissingManifestEntryError):
        return ExitCode.MISSING_MANIFEST_ENTRY
    if isinstance(error, PublishFailedError):
        return ExitCode.PUBLISH_FAILED
    if isinstance(error, AliasUpdateFailedError):
        return ExitCode.ALIAS_UPDATE_FAILED
    return ExitCode.UNEXPECTED


def format_error(error: DeployToolError) -> None:
    """Format and display a deploy error"""
    stage = f" ({error.stage.value})" if error.stage else ""
    code = " " + escape(f"[{error.error_code}]") if error.error_code else ""
    error_console.print(f"[red]{EMOJI_ERROR} Error{stage}{code}:[/red] {escape(str(error))}")

    if isinstance(error, AliasUpdateFailedError):
        error_console.print(
            f"[yellow]{EMOJI_WARNING} Version {error.version} of {error.function_name} "
            f"is published but not live.[/yellow]"
        )
        error_console.print(
            f"  Retry the alias update with: set-alias --version {error.version} "
            f"-f <function> -e <environment>"
        )
