"""CLI utility functions"""

from .output import (
    console,
    error_console,
    format_deploy_result,
    format_deploy_result_json,
    format_alias_binding,
    format_error,
    exit_code_for,
)

__all__ = [
    'console',
    'error_console',
    'format_deploy_result',
    'format_deploy_result_json',
    'format_alias_binding',
    'format_error',
    'exit_code_for',
]
