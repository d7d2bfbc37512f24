from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from wayfinder.common import create_logger
from wayfinder.discovery import DiscoveryRequest, DiscoveryResult, resolve_directory

logger = create_logger("cli")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


SubdirectoryArgument = Annotated[
    str,
    typer.Argument(help="Relative directory to look for, e.g. '.prompts-mcp/prompts'."),
]
EnvPrefixOption = Annotated[
    str | None,
    typer.Option("--env-prefix", "-e", help="Check the {PREFIX}_SUBDIR environment variable before searching."),
]
StartDirOption = Annotated[
    Path | None,
    typer.Option("--start-dir", help="Directory the upward search starts from (PROJECT_DIR takes precedence)."),
]
HomeFallbackOption = Annotated[
    bool,
    typer.Option("--home-fallback/--no-home-fallback", help="Fall back to the home directory when nothing is found."),
]
HomeSubdirOption = Annotated[
    str | None,
    typer.Option("--home-subdir", help="Directory used under home when falling back, defaults to SUBDIRECTORY."),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format."),
]


def resolve(
    subdirectory: SubdirectoryArgument,
    env_prefix: EnvPrefixOption = None,
    start_dir: StartDirOption = None,
    home_fallback: HomeFallbackOption = True,
    home_subdir: HomeSubdirOption = None,
    format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Show where a directory resolves to and how it was found."""
    result = _discover(subdirectory, env_prefix, start_dir, home_fallback, home_subdir)
    typer.echo(_format_result(result, format))


def path(
    subdirectory: SubdirectoryArgument,
    env_prefix: EnvPrefixOption = None,
    start_dir: StartDirOption = None,
    home_fallback: HomeFallbackOption = True,
    home_subdir: HomeSubdirOption = None,
) -> None:
    """Print only the resolved path."""
    result = _discover(subdirectory, env_prefix, start_dir, home_fallback, home_subdir)
    typer.echo(str(result.path))


def exists(
    subdirectory: SubdirectoryArgument,
    env_prefix: EnvPrefixOption = None,
    start_dir: StartDirOption = None,
    home_fallback: HomeFallbackOption = True,
    home_subdir: HomeSubdirOption = None,
) -> None:
    """Exit with 0 when the resolved directory exists, 1 otherwise."""
    result = _discover(subdirectory, env_prefix, start_dir, home_fallback, home_subdir)
    raise typer.Exit(code=0 if result.exists else 1)


def _discover(
    subdirectory: str,
    env_prefix: str | None,
    start_dir: Path | None,
    home_fallback: bool,
    home_subdir: str | None,
) -> DiscoveryResult:
    try:
        request = DiscoveryRequest(
            subdirectory=subdirectory,
            override_env_name=env_prefix,
            start_directory=start_dir,
            use_home_fallback=home_fallback,
            home_subdirectory=home_subdir,
        )
    except ValidationError as error:
        _handle_error(error)
        raise typer.Exit(code=2) from error

    result = resolve_directory(request)
    logger.info("Resolved directory", **result.to_dict())
    if not result.exists:
        logger.info("Directory does not exist yet, continuing without it", path=str(result.path))
    return result


def _format_result(result: DiscoveryResult, format: OutputFormat) -> str:
    payload = result.to_dict()
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2)
    if format is OutputFormat.YAML:
        return yaml.safe_dump(payload, sort_keys=False).rstrip("\n")
    return "\n".join(
        [
            f"path: {result.path}",
            f"source: {result.source.value}",
            f"exists: {str(result.exists).lower()}",
        ]
    )


def _handle_error(error: ValidationError) -> None:
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        typer.secho(f"[{field}] {detail['msg']}", err=True, fg=typer.colors.RED)
