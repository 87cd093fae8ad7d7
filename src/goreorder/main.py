from pathlib import Path
from typing import List, Optional

import typer

from goreorder.cli import output
from goreorder.cli.process import CLIOptions, run
from goreorder.config import CONFIG_FILE_NAME, render_default_config
from goreorder.logging_config import setup_logging
from goreorder.schemas import Section

app = typer.Typer(add_completion=False)


def list_sections() -> None:
    lines = ["Available sections for config:"]
    lines.extend(f"  {section.value}" for section in Section)
    output.echo("\n".join(lines) + "\n")


def init_config(target_dir: Path) -> int:
    """Writes a default config file; refuses to overwrite an existing one."""
    config_path = target_dir / CONFIG_FILE_NAME
    if config_path.exists():
        output.error(f"{CONFIG_FILE_NAME} already exists")
        return 1
    try:
        config_path.write_text(render_default_config(), encoding="utf-8")
    except OSError as e:
        output.error(f"writing config: {e}")
        return 1
    output.echo(f"Created {CONFIG_FILE_NAME}\n")
    return 0


@app.command()
def reorder(
    path: Optional[Path] = typer.Argument(
        None, help="File or directory to process, or '-' to read from stdin."
    ),
    write: bool = typer.Option(
        False, "--write", "-w", help="Write result to source file instead of stdout."
    ),
    check: bool = typer.Option(
        False, "--check", "-c", help="Check if files are properly ordered (exit 1 if not)."
    ),
    diff: bool = typer.Option(
        False, "--diff", "-d", help="Display diff instead of reordered source."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show config and processing details."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to config file.", dir_okay=False
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", help="Behavior mode (strict|warn|append|drop)."
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", help="Exclude files matching pattern. Can be used multiple times."
    ),
    init: bool = typer.Option(
        False, "--init", help=f"Create a default {CONFIG_FILE_NAME} config file."
    ),
    list_sections_flag: bool = typer.Option(
        False, "--list-sections", help="List available section names for config."
    ),
):
    """
    Reorder the declarations of Go source files.
    """
    # Logs stay off the console unless asked for; stdout carries Go source
    setup_logging(level="INFO" if verbose else "WARNING", suppress_console=not verbose, force=True)

    if list_sections_flag:
        list_sections()
        return

    if init:
        raise typer.Exit(code=init_config(Path.cwd()))

    opts = CLIOptions(
        write=write,
        check=check,
        diff=diff,
        verbose=verbose,
        config=config,
        mode=mode,
        exclude=exclude or [],
    )
    exit_code = run(opts, [path] if path is not None else [])
    if exit_code != 0:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
