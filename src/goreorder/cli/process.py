"""
File processing for the go-reorder command.

run() and process_stdin() return exit codes instead of exiting so the command
layer decides how to terminate.
"""

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import typer

from goreorder.cli import output
from goreorder.cli.discover import discover_files
from goreorder.config import BehaviorConfig, ReorderConfig, default_config, find_config, load_config
from goreorder.exceptions import GoReorderError
from goreorder.logging_config import logger
from goreorder.reorder import reorder_source_detailed


@dataclass
class CLIOptions:
    write: bool = False
    check: bool = False
    diff: bool = False
    verbose: bool = False
    config: Optional[Path] = None
    mode: Optional[str] = None
    exclude: List[str] = field(default_factory=list)


def unified_diff(original: str, reordered: str, path: str) -> str:
    return "".join(difflib.unified_diff(
        original.splitlines(keepends=True),
        reordered.splitlines(keepends=True),
        fromfile=path,
        tofile=path,
    ))


def resolve_config(opts: CLIOptions, search_dir: Optional[Path]) -> Tuple[ReorderConfig, Optional[Path]]:
    """
    Loads the configuration for a run.

    An explicit --config must exist. Otherwise the config is discovered from
    search_dir upward, falling back to defaults. --mode overrides the mode.

    Raises:
        GoReorderError: If the config cannot be loaded.
        FileNotFoundError: If an explicit config file is missing.
    """
    config_path: Optional[Path] = None
    if opts.config is not None:
        if not opts.config.is_file():
            raise FileNotFoundError(f"config file not found: {opts.config}")
        config_path = opts.config
    elif search_dir is not None:
        config_path = find_config(search_dir)

    config = load_config(config_path) if config_path is not None else default_config()
    if opts.mode:
        config = config.model_copy(update={"behavior": BehaviorConfig(mode=opts.mode)})
    config.check()
    return config, config_path


def process_file(path: Path, config: ReorderConfig, opts: CLIOptions) -> bool:
    """
    Reorders one file and writes the result where the options say.

    Returns:
        True if the file's content would change.
    """
    content = path.read_text(encoding="utf-8")
    result = reorder_source_detailed(content, config, source_name=str(path))
    for message in result.warnings:
        output.warning(f"{path}: {message}")

    changed = result.source != content
    logger.info(f"{path}: {'changed' if changed else 'unchanged'}")

    if opts.check:
        return changed

    if opts.diff:
        if changed:
            output.echo(unified_diff(content, result.source, str(path)))
        return changed

    if opts.write:
        output.info(str(path))
        if changed:
            path.write_text(result.source, encoding="utf-8")
        return changed

    output.echo(result.source)
    return changed


def process_stdin(opts: CLIOptions) -> int:
    """Reads source from stdin and writes the reordered source to stdout."""
    try:
        config, _ = resolve_config(opts, search_dir=None)
        content = typer.get_text_stream("stdin").read()
        result = reorder_source_detailed(content, config, source_name="<stdin>")
    except (GoReorderError, OSError) as e:
        output.error(str(e))
        return 1

    for message in result.warnings:
        output.warning(message)
    output.echo(result.source)
    return 0


def run(opts: CLIOptions, paths: List[Path]) -> int:
    """
    Processes the given paths.

    Returns:
        0 on success; 1 on errors, or with --check when any file would change.
    """
    if not paths:
        output.error("no files specified")
        return 1

    if len(paths) == 1 and str(paths[0]) == "-":
        return process_stdin(opts)

    try:
        go_files = discover_files(paths, opts.exclude)
    except OSError as e:
        output.error(f"discovering files: {e}")
        return 1

    if not go_files:
        output.error("no Go files found")
        return 1

    try:
        config, config_path = resolve_config(opts, search_dir=go_files[0].parent)
    except (GoReorderError, OSError) as e:
        output.error(str(e))
        return 1

    if opts.verbose:
        output.info(f"config: {config_path if config_path is not None else 'using defaults'}")
        output.info(f"mode: {config.behavior.mode}")
        output.info(f"files: {len(go_files)}")

    changed_files: List[Path] = []
    for path in go_files:
        try:
            if process_file(path, config, opts):
                changed_files.append(path)
        except (GoReorderError, OSError, UnicodeDecodeError) as e:
            output.error(f"processing {path}: {e}")
            return 1

    if opts.check and changed_files:
        for path in changed_files:
            output.info(str(path))
        return 1

    return 0
