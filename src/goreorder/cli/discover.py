import os
from pathlib import Path
from typing import List, Optional

import pathspec

from goreorder.logging_config import logger

GO_SUFFIX = ".go"


def build_exclude_spec(patterns: Optional[List[str]]) -> pathspec.PathSpec:
    """Gitignore-style matcher for --exclude patterns."""
    return pathspec.PathSpec.from_lines("gitignore", patterns or [])


def is_excluded(path: Path, spec: pathspec.PathSpec) -> bool:
    """
    True if the path or its base name matches an exclude pattern.

    Matching the base name lets patterns like ``*_test.go`` apply at any depth.
    """
    return spec.match_file(path.as_posix()) or spec.match_file(path.name)


def discover_files(paths: List[Path], exclude: Optional[List[str]] = None) -> List[Path]:
    """
    Collects the Go files to process.

    Files are taken as given when they end in .go. Directories are walked
    recursively in sorted order; patterns match paths relative to the walked
    directory.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    spec = build_exclude_spec(exclude)
    found: List[Path] = []

    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"no such file or directory: {path}")

        if not path.is_dir():
            if path.suffix == GO_SUFFIX and not is_excluded(path, spec):
                found.append(path)
            continue

        for root, dirs, files in os.walk(path):
            dirs.sort()
            root_path = Path(root)
            for file_name in sorted(files):
                file_path = root_path / file_name
                if file_path.suffix != GO_SUFFIX:
                    continue
                relative_path = file_path.relative_to(path)
                if is_excluded(relative_path, spec):
                    logger.debug(f"Ignoring '{relative_path}' due to exclude patterns")
                    continue
                found.append(file_path)

    logger.debug(f"Discovered {len(found)} Go file(s)")
    return found
