"""
Pytest configuration for the go-reorder test suite.

This conftest.py provides:
- Quiet logging (suppresses console output)
- Fixtures for Go sources under tests/test_files
- Temporary Go project fixtures for CLI tests
"""

from pathlib import Path

import pytest

from goreorder.logging_config import setup_logging

TEST_FILES_DIR = Path(__file__).parent / "test_files"


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# SOURCE FIXTURES
# ============================================================================

@pytest.fixture
def test_files_dir() -> Path:
    return TEST_FILES_DIR


@pytest.fixture
def read_go():
    """
    Returns a loader for Go fixtures by base name.

    Usage:
        def test_something(read_go):
            src = read_go("mixed")
    """
    def _read(name: str) -> str:
        return (TEST_FILES_DIR / f"{name}.go").read_text(encoding="utf-8")
    return _read


# ============================================================================
# TEMPORARY PROJECT FIXTURES
# ============================================================================

UNORDERED_SOURCE = '''package app

import "fmt"

func helper() {}

const Version = "1.0"

func main() {
	fmt.Println(Version)
}
'''

ORDERED_SOURCE = '''package app

import "fmt"

func main() {
	fmt.Println(Version)
}

// Exported constants.
const (
	Version = "1.0"
)

func helper() {}
'''


@pytest.fixture
def go_project(tmp_path):
    """
    A temporary Go module with one unordered and one ordered file.

    The go.mod marker stops config discovery from leaving the project.
    """
    (tmp_path / "go.mod").write_text("module example.com/app\n\ngo 1.22\n")
    (tmp_path / "main.go").write_text(UNORDERED_SOURCE)
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "ordered.go").write_text(ORDERED_SOURCE.replace("package app", "package pkg"))
    return tmp_path
