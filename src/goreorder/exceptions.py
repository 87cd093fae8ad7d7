# Custom exceptions for go-reorder

from typing import List, Optional


class GoReorderError(Exception):
    """Base exception for all application-specific errors."""
    pass


class ParserError(GoReorderError):
    """Raised when Go source cannot be parsed by tree-sitter."""
    def __init__(self, source: str, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.source = source
        self.message = message
        self.line = line
        self.column = column
        location = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"Failed to parse {source}{location}: {message}")


class GrammarNotFoundError(GoReorderError):
    """Raised when the tree-sitter Go grammar is not installed."""
    def __init__(self, language: str, install_command: str):
        self.language = language
        self.install_command = install_command
        super().__init__(f"Grammar for '{language}' not found. Install it with: {install_command}")


class ConfigError(GoReorderError):
    """Raised for configuration-related problems."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when a config holds unknown names, duplicates or an invalid mode."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or [message]
        super().__init__(message)


class UnmatchedSectionError(GoReorderError):
    """Raised in strict mode when code belongs to sections missing from the config."""

    def __init__(self, sections: List[str]):
        self.sections = list(sections)
        message = (
            f"strict mode: code found for sections not in config: {', '.join(self.sections)}\n"
            "\n"
            "Hints:\n"
            "  - Add the missing sections to [sections] order in .go-reorder.toml\n"
            "  - Add \"uncategorized\" to [sections] order and use --mode=append to collect unmatched code\n"
            "  - Use --mode=warn to append unmatched code at the end with a warning\n"
            "  - Use --mode=drop to discard unmatched code deliberately"
        )
        super().__init__(message)


class ConservationError(GoReorderError):
    """Raised if reassembly would emit a different number of declarations than it received."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Declaration count mismatch after reassembly: expected {expected}, got {actual}. "
            "Refusing to emit output that would lose or duplicate code."
        )
