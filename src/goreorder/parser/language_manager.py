from typing import Dict

try:
    from tree_sitter import Language, Parser
    import tree_sitter_go as tsgo
    TREE_SITTER_AVAILABLE = True
except ImportError:
    TREE_SITTER_AVAILABLE = False

from goreorder.exceptions import GrammarNotFoundError
from goreorder.logging_config import logger

# Global cache for loaded languages to avoid repeated loading
_language_cache: Dict[str, "Language"] = {}


def get_go_language() -> "Language":
    """
    Loads the tree-sitter Go language.

    Caches the loaded language object for efficiency. Language objects are
    read-only and safe to share between threads.
    """
    if not TREE_SITTER_AVAILABLE:
        raise GrammarNotFoundError("go", "pip install tree-sitter tree-sitter-go")

    if "go" not in _language_cache:
        _language_cache["go"] = Language(tsgo.language())
        logger.debug("Successfully loaded language 'go'")
    return _language_cache["go"]


def new_go_parser() -> "Parser":
    """
    Creates a fresh Go parser.

    Parsers hold per-parse state, so every invocation gets its own.
    """
    parser = Parser()
    parser.language = get_go_language()
    return parser
