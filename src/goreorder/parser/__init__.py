"""
This facade exposes the public API for the parser module.
"""
from .go_parser import parse_source
from .printer import print_file, render_decl

__all__ = ["parse_source", "print_file", "render_decl"]
