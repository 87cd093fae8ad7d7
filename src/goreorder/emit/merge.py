"""Merging const/var specs into a single parenthesized block."""

from typing import List

from goreorder.parser.nodes import GenDecl, Spacing, ValueSpec


def merge_value_specs(specs: List[ValueSpec], token: str, header: str) -> GenDecl:
    """
    Builds one ``const (...)`` or ``var (...)`` block from loose specs.

    Args:
        specs: Specs in the order they should appear.
        token: "const" or "var".
        header: Comment line placed above the block.

    Returns:
        A synthetic GenDecl printed from its specs.
    """
    for spec in specs:
        spec.before = Spacing.NEW_LINE
    return GenDecl(
        doc=[header],
        before=Spacing.EMPTY_LINE,
        token=token,
        specs=list(specs),
        parenthesized=True,
        synthetic=True,
    )
