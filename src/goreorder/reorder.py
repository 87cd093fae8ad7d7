"""
Public entry points for reordering Go source.
"""

from typing import Dict, Optional

from goreorder.categorize import SECTION_LABELS, categorize_declarations, identify_section, sort_categorized
from goreorder.config import ReorderConfig, default_config
from goreorder.logging_config import logger
from goreorder.parser import parse_source, print_file
from goreorder.parser.nodes import GoFile
from goreorder.reassemble import ReassemblyResult, reassemble
from goreorder.schemas import ReorderResult, Section, SectionInfo, SectionOrder


def reorder_file(go_file: GoFile, config: Optional[ReorderConfig] = None) -> ReassemblyResult:
    """
    Reorders the declarations of a parsed file in place.

    Args:
        go_file: Parsed file; its ``decls`` are replaced.
        config: Configuration, defaults if None. Never modified.

    Returns:
        The reassembly result (declarations, warnings, unmatched names).
    """
    config = config or default_config()
    config.check()

    cat = sort_categorized(categorize_declarations(go_file.decls))
    result = reassemble(cat, config)
    go_file.decls = result.decls
    return result


def reorder_source_detailed(
    src: str,
    config: Optional[ReorderConfig] = None,
    source_name: str = "<source>",
) -> ReorderResult:
    """
    Reorders Go source text and reports what happened.

    Raises:
        ParserError: If the source does not parse.
        ConfigValidationError: If the configuration is invalid.
        UnmatchedSectionError: In strict mode, for code with no configured section.
    """
    go_file = parse_source(src, source_name)
    result = reorder_file(go_file, config)
    logger.debug(
        f"Reordered {source_name}: {result.input_count} declarations in, {result.output_count} out"
    )
    return ReorderResult(
        source=print_file(go_file),
        warnings=result.warnings,
        unmatched_sections=result.unmatched,
        input_count=result.input_count,
        output_count=result.output_count,
    )


def reorder_source(src: str, config: Optional[ReorderConfig] = None) -> str:
    """Reorders Go source text and returns the new text."""
    return reorder_source_detailed(src, config).source


def analyze_section_order(src: str, config: Optional[ReorderConfig] = None) -> SectionOrder:
    """
    Reports where each section currently starts and where it is expected.

    Positions are 1-indexed declaration positions. The expected position is
    the section's place in ``sections.order``, 0 if the section is not
    configured.
    """
    config = config or default_config()
    go_file = parse_source(src)

    expected: Dict[str, int] = {name: index + 1 for index, name in enumerate(config.sections.order)}
    first_seen: Dict[Section, int] = {}
    for position, decl in enumerate(go_file.decls, start=1):
        section = identify_section(decl)
        if section is not None and section not in first_seen:
            first_seen[section] = position

    sections = [
        SectionInfo(
            name=section.value,
            label=SECTION_LABELS[section],
            position=position,
            expected=expected.get(section.value, 0),
        )
        for section, position in sorted(first_seen.items(), key=lambda item: item[1])
    ]
    return SectionOrder(sections=sections)
