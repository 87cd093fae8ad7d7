"""
Builds the final declaration list from categorized declarations.

Content is "unmatched" when its section is missing from ``sections.order``, or
when its group element (e.g. an enum's ``iota`` block) is missing from the
layout of a configured section. Unmatched content is handled per mode:

- strict: raise UnmatchedSectionError, emit nothing
- warn:   fold into uncategorized and report a warning
- append: fold into uncategorized silently
- drop:   discard it
"""

from dataclasses import dataclass, field
from typing import Dict, List

from goreorder.config import ReorderConfig
from goreorder.emit.emitter import (
    emit_enum_group,
    emit_section,
    emit_type_group,
    emit_value_block,
    enum_group_parts,
    type_group_parts,
)
from goreorder.exceptions import ConservationError, UnmatchedSectionError
from goreorder.logging_config import logger
from goreorder.parser.nodes import Decl, GenDecl, Spacing
from goreorder.schemas import (
    DEFAULT_ENUM_LAYOUT,
    DEFAULT_TYPE_LAYOUT,
    CategorizedDecls,
    Mode,
    Section,
)

VALUE_SECTIONS = {
    Section.EXPORTED_CONSTS: ("const", True),
    Section.UNEXPORTED_CONSTS: ("const", False),
    Section.EXPORTED_VARS: ("var", True),
    Section.UNEXPORTED_VARS: ("var", False),
}
TYPE_SECTIONS = (Section.EXPORTED_TYPES, Section.UNEXPORTED_TYPES)
ENUM_SECTIONS = (Section.EXPORTED_ENUMS, Section.UNEXPORTED_ENUMS)


@dataclass
class ReassemblyResult:
    decls: List[Decl]
    warnings: List[str] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)
    input_count: int = 0
    output_count: int = 0


def find_unmatched(cat: CategorizedDecls, config: ReorderConfig) -> List[str]:
    """
    Names of all content the configuration does not place.

    Whole sections are reported by name, omitted group elements as
    ``<section>.<element>``.
    """
    configured = set(config.sections.order)
    unmatched = [s.value for s in Section if s.value not in configured and cat.has_content(s)]

    for section in TYPE_SECTIONS:
        if section.value in configured:
            unmatched.extend(_omitted_elements(
                section, [type_group_parts(g) for g in getattr(cat, section.value)],
                config.types.type_layout,
            ))
    for section in ENUM_SECTIONS:
        if section.value in configured:
            unmatched.extend(_omitted_elements(
                section, [enum_group_parts(g) for g in getattr(cat, section.value)],
                config.types.enum_layout,
            ))
    return unmatched


def _omitted_elements(section: Section, all_parts: List[Dict[str, List[Decl]]], layout: List[str]) -> List[str]:
    omitted: List[str] = []
    for parts in all_parts:
        for element, decls in parts.items():
            name = f"{section.value}.{element}"
            if decls and element not in layout and name not in omitted:
                omitted.append(name)
    return omitted


def collect_uncategorized(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    """
    Flattens everything the configuration does not place, in section order.

    Const and var specs are merged into blocks; groups are emitted with the
    default layouts. Folded declarations are removed from their buckets.
    """
    configured = set(config.sections.order)
    folded: List[Decl] = []

    for section in Section:
        if section is Section.UNCATEGORIZED:
            continue
        if section.value in configured:
            if section in TYPE_SECTIONS:
                for group in getattr(cat, section.value):
                    folded.extend(_fold_omitted(type_group_parts(group), config.types.type_layout))
            elif section in ENUM_SECTIONS:
                for group in getattr(cat, section.value):
                    folded.extend(_fold_omitted(enum_group_parts(group), config.types.enum_layout))
            continue
        if not cat.has_content(section):
            continue

        logger.debug(f"Folding section '{section.value}' into uncategorized")
        if section in VALUE_SECTIONS:
            token, exported = VALUE_SECTIONS[section]
            folded.extend(emit_value_block(getattr(cat, section.value), token, exported))
        elif section in TYPE_SECTIONS:
            for group in getattr(cat, section.value):
                folded.extend(emit_type_group(group, DEFAULT_TYPE_LAYOUT))
        elif section in ENUM_SECTIONS:
            for group in getattr(cat, section.value):
                folded.extend(emit_enum_group(group, DEFAULT_ENUM_LAYOUT))
        else:
            folded.extend(emit_section(section, cat, config))
        _clear_section(cat, section)

    for decl in folded:
        decl.before = Spacing.EMPTY_LINE
    return folded


def _fold_omitted(parts: Dict[str, List[Decl]], layout: List[str]) -> List[Decl]:
    folded: List[Decl] = []
    for element, decls in parts.items():
        if element not in layout:
            folded.extend(decls)
    return folded


def _clear_section(cat: CategorizedDecls, section: Section) -> None:
    if section is Section.MAIN:
        cat.main = None
    else:
        setattr(cat, section.value, [])


def count_output(decls: List[Decl]) -> int:
    """Counts emitted units; merged blocks count one per spec."""
    total = 0
    for decl in decls:
        if isinstance(decl, GenDecl) and decl.synthetic:
            total += len(decl.specs)
        else:
            total += 1
    return total


def reassemble(cat: CategorizedDecls, config: ReorderConfig) -> ReassemblyResult:
    """
    Emits all configured sections in order, applying the configured mode.

    Args:
        cat: Sorted categorized declarations.
        config: Configuration; validated here before any work.

    Returns:
        The ordered declarations plus any warnings and unmatched names.

    Raises:
        ConfigValidationError: If the configuration is invalid.
        UnmatchedSectionError: In strict mode, if any content is unmatched.
        ConservationError: If declarations were lost outside drop mode.
    """
    config.check()
    mode = config.mode

    unmatched = find_unmatched(cat, config)
    warnings: List[str] = []
    if unmatched:
        if mode is Mode.STRICT:
            raise UnmatchedSectionError(unmatched)
        if mode is Mode.WARN:
            message = (
                "warn mode: code found for sections not in config: "
                f"{', '.join(unmatched)} (appended to uncategorized)"
            )
            logger.warning(message)
            warnings.append(message)
        elif mode is Mode.DROP:
            logger.debug(f"Dropping unmatched content: {', '.join(unmatched)}")

    folded: List[Decl] = []
    if unmatched and mode is not Mode.DROP:
        folded = collect_uncategorized(cat, config)
        if Section.UNCATEGORIZED.value in config.sections.order:
            cat.uncategorized.extend(folded)
            folded = []
        else:
            # Nowhere to fold into: original uncategorized content leads the tail
            folded = cat.uncategorized + folded
            cat.uncategorized = []

    decls: List[Decl] = []
    for name in config.sections.order:
        decls.extend(emit_section(Section(name), cat, config))
    decls.extend(folded)

    output_count = count_output(decls)
    if mode is not Mode.DROP and output_count != cat.input_count:
        raise ConservationError(cat.input_count, output_count)

    return ReassemblyResult(
        decls=decls,
        warnings=warnings,
        unmatched=unmatched,
        input_count=cat.input_count,
        output_count=output_count,
    )
