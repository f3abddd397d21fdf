"""Knowledge documents and the Markdown parser that turns them into rules."""

from src.knowledge.parser import (
    ExtractedRules,
    ParsedDocument,
    Section,
    TLDRBlock,
    extract_rules,
    extract_section,
    get_main_sections,
    parse_file,
    parse_text,
)

__all__ = [
    "ExtractedRules",
    "ParsedDocument",
    "Section",
    "TLDRBlock",
    "extract_rules",
    "extract_section",
    "get_main_sections",
    "parse_file",
    "parse_text",
]
