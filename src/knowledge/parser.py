"""Knowledge Parser - Markdown best-practice documents to structured rules.

Parses a per-model knowledge document into a flat list of header-delimited
sections, then pulls out the pieces the rule store needs:

- TL;DR block: RULES / AVOID bullet lists and the QUICK START code sample
- Checklist: bullet items of the "checklist" section, checkbox markers removed
- Tips: bullets of the first "tip" section plus the top 5 "general rules"

Sub-block and section titles are matched in English and Polish
(RULES/REGUŁY, AVOID/UNIKAJ, QUICK START/SZYBKI START, General/Zasady ogólne).

Design Principles:
- Pure functions over immutable dataclasses (tuples, not lists)
- Missing sections are never errors; they yield empty collections
- Section lookup returns the first title match; later duplicates are ignored
- Only parse_file touches the filesystem

Example:
    >>> doc = parse_text("# Claude\\n\\n## Tips\\n- Use XML tags\\n")
    >>> doc.title
    'Claude'
    >>> extract_rules(doc).tips
    ('Use XML tags',)
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional

from src.utils.error_handling import KnowledgeFileNotFoundError, KnowledgeReadError

HEADING_PATTERN: Final = re.compile(r"^(#{1,6})\s+(.+)$")
FENCE_PATTERN: Final = re.compile(r"^\s*(```|~~~)")
BULLET_PATTERN: Final = re.compile(r"^(?:\d+\.|[-*+])\s+(.+)$")
CHECKBOX_PATTERN: Final = re.compile(r"^\[[ x]\]\s*", re.IGNORECASE)
CODE_BLOCK_PATTERN: Final = re.compile(r"```[\w-]*\n([\s\S]*?)```")

# Inline markdown stripped from list items, applied in order
INLINE_MARKUP: Final[tuple[tuple[re.Pattern, str], ...]] = (
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),  # bold
    (re.compile(r"\*([^*]+)\*"), r"\1"),  # italic
    (re.compile(r"`([^`]+)`"), r"\1"),  # inline code
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),  # links
)

TLDR_MARKER: Final = "TL;DR"
RULES_TITLE: Final = re.compile(r"^(?:REGU[ŁL]Y|RULES)\b", re.IGNORECASE)
AVOID_TITLE: Final = re.compile(r"^(?:UNIKAJ|AVOID)\b", re.IGNORECASE)
QUICK_START_TITLE: Final = re.compile(r"^(?:SZYBKI START|QUICK START)\b", re.IGNORECASE)
SUB_BLOCK_LEVEL: Final = 3

CHECKLIST_MARKER: Final = "checklist"
TIPS_MARKER: Final = "tip"
GENERAL_MARKERS: Final[tuple[str, ...]] = ("zasady ogólne", "zasady ogolne", "zasady og", "general")
GENERAL_TIPS_LIMIT: Final = 5
UNTITLED: Final = "Untitled"


@dataclass(frozen=True)
class Section:
    """A header-delimited slice of a knowledge document.

    Attributes:
        title: Heading text without the leading markers
        level: Number of heading markers (1-6)
        content: Body text up to the next heading, stripped
    """

    title: str
    level: int
    content: str


@dataclass(frozen=True)
class TLDRBlock:
    """Summary block of a knowledge document.

    Attributes:
        rules: Canonical rules, plain text
        avoid: Things to avoid, plain text
        quick_start: Inner text of the first fenced code block under QUICK START
    """

    rules: tuple[str, ...]
    avoid: tuple[str, ...]
    quick_start: str


@dataclass(frozen=True)
class ParsedDocument:
    """Structured view of a knowledge document.

    Attributes:
        title: Text of the first level-1 heading, or "Untitled"
        tldr: TL;DR block, or None when the document has none
        sections: All sections in document order
        checklist: Checklist items with checkbox markers removed
        raw_content: Original source text
    """

    title: str
    tldr: Optional[TLDRBlock]
    sections: tuple[Section, ...]
    checklist: tuple[str, ...]
    raw_content: str


@dataclass(frozen=True)
class ExtractedRules:
    """Rules distilled from a parsed document.

    Attributes:
        rules: TL;DR rules
        avoid: TL;DR avoid list
        checklist: Checklist items, verbatim from the document
        tips: Tips section bullets followed by up to 5 general rules
        quick_start: TL;DR quick start sample
    """

    rules: tuple[str, ...]
    avoid: tuple[str, ...]
    checklist: tuple[str, ...]
    tips: tuple[str, ...]
    quick_start: str


def _strip_inline_markup(text: str) -> str:
    """Reduce bold, italic, inline code and links to plain text.

    Examples:
        >>> _strip_inline_markup("**Bold** and [link](http://x.y)")
        'Bold and link'
    """
    for pattern, replacement in INLINE_MARKUP:
        text = pattern.sub(replacement, text)
    return text.strip()


def extract_bullet_points(content: str) -> list[str]:
    """Extract bullet and numbered list items as plain text.

    Args:
        content: Markdown body text

    Returns:
        List items in order, markdown stripped, empty items dropped

    Examples:
        >>> extract_bullet_points("- **one**\\n2. `two`\\ntext")
        ['one', 'two']
    """
    bullets = []
    for line in content.split("\n"):
        match = BULLET_PATTERN.match(line.strip())
        if match:
            clean = _strip_inline_markup(match.group(1))
            if clean:
                bullets.append(clean)
    return bullets


def extract_code_block(content: str) -> str:
    """Return the inner text of the first fenced code block, or ""."""
    match = CODE_BLOCK_PATTERN.search(content)
    return match.group(1).strip() if match else ""


def _parse_sections(source: str) -> tuple[Section, ...]:
    """Split source into sections at heading lines outside code fences."""
    sections: list[Section] = []
    current: Optional[tuple[str, int]] = None
    body: list[str] = []
    in_fence = False

    def flush() -> None:
        if current is not None:
            title, level = current
            sections.append(Section(title=title, level=level, content="\n".join(body).strip()))

    for line in source.split("\n"):
        if FENCE_PATTERN.match(line):
            in_fence = not in_fence
            body.append(line)
            continue

        heading = None if in_fence else HEADING_PATTERN.match(line)
        if heading:
            flush()
            current = (heading.group(2).strip(), len(heading.group(1)))
            body = []
        else:
            body.append(line)

    flush()
    return tuple(sections)


def find_section(sections: tuple[Section, ...], title_pattern: str) -> Optional[Section]:
    """Find the first section whose title contains the pattern (case-insensitive)."""
    pattern = title_pattern.lower()
    for section in sections:
        if pattern in section.title.lower():
            return section
    return None


def _find_section_index(sections: tuple[Section, ...], title_pattern: str) -> Optional[int]:
    pattern = title_pattern.lower()
    for index, section in enumerate(sections):
        if pattern in section.title.lower():
            return index
    return None


def _sub_blocks(sections: tuple[Section, ...], parent_index: int) -> list[Section]:
    """Sections nested under the parent, up to the next heading of equal or higher rank."""
    parent_level = sections[parent_index].level
    nested = []
    for section in sections[parent_index + 1 :]:
        if section.level <= parent_level:
            break
        nested.append(section)
    return nested


def _first_titled(blocks: list[Section], title: re.Pattern) -> Optional[Section]:
    for block in blocks:
        if block.level == SUB_BLOCK_LEVEL and title.match(block.title):
            return block
    return None


def _parse_tldr(sections: tuple[Section, ...]) -> Optional[TLDRBlock]:
    index = _find_section_index(sections, TLDR_MARKER)
    if index is None:
        return None

    blocks = _sub_blocks(sections, index)
    rules = _first_titled(blocks, RULES_TITLE)
    avoid = _first_titled(blocks, AVOID_TITLE)
    quick_start = _first_titled(blocks, QUICK_START_TITLE)

    return TLDRBlock(
        rules=tuple(extract_bullet_points(rules.content)) if rules else (),
        avoid=tuple(extract_bullet_points(avoid.content)) if avoid else (),
        quick_start=extract_code_block(quick_start.content) if quick_start else "",
    )


def parse_text(source: str) -> ParsedDocument:
    """Parse knowledge document text.

    Args:
        source: Markdown source

    Returns:
        ParsedDocument with sections, TL;DR block and checklist

    Examples:
        >>> parse_text("no headings at all").title
        'Untitled'
    """
    sections = _parse_sections(source)

    title = next((s.title for s in sections if s.level == 1), UNTITLED)

    checklist_section = find_section(sections, CHECKLIST_MARKER)
    checklist = (
        tuple(
            CHECKBOX_PATTERN.sub("", item)
            for item in extract_bullet_points(checklist_section.content)
        )
        if checklist_section
        else ()
    )

    return ParsedDocument(
        title=title,
        tldr=_parse_tldr(sections),
        sections=sections,
        checklist=checklist,
        raw_content=source,
    )


def parse_file(path: str | Path) -> ParsedDocument:
    """Read and parse a UTF-8 knowledge document.

    Args:
        path: Absolute path, or path relative to the working directory

    Returns:
        ParsedDocument for the file contents

    Raises:
        KnowledgeFileNotFoundError: If the file does not exist
        KnowledgeReadError: If the file cannot be read or decoded
    """
    file_path = Path(path)
    if not file_path.is_absolute():
        file_path = Path.cwd() / file_path

    try:
        source = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise KnowledgeFileNotFoundError(str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise KnowledgeReadError(str(path), str(e)) from e

    return parse_text(source)


def extract_rules(doc: ParsedDocument) -> ExtractedRules:
    """Distill rules, avoid list, checklist, tips and quick start from a document.

    Args:
        doc: Parsed knowledge document

    Returns:
        ExtractedRules; collections are empty when their sections are absent
    """
    tips: list[str] = []

    tips_section = find_section(doc.sections, TIPS_MARKER)
    if tips_section:
        tips.extend(extract_bullet_points(tips_section.content))

    general_section = None
    for marker in GENERAL_MARKERS:
        general_section = find_section(doc.sections, marker)
        if general_section:
            break

    if general_section:
        tips.extend(extract_bullet_points(general_section.content)[:GENERAL_TIPS_LIMIT])

    tldr = doc.tldr
    return ExtractedRules(
        rules=tldr.rules if tldr else (),
        avoid=tldr.avoid if tldr else (),
        checklist=doc.checklist,
        tips=tuple(tips),
        quick_start=tldr.quick_start if tldr else "",
    )


def extract_section(doc: ParsedDocument, section_name: str) -> Optional[Section]:
    """Get the first section whose title contains section_name."""
    return find_section(doc.sections, section_name)


def get_main_sections(doc: ParsedDocument) -> list[Section]:
    """Get all level-2 sections in document order."""
    return [s for s in doc.sections if s.level == 2]
