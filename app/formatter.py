"""Turn the free-text analysis into display blocks.

The analysis only loosely follows the requested outline, so classification is
purely structural: numbered lines are section headers, dash lines with a colon
are labelled properties, other dash lines are bullets, everything else is a
paragraph.
"""
import re
from typing import List

from app.schemas import BulletRow, Paragraph, PropertyRow, ReportBlock, SectionHeader

MARKUP_CHARS = re.compile(r"[*_#`]")
SECTION_MARKER = re.compile(r"^[0-9]+\.")
SECTION_PREFIX = re.compile(r"^[0-9]+\.\s*")
# str.strip() leaves a byte order mark in place
EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def clean_line(line: str) -> str:
    return EDGE_SPACE.sub("", MARKUP_CHARS.sub("", line))


def classify_line(line: str) -> ReportBlock:
    """Classify an already cleaned, non-empty line."""
    if SECTION_MARKER.match(line):
        return SectionHeader(text=SECTION_PREFIX.sub("", line, count=1))
    if line.startswith("-") and ":" in line:
        label, *value_parts = line[1:].split(":")
        return PropertyRow(label=label.strip(), value=":".join(value_parts).strip())
    if line.startswith("-"):
        return BulletRow(text=line[1:].strip())
    return Paragraph(text=line)


def format_report(text: str) -> List[ReportBlock]:
    blocks = []
    for line in LINE_BREAK.split(text):
        cleaned = clean_line(line)
        if not cleaned:
            continue
        blocks.append(classify_line(cleaned))
    return blocks
