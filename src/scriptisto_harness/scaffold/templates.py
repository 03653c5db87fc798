"""Template listing parser for the scriptisto ``new`` table.

Running ``scriptisto new`` without a template prints a box-drawn table:

    +----------+----------+-----------+
    | Template | Language | Extension |
    +----------+----------+-----------+
    | go       | Go       | .go       |
    +----------+----------+-----------+

Only lines starting with ``| `` are rows. The first cell is the template
name and the third cell the file extension. The format is not versioned by
the tool, so rows that do not look like data are skipped with a warning
rather than guessed at.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

ROW_PREFIX = "| "
COLUMN_SEPARATOR = "|"

# Cells made only of box-drawing filler
_SEPARATOR_CELL = re.compile(r"^[-=+:\s]*$")

# Names end up as filenames inside the scripts directory
_UNSAFE_CHARS = re.compile(r"[/\\\x00]")


class TemplateDescriptor(BaseModel):
    """One scaffolding template offered by the external tool.

    Attributes:
        name: Template name passed back to the tool (e.g. "go").
        extension: File extension without the leading dot (e.g. "go").

    """

    model_config = ConfigDict(frozen=True)

    name: str
    extension: str

    @property
    def filename(self) -> str:
        """Script filename for this template."""
        return f"{self.name}.{self.extension}"


def split_row(line: str) -> list[str]:
    """Split a table row on the column separator and trim each cell.

    The outer borders produce empty first and last cells, which are kept so
    column positions match the raw split.
    """
    return [cell.strip() for cell in line.split(COLUMN_SEPARATOR)]


def is_separator_row(cells: list[str]) -> bool:
    """Return True for rows made only of dashes, equals signs or blanks."""
    return all(_SEPARATOR_CELL.match(cell) for cell in cells)


def parse_template_row(line: str) -> TemplateDescriptor | None:
    """Parse one line of the listing.

    Args:
        line: Raw line from the tool's stdout.

    Returns:
        TemplateDescriptor for a data row, None for anything else (non-row
        lines, separators, the header row, malformed rows).

    """
    if not line.startswith(ROW_PREFIX):
        return None

    cells = split_row(line)
    if len(cells) <= 2 or is_separator_row(cells):
        return None

    if len(cells) < 4:
        logger.warning("Skipping template row with too few columns: %r", line)
        return None

    name = cells[1]
    raw_extension = cells[3]

    # Header row ("Extension") and anything else without a dotted extension
    if not raw_extension.startswith("."):
        logger.debug("Skipping non-data row: %r", line)
        return None

    extension = raw_extension.lstrip(".")
    if not name or not extension:
        logger.warning("Skipping template row with empty name or extension: %r", line)
        return None
    if _UNSAFE_CHARS.search(name) or _UNSAFE_CHARS.search(extension):
        logger.warning("Skipping template row with path separator: %r", line)
        return None

    return TemplateDescriptor(name=name, extension=extension)


def parse_template_table(output: str) -> list[TemplateDescriptor]:
    """Extract template descriptors from the tool's listing output.

    Args:
        output: Full stdout of the bare ``scriptisto new`` call.

    Returns:
        Descriptors in listing order. Repeated template names keep their
        first occurrence.

    """
    templates: list[TemplateDescriptor] = []
    seen: set[str] = set()

    for line in output.splitlines():
        descriptor = parse_template_row(line)
        if descriptor is None:
            continue
        if descriptor.name in seen:
            logger.warning("Duplicate template %r in listing, keeping first", descriptor.name)
            continue
        seen.add(descriptor.name)
        templates.append(descriptor)

    logger.debug("Parsed %d templates from listing", len(templates))
    return templates
