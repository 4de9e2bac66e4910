"""Section registry — the closed set of renderable page sections.

A section is a top-level template in the sections directory. Templates whose
name starts with ``_`` are sub-templates (partial pages, the AMP session
view) and are never routable on their own.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devsummit.config import SECTION_EXTENSION

logger = logging.getLogger(__name__)


def list_sections(content_dir: Path, extension: str = SECTION_EXTENSION) -> tuple[str, ...]:
    """Scan ``content_dir`` (non-recursive) and return the section names.

    Raises ``OSError`` if the directory cannot be read; startup should not
    continue with a partial registry.
    """
    names = []
    for entry in Path(content_dir).iterdir():
        name = entry.name
        if name.endswith(extension) and not name.startswith("_"):
            names.append(name[: -len(extension)])

    sections = tuple(sorted(names))
    logger.info("Registered %d sections from %s", len(sections), content_dir)
    return sections
