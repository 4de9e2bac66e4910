"""AMP stylesheet — the CSS inlined into AMP session pages.

AMP pages cannot link external stylesheets, so the rendered CSS is injected
into the page. In prod it normally comes from the build artifact read once at
startup. If that artifact is missing, the LESS source is rendered on the first
AMP request and kept for the rest of the process. Outside prod nothing is
kept, so edits to the LESS source show up on the next request.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import lesscpy
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


class CssCache:
    """Single-value cell holding rendered CSS."""

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> None:
        self._value = value


def read_precompiled_css(path: Path) -> Optional[str]:
    """Read the prebuilt CSS artifact, or ``None`` if it can't be read."""
    try:
        return Path(path).read_text()
    except OSError as e:
        logger.warning("Precompiled AMP CSS not available at %s: %s", path, e)
        return None


def render_less(entry: Path) -> str:
    """Render a LESS entry file to minified CSS. Preprocessor errors propagate."""
    with open(entry) as fh:
        return lesscpy.compile(fh, minify=True)


class AmpStylesheet:
    """Resolves the AMP CSS from the eager value, the cache, or the source."""

    def __init__(
        self,
        entry: Path,
        *,
        prod: bool,
        precompiled: Optional[str] = None,
        cache: Optional[CssCache] = None,
        renderer: Callable[[Path], str] = render_less,
    ) -> None:
        self.entry = entry
        self.prod = prod
        self.precompiled = precompiled
        self.cache = cache if cache is not None else CssCache()
        self.renderer = renderer

    @classmethod
    def from_artifact(
        cls,
        entry: Path,
        artifact: Path,
        *,
        prod: bool,
        renderer: Callable[[Path], str] = render_less,
    ) -> "AmpStylesheet":
        """Build the stylesheet, reading ``artifact`` eagerly only in prod."""
        precompiled = read_precompiled_css(artifact) if prod else None
        return cls(entry, prod=prod, precompiled=precompiled, renderer=renderer)

    async def get(self) -> str:
        css = self.precompiled or self.cache.get()
        if css is None:
            css = await run_in_threadpool(self.renderer, self.entry)
            if self.prod:
                logger.debug("Saving rendered CSS to fallback in prod (%d bytes)", len(css))
                self.cache.set(css)
        return css
