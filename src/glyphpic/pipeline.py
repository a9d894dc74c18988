"""Render cycles: each source or mode change starts a new generation.

A cycle is an immutable value. Selecting a source or mode returns the next
cycle together with a ticket describing the work to run; the work's outcome
is folded back with ``Cycle.complete``, which ignores outcomes from any
generation other than the current one. Late completions of superseded work
therefore can never overwrite the output of newer work.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Union

from PIL import Image

from glyphpic.config import DEFAULT_CONFIG, RenderConfig
from glyphpic.converter import image_to_text
from glyphpic.errors import GlyphpicError
from glyphpic.model import RenderMode, TextGrid

logger = logging.getLogger(__name__)

Source = Union[Image.Image, bytes, str, Path]


@dataclass(frozen=True)
class Ticket:
    generation: int
    source: Source
    mode: RenderMode


@dataclass(frozen=True)
class Outcome:
    generation: int
    grid: TextGrid | None = None
    error: GlyphpicError | None = None


@dataclass(frozen=True)
class Cycle:
    generation: int = 0
    source: Source | None = None
    mode: RenderMode = RenderMode.ASCII
    grid: TextGrid | None = None
    error: GlyphpicError | None = None

    @property
    def pending(self) -> bool:
        return self.source is not None and self.grid is None and self.error is None

    def _advance(self, **changes) -> tuple[Cycle, Ticket | None]:
        cycle = replace(self, generation=self.generation + 1, grid=None, error=None, **changes)
        if cycle.source is None:
            return cycle, None
        return cycle, Ticket(cycle.generation, cycle.source, cycle.mode)

    def select_source(self, source: Source) -> tuple[Cycle, Ticket]:
        return self._advance(source=source)

    def select_mode(self, mode: RenderMode | str) -> tuple[Cycle, Ticket | None]:
        """Switch mode. No ticket is issued until a source has been selected."""
        return self._advance(mode=RenderMode.parse(mode))

    def complete(self, outcome: Outcome) -> Cycle:
        if outcome.generation != self.generation:
            logger.debug("discarding stale outcome %d (current %d)", outcome.generation, self.generation)
            return self
        if outcome.error is not None:
            logger.warning("render cycle %d failed: %s", outcome.generation, outcome.error)
        return replace(self, grid=outcome.grid, error=outcome.error)


def execute(ticket: Ticket, config: RenderConfig = DEFAULT_CONFIG) -> Outcome:
    try:
        grid = image_to_text(ticket.source, ticket.mode, config)
    except GlyphpicError as exc:
        return Outcome(ticket.generation, error=exc)
    return Outcome(ticket.generation, grid=grid)


async def execute_async(ticket: Ticket, config: RenderConfig = DEFAULT_CONFIG) -> Outcome:
    """Run ``execute`` on a worker thread so fetching and decoding don't block the loop."""
    return await asyncio.to_thread(execute, ticket, config)
