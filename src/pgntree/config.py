"""Reader and writer options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ReaderOptions:
    """Constraints applied while building a tree from movetext."""

    max_variation_depth: int = 100
    # Fall back to the ``Result`` tag when the movetext has no result token.
    use_header_result: bool = True


@dataclass(slots=True, frozen=True)
class WriterOptions:
    """Formatting choices for PGN output."""

    max_width: int | None = None
    normalize_san: bool = False
    nag_glyphs: bool = False
    include_headers: bool = True


DEFAULT_READER_OPTIONS = ReaderOptions()
DEFAULT_WRITER_OPTIONS = WriterOptions()
