# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Palette: an ordered collection of NamedColors with JSON import/export.

Duplicates are decided by color value, not by name or id: a color whose
four channels all fall within the palette tolerance of an existing entry
is skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from swatchkit.runtime.codec.base import CodecConfig
from swatchkit.runtime.codec.document import loads_many, to_json
from swatchkit.schema.color_value import CHANNEL_TOLERANCE
from swatchkit.schema.named_color import NamedColor

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportResult:
    """
    Outcome of adding a batch of colors.

    Attributes:
        added: Colors appended to the palette
        duplicates: Colors skipped because an equal color was present
    """
    added: int
    duplicates: int

    @property
    def total(self) -> int:
        return self.added + self.duplicates

    def summary(self, source: str = "import") -> str:
        """Human-readable status line for ``source``."""
        if self.added > 0:
            return f"Successfully imported {self.added} new colors from {source}"
        return f"No new colors found in {source} - all colors were duplicates"


class Palette:
    """
    Mutable, ordered palette of NamedColors.

    Args:
        colors: Initial colors (deduplicated on insert)
        tolerance: Per-channel tolerance for duplicate detection
    """

    def __init__(
        self,
        colors: Iterable[NamedColor] = (),
        *,
        tolerance: float = CHANNEL_TOLERANCE,
    ) -> None:
        self.tolerance = tolerance
        self._colors: list[NamedColor] = []
        self.add_colors(colors)

    def __iter__(self) -> Iterator[NamedColor]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def colors(self) -> tuple[NamedColor, ...]:
        return tuple(self._colors)

    def contains_color(self, candidate: NamedColor) -> bool:
        """True if a color equal within tolerance is already present."""
        return any(
            candidate.color.is_close(existing.color, self.tolerance)
            for existing in self._colors
        )

    def add_colors(self, colors: Iterable[NamedColor]) -> ImportResult:
        """Append colors that are not duplicates, preserving order."""
        added = duplicates = 0
        for color in colors:
            if self.contains_color(color):
                duplicates += 1
                continue
            self._colors.append(color)
            added += 1
        return ImportResult(added=added, duplicates=duplicates)

    def clear(self) -> None:
        self._colors.clear()

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def export_json(self, *, indent: Optional[int] = 2, config: Optional[CodecConfig] = None) -> str:
        """Serialize the palette as a JSON array with sorted keys."""
        return to_json(self._colors, indent=indent, sort_keys=True, config=config)

    def import_json(self, text: Union[str, bytes]) -> ImportResult:
        """
        Decode a JSON array of colors and add the new ones.

        The whole document is decoded before anything is added, so a
        failure leaves the palette unchanged.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON
            DecodeError: If any record fails to decode
        """
        imported = loads_many(text)
        result = self.add_colors(imported)
        log.debug(
            "Palette import: %d new, %d duplicate", result.added, result.duplicates
        )
        return result

    def export_file(self, path: Union[str, Path]) -> None:
        """Write the palette to ``path`` as UTF-8 JSON."""
        Path(path).write_text(self.export_json(), encoding="utf-8")

    def import_file(self, path: Union[str, Path]) -> ImportResult:
        """Read a JSON palette from ``path``; see import_json."""
        return self.import_json(Path(path).read_bytes())
