"""Source text with a character cursor that tracks line and column."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from crusty.report import SystemFailure


@dataclass
class SourceFile:
    """Source text being read character by character.

    ``pos`` is the index of the next character; ``line`` and ``col`` are
    1-indexed and describe where that character sits.
    """

    text: str
    path: Path = field(default_factory=lambda: Path("<string>"))
    pos: int = 0
    line: int = 1
    col: int = 1

    @classmethod
    def from_path(cls, path: str | Path) -> SourceFile:
        """Read a UTF-8 file from disk; raise SystemFailure on any failure."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise SystemFailure(f"Could not read file '{path}': {reason}") from exc
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SystemFailure(f"File '{path}' contains invalid UTF-8: {exc}") from exc
        return cls(text, path)

    @classmethod
    def from_string(cls, text: str) -> SourceFile:
        """Wrap an in-memory string."""
        return cls(text)

    def peek(self) -> str | None:
        """Return the next character without consuming it."""
        return self.text[self.pos] if self.pos < len(self.text) else None

    def peek_ahead(self) -> str | None:
        """Return the character after the next one without consuming anything."""
        index = self.pos + 1
        return self.text[index] if index < len(self.text) else None

    def advance(self) -> str | None:
        """Consume and return the next character, updating line and column."""
        ch = self.peek()
        if ch is None:
            return None
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def advance_if(self, predicate: Callable[[str], bool]) -> bool:
        """Consume the next character only if it satisfies ``predicate``."""
        ch = self.peek()
        if ch is not None and predicate(ch):
            self.advance()
            return True
        return False

    def is_at_end(self) -> bool:
        """True once all input has been consumed."""
        return self.pos >= len(self.text)

    def current_pos(self) -> tuple[int, int]:
        """Return ``(line, col)``."""
        return self.line, self.col