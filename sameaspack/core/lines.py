"""Line splitting with explicit trailing-newline bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class LineSequence:
    """Ordered lines of a text plus whether the text ended with a newline.

    The trailing newline lives in ``ends_with_newline``; it is never encoded as
    an empty trailing element of ``lines``.
    """

    lines: tuple[str, ...]
    ends_with_newline: bool = True

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, ends_with_newline: bool = True) -> LineSequence:
        return cls(lines=tuple(lines), ends_with_newline=ends_with_newline)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def lacks_final_newline(self) -> bool:
        """True when the last line is not followed by a newline."""
        return bool(self.lines) and not self.ends_with_newline

    def join(self) -> str:
        if not self.lines:
            return ""
        text = "\n".join(self.lines)
        return f"{text}\n" if self.ends_with_newline else text


def split_lines(text: str) -> LineSequence:
    """Split ``text`` on ``\\n`` only; ``\\r`` stays part of the line content."""
    if not text:
        return LineSequence(lines=(), ends_with_newline=True)

    parts = text.split("\n")
    if text.endswith("\n"):
        # exactly one trailing empty element comes from the final newline
        parts.pop()
        return LineSequence(lines=tuple(parts), ends_with_newline=True)
    return LineSequence(lines=tuple(parts), ends_with_newline=False)
