from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into a query spec string."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) into a query spec string.

    Segments, tokens and property items all carry ranges relative to the whole
    spec, so diagnostics can point into the text the author wrote.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        return TextRange(offset, offset)

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    @staticmethod
    def stripped(source: str, start: int, end: int) -> "TextRange":
        """Range of `source[start:end]` with surrounding whitespace excluded.

        An all-whitespace span collapses to an empty range at its end.
        """
        while start < end and source[start].isspace():
            start += 1
        while end > start and source[end - 1].isspace():
            end -= 1
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)


def slice_text_range(source: str, range: TextRange) -> str:
    """Text of `source` covered by `range` (offsets are plain string indices)."""
    return source[range.start.value : range.end.value]
