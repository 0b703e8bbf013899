from dataclasses import dataclass

from isucon_restruct.errors import CursorOrderError


def byte_offset(source: bytes, point: tuple[int, int]) -> int:
    """Map a parser ``(row, column)`` point to an absolute byte offset in ``source``.

    Rows are 0-based and columns count UTF-8 bytes, which is what tree-sitter
    reports. Only points produced by parsing this exact ``source`` are valid.
    """
    row, column = point
    offset = 0
    for _ in range(row):
        offset = source.index(b"\n", offset) + 1
    return offset + column


@dataclass
class ParseContext:
    """Forward-only cursor over the source, used to slice out trivia."""

    source: bytes
    cursor: int = 0

    def offset_of(self, point: tuple[int, int]) -> int:
        return byte_offset(self.source, point)

    def text_between(self, offset: int) -> str:
        if offset < self.cursor:
            raise CursorOrderError(self.cursor, offset)
        return self.source[self.cursor : offset].decode("utf-8")

    def update_offset(self, offset: int) -> None:
        if offset < self.cursor:
            raise CursorOrderError(self.cursor, offset)
        self.cursor = offset
