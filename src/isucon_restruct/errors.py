class RestructError(Exception):
    """Base class for errors raised while restructuring a source file."""


class SourceParseError(RestructError):
    def __init__(self, line: int, column: int, detail: str) -> None:
        self.line = line
        self.column = column
        super().__init__(f"Invalid syntax at line {line}, column {column}: {detail}")


class CursorOrderError(RestructError):
    def __init__(self, cursor: int, offset: int) -> None:
        self.cursor = cursor
        self.offset = offset
        super().__init__(f"Offset {offset} lies behind the parse cursor at {cursor}")


class SourceDecodeError(RestructError):
    def __init__(self, path: str, position: int, reason: str) -> None:
        self.path = path
        self.position = position
        super().__init__(f"{path} is not valid UTF-8 at byte {position}: {reason}")
