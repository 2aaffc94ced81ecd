class CmmError(Exception):
    """Base class for errors raised by the cmm toolchain."""


class SourceFileError(CmmError):
    """The source path does not name a readable regular file."""
    def __init__(self, path):
        super().__init__(f"{path} is not a regular file")
        self.path = path


class EmptyResultError(CmmError):
    """The program finished without producing a value to write."""
    def __init__(self, path):
        super().__init__(f"{path} produced no value")
        self.path = path


class CmmSyntaxError(CmmError):
    """Syntax error reported by the strict grammar checker."""
    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at {line}:{column}")
        self.line = line
        self.column = column
