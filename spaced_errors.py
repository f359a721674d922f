"""Parse failures.

Every error aborts the parse and carries the 0-based character offset of the
offending token (the input length for end of input).
"""
from typing import Optional


class ParseError(Exception):
    code = "P000"

    def __init__(
        self, message: str, position: Optional[int] = None, token: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.token = token

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} at position {self.position}"

    def describe(self, text):
        """Return a compiler-style diagnostic pointing at the error in `text`.

        >>> print(UnexpectedToken("unexpected '2'", 2, "2").describe("1 2"))
        error[P001]: unexpected '2'
          | 1 2
          |   ^
        """
        head = f"error[{self.code}]: {self.message}"
        if self.position is None:
            return head
        line_start = text.rfind("\n", 0, self.position) + 1
        line_end = text.find("\n", self.position)
        line = text[line_start : None if line_end == -1 else line_end]
        column = self.position - line_start
        return f"{head}\n  | {line}\n  | {' ' * column}^"


class UnexpectedToken(ParseError):
    code = "P001"


class UnknownIdentifier(ParseError):
    code = "P002"


class UnexpectedEndOfInput(ParseError):
    code = "P003"


class MalformedNumber(ParseError):
    code = "P004"
