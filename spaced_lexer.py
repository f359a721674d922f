import re
from typing import List, Literal, NamedTuple, Optional

from spaced_errors import MalformedNumber, UnexpectedToken

Kind = Literal["number", "name", "symbol", "open", "close", "eof"]

TOKEN_REX = re.compile(
    r"(?P<space>\s+)|(?P<number>[0-9.]+)|(?P<name>[^\W\d]+)"
    r"|(?P<symbol>[-+*/])|(?P<open>\()|(?P<close>\))"
)


class Token(NamedTuple):
    kind: Kind
    text: str
    value: Optional[float]
    pos: int
    leading: int  # whitespace characters before the token
    trailing: int  # whitespace characters after it, up to the next token

    def __repr__(self):
        return f"tok({self.text or self.kind!r}@{self.pos}, {self.leading}|{self.trailing})"


def whitespace_width(run, count_newlines=True):
    if count_newlines:
        return len(run)
    return sum(c not in "\r\n" for c in run)


def to_number(lexeme, pos):
    try:
        return float(lexeme)
    except ValueError:
        raise MalformedNumber(f"malformed number {lexeme!r}", pos, lexeme) from None


def lex(text, count_newlines=True) -> List[Token]:
    """Split `text` into tokens, each annotated with its surrounding whitespace.

    The last token is always `eof`. Whitespace before the first token is not
    attributed to it.

    >>> [(t.text, t.leading, t.trailing) for t in lex("1 *  2")]
    [('1', 0, 1), ('*', 1, 2), ('2', 2, 0), ('', 0, 0)]
    """
    found = []  # (kind, text, value, pos, leading)
    spaces = 0
    pos = 0
    while pos < len(text):
        if not (m := TOKEN_REX.match(text, pos)):
            raise UnexpectedToken(f"unexpected character {text[pos]!r}", pos, text[pos])
        kind, lexeme, pos = m.lastgroup, m.group(), m.end()
        if kind == "space":
            spaces += whitespace_width(lexeme, count_newlines)
            continue
        value = to_number(lexeme, m.start()) if kind == "number" else None
        found.append((kind, lexeme, value, m.start(), spaces if found else 0))
        spaces = 0
    found.append(("eof", "", None, len(text), spaces if found else 0))
    return [
        Token(*tok, trailing=following[-1])
        for tok, following in zip(found, found[1:] + [(None,) * 4 + (0,)])
    ]
