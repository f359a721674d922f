"""Parse arithmetic where whitespace decides grouping.

An operator with less whitespace around it binds tighter than one with more,
whatever the operators are; equal whitespace falls back to the usual
algebraic ranks and then to left-to-right order:

    1 * 2+3        ->  1 * (2 + 3)
    2 + 4 * 6 - 8  ->  2 + (4 * 6) - 8
    sqrt  1 + 2    ->  sqrt (1 + 2)

The parser is an operator-precedence (shunting-yard) reducer; the precedence
of each operator occurrence is computed from its token, not looked up per
operator kind.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Union

from spaced_config import ParserConfig
from spaced_errors import UnexpectedEndOfInput, UnexpectedToken, UnknownIdentifier
from spaced_lexer import Token, lex

logger = logging.getLogger(__name__)

OP_GROUPS = """
+ -
* /
""".strip()
RANKS = {op: rank for rank, group in enumerate(OP_GROUPS.split("\n")) for op in group.split()}
APPLY_RANK = max(RANKS.values()) + 1  # prefix application outranks every binary operator


@dataclass(frozen=True)
class NumberLiteral:
    value: float
    text: str


@dataclass(frozen=True)
class BinaryOp:
    symbol: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class UnaryApply:
    function: str
    operand: "Node"


Node = Union[NumberLiteral, BinaryOp, UnaryApply]


class PrecedenceKey(NamedTuple):
    gap: float
    rank: int

    def left_first(self, other):
        """Does an operator with this key, occurring before one keyed `other`, bind first?"""
        return self.gap < other.gap or self.gap == other.gap and self.rank >= other.rank


END = PrecedenceKey(math.inf, -1)


def precedence_key(token: Token, prefix=False) -> PrecedenceKey:
    if prefix:
        # no left operand, so only the space towards the argument counts
        return PrecedenceKey(token.trailing, APPLY_RANK)
    return PrecedenceKey(max(token.leading, token.trailing), RANKS[token.text])


class BinaryPending(NamedTuple):
    token: Token
    key: PrecedenceKey

    def apply(self, exprs):
        exprs[-2:] = [BinaryOp(self.token.text, *exprs[-2:])]


class UnaryPending(NamedTuple):
    token: Token
    key: PrecedenceKey

    def apply(self, exprs):
        exprs[-1:] = [UnaryApply(self.token.text, exprs[-1])]


Pending = Union[BinaryPending, UnaryPending]


def reduce_while(ops, exprs, key):
    while ops and ops[-1].key.left_first(key):
        op = ops.pop()
        logger.debug("reduce %r %s before %s", op.token.text, op.key, key)
        op.apply(exprs)


def unknown_name(tok):
    return UnknownIdentifier(f"unknown function {tok.text!r}", tok.pos, tok.text)


def unexpected(tok):
    if tok.kind == "eof":
        return UnexpectedEndOfInput("unexpected end of input", tok.pos)
    return UnexpectedToken(f"unexpected {tok.text!r}", tok.pos, tok.text)


class Frame(NamedTuple):
    exprs: list
    ops: list
    waitfor: str


def parse_expr(flat, config, waitfor="eof"):
    frames: List[Frame] = []  # enclosing groups, innermost last
    exprs = []
    ops: List[Pending] = []
    last_was_op = True
    while True:
        tok = next(flat)
        if last_was_op:
            if tok.kind == "number":
                exprs.append(NumberLiteral(tok.value, tok.text))
            elif tok.kind == "open" and config.allow_grouping:
                frames.append(Frame(exprs, ops, waitfor))
                exprs, ops, waitfor = [], [], "close"
                continue
            elif tok.kind == "name" or tok.text == "-" and config.allow_negation:
                if tok.kind == "name" and tok.text not in config.functions:
                    raise unknown_name(tok)
                ops.append(UnaryPending(tok, precedence_key(tok, prefix=True)))
                logger.debug("push prefix %r %s", tok.text, ops[-1].key)
                continue
            else:
                raise unexpected(tok)
            last_was_op = False
        elif tok.kind == waitfor:
            reduce_while(ops, exprs, END)
            (ans,) = exprs
            if not frames:
                return ans
            exprs, ops, waitfor = frames.pop()
            exprs.append(ans)
        elif tok.kind == "symbol":
            key = precedence_key(tok)
            reduce_while(ops, exprs, key)
            ops.append(BinaryPending(tok, key))
            logger.debug("push %r %s", tok.text, key)
            last_was_op = True
        elif tok.kind == "name" and tok.text not in config.functions:
            raise unknown_name(tok)
        elif tok.kind == "eof":
            raise UnexpectedEndOfInput("unclosed '('", tok.pos)
        else:
            raise unexpected(tok)


def parse_tokens(tokens, config=None) -> Node:
    return parse_expr(iter(tokens), config or ParserConfig())


def parse(text, config=None) -> Node:
    """Parse `text` into a tree, raising a `ParseError` on failure.

    >>> parse("1+2")
    BinaryOp(symbol='+', left=NumberLiteral(value=1.0, text='1'), right=NumberLiteral(value=2.0, text='2'))
    """
    config = config or ParserConfig()
    tokens = lex(text, config.count_newlines)
    logger.debug("parsing %r: %r", text, tokens)
    return parse_tokens(tokens, config)
