"""Render parse trees back to text.

Both renderings use single spaces only and parenthesize every subexpression
whose grouping a reader could not recover from algebraic rank and left
associativity alone, so re-parsing either rendering gives back the same tree.
"""
from spaced_parser import RANKS, BinaryOp, NumberLiteral, UnaryApply


def parenthesize(ast):
    """Render `ast` with every binary operation in parentheses.

    >>> from spaced_parser import parse
    >>> parenthesize(parse("1*    3+4   -   5/6"))
    '(1 * ((3 + 4) - (5 / 6)))'
    >>> parenthesize(parse("sqrt sqrt  1 + 1"))
    'sqrt (sqrt (1 + 1))'
    """
    if isinstance(ast, BinaryOp):
        return f"({_bare(ast)})"
    return _bare(ast)


def _bare(ast):
    if isinstance(ast, NumberLiteral):
        return ast.text
    if isinstance(ast, UnaryApply):
        return f"{ast.function} ({_bare(ast.operand)})"
    return f"{parenthesize(ast.left)} {ast.symbol} {parenthesize(ast.right)}"


def unparse(ast):
    """Render `ast` the way it is usually written down.

    Left-associative chains of equally ranked operators are left bare; every
    other binary operand is parenthesized.

    >>> from spaced_parser import parse
    >>> unparse(parse("2 + 4 * 6 - 8"))
    '2 + (4 * 6) - 8'
    >>> unparse(parse("1-  2   *   3/4"))
    '(1 - 2) * (3 / 4)'
    """
    if isinstance(ast, NumberLiteral):
        return ast.text
    if isinstance(ast, UnaryApply):
        return f"{ast.function} ({unparse(ast.operand)})"
    x = unparse(ast.left)
    y = unparse(ast.right)
    if type(ast.left) is BinaryOp and RANKS[ast.left.symbol] != RANKS[ast.symbol]:
        x = f"({x})"
    if type(ast.right) is BinaryOp:
        y = f"({y})"
    return f"{x} {ast.symbol} {y}"


def literals(ast):
    """Yield the number literals of `ast` from left to right."""
    if isinstance(ast, NumberLiteral):
        yield ast
    elif isinstance(ast, UnaryApply):
        yield from literals(ast.operand)
    else:
        yield from literals(ast.left)
        yield from literals(ast.right)
