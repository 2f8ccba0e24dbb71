"""
Work out what the left side of a pipe step contributes as arguments and hand
them to the right side.

Chains are left-associative, `a / f / g` arrives as `(a / f) / g`, so the
inner step is bound first and its result becomes the single argument of the
outer one. Only list literals, non-numeric literals and comprehensions may
start a chain: anything else on the far left (numbers, plain variables, ...)
means the whole chain is an ordinary use of the operator and stays untouched.
"""

import ast
from logging import getLogger

from ._do_apply import _do_apply
from ._flatten import _flatten
from ._harness import NO_MATCH

log = getLogger(__name__)

_NUMBERS = (int, float, complex)  # bool included, it's an int


def _is_numeric(node: ast.expr) -> bool:
    return isinstance(node, ast.Constant) and isinstance(node.value, _NUMBERS)


def _apply_args(rewriter, left: ast.expr, right: ast.expr):
    match left:
        case ast.BinOp() if rewriter.is_pipe(left):
            inner = _apply_args(rewriter, left.left, left.right)
            if inner is NO_MATCH:
                return NO_MATCH
            return _do_apply(rewriter, rewriter.resolve(right), [inner])

        case ast.List():
            args = [rewriter.resolve(arg) for arg in _flatten(left)]
            return _do_apply(rewriter, rewriter.resolve(right), args)

        case ast.Constant() if _is_numeric(left):
            return NO_MATCH

        case (
            ast.Constant()
            | ast.JoinedStr()
            | ast.Tuple()
            | ast.Set()
            | ast.Dict()
            | ast.ListComp()
            | ast.SetComp()
            | ast.DictComp()
            | ast.GeneratorExp()
        ):
            return _do_apply(rewriter, rewriter.resolve(right), [rewriter.resolve(left)])

        case _:
            return NO_MATCH
