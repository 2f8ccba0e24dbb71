"""
Module to hold the pipe rewriter and the entry points that run it over source code.

    [a] / fun1 / mod.fun2 / fun3          ->  fun3(mod.fun2(fun1(a)))
    [a, b] / fun4 / fun5() / print(x, _)  ->  print(x, fun5(fun4(a, b)))
"""

import ast
import sys
from logging import DEBUG, getLogger
from types import CodeType
from typing import Optional

from beartype import beartype
from icontract import require

from justpipe import config
from justpipe.messages import UserMessage
from justpipe.pydantics import operator_for

from ._apply_args import _apply_args
from ._harness import NO_MATCH, Transformer, transform

log = getLogger(__name__)

MODES = ("exec", "eval", "single")


class PipeRewriter:
    """The callback the harness offers every node to.

    `op` is the operator token that means "pipe" (default: config.operator),
    `transformer` the harness used to resolve sub-expressions before a step
    is put together.
    """

    def __init__(self, op: Optional[str] = None, transformer: Transformer = transform):
        self.op = operator_for(op or config.operator)
        self.transformer = transformer

    def __repr__(self):
        return f"PipeRewriter(op={self.op.__name__})"

    def is_pipe(self, node) -> bool:
        return isinstance(node, ast.BinOp) and isinstance(node.op, self.op)

    def resolve(self, node):
        return self.transformer(self.rewrite, node)

    def rewrite(self, node):
        if not self.is_pipe(node):
            return NO_MATCH
        verbose = log.isEnabledFor(DEBUG)
        before = ast.unparse(node) if verbose else None
        result = _apply_args(self, node.left, node.right)
        if result is NO_MATCH:
            return NO_MATCH
        if verbose:
            log.debug(UserMessage.rewritten(before, ast.unparse(result)))
        return ast.copy_location(result, node)

    __call__ = rewrite


@beartype
def parse_transform(
    tree: ast.AST, *, op: Optional[str] = None, debug: Optional[bool] = None, filename: str = "<pipes>"
) -> ast.AST:
    """Rewrite every pipe in a whole tree, e.g. a module straight out of ast.parse."""
    tree = transform(PipeRewriter(op).rewrite, tree)
    ast.fix_missing_locations(tree)
    if config.debugging if debug is None else debug:
        message = UserMessage.debug_tree(filename, ast.unparse(tree))
        log.info(message)
        print(message, file=sys.stderr)
    return tree


@require(lambda mode: mode in MODES)
@beartype
def transform_source(
    source: str,
    filename: str = "<pipes>",
    mode: str = "exec",
    *,
    op: Optional[str] = None,
    debug: Optional[bool] = None,
) -> ast.AST:
    return parse_transform(ast.parse(source, filename, mode), op=op, debug=debug, filename=filename)


@require(lambda filename: len(filename) > 0)
@require(lambda mode: mode in MODES)
@beartype
def compile_pipes(
    source: str,
    filename: str = "<pipes>",
    mode: str = "exec",
    *,
    op: Optional[str] = None,
    debug: Optional[bool] = None,
) -> CodeType:
    tree = transform_source(source, filename, mode, op=op, debug=debug)
    return compile(tree, filename, mode)
