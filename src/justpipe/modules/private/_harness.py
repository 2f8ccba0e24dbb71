"""
The traversal harness: every node of a tree is offered to a rewrite callback.

The callback either returns a replacement node, which is spliced in and not
walked again, or NO_MATCH, in which case the walk descends into the node's
children. Trees are walked top-down so that the outermost step of a pipe chain
is the one that sees the whole chain.
"""

import ast
from logging import getLogger
from typing import Callable, Protocol, Union

log = getLogger(__name__)


class _NoMatch:
    def __repr__(self):
        return "NO_MATCH"


NO_MATCH = _NoMatch()
"returned by a callback to leave a node as it was parsed"

Callback = Callable[[ast.AST], Union[ast.AST, _NoMatch]]
Tree = Union[ast.AST, list[ast.AST]]


class Transformer(Protocol):
    def __call__(self, callback: Callback, node: Tree) -> Tree:
        ...


class _CallbackTransformer(ast.NodeTransformer):
    def __init__(self, callback: Callback):
        self.callback = callback

    def visit(self, node):
        result = self.callback(node)
        if result is NO_MATCH:
            return self.generic_visit(node)
        return result


def transform(callback: Callback, node: Tree) -> Tree:
    if isinstance(node, list):
        return [transform(callback, n) for n in node]
    return _CallbackTransformer(callback).visit(node)
