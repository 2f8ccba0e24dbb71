"""
Substitute `_`, `_1`, `_2`, ... `_N` with the corresponding argument.
"""

import ast
import copy
import re
from logging import getLogger
from typing import Optional

from ._harness import NO_MATCH, Transformer, transform

log = getLogger(__name__)

ANONYMOUS = "_"
_INDEXED = re.compile(r"_([0-9]+)")


def parse_placeholder(name: str) -> Optional[int]:
    """1-based position a placeholder name stands for, None for ordinary names."""
    if name == ANONYMOUS:
        return 1
    if match := _INDEXED.fullmatch(name):
        return int(match[1]) or None
    return None


class _Substitution:
    def __init__(self, args: list[ast.expr]):
        self.args = args
        self.hits = 0

    def __call__(self, node):
        if not (isinstance(node, ast.Name) and isinstance(node.ctx, ast.Load)):
            return NO_MATCH
        index = parse_placeholder(node.id)
        if index is None or index > len(self.args):
            return NO_MATCH
        self.hits += 1
        return ast.copy_location(copy.deepcopy(self.args[index - 1]), node)


def _substitute(
    args: list[ast.expr], node: ast.AST, transformer: Transformer = transform
) -> tuple[ast.AST, bool]:
    """Returns the rewritten node and whether any placeholder was replaced."""
    substitution = _Substitution(args)
    result = transformer(substitution, node)
    return result, substitution.hits > 0
