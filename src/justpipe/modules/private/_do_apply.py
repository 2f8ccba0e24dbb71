"""
Attach the resolved arguments of a pipe step to the expression on its right.
"""

import ast
from logging import getLogger

from ._substitute import ANONYMOUS, _substitute, parse_placeholder

log = getLogger(__name__)


def _do_apply(rewriter, target: ast.expr, args: list[ast.expr]) -> ast.expr:
    match target:
        case ast.Name(id=name) if parse_placeholder(name) is not None:
            if name == ANONYMOUS and len(args) == 1:
                return args[0]
            return target

        case ast.Name() | ast.Attribute():
            return ast.copy_location(ast.Call(func=target, args=args, keywords=[]), target)

        case ast.Call(args=[], keywords=[]):
            return ast.copy_location(ast.Call(func=target.func, args=args, keywords=[]), target)

        case ast.Call() | ast.ListComp() | ast.SetComp() | ast.DictComp() | ast.GeneratorExp():
            result, substituted = _substitute(args, target, rewriter.transformer)
            if substituted or not isinstance(target, ast.Call):
                return result
            if not args:
                return target
            # keyword-only calls have a free positional slot for every argument
            if target.args:
                target.args.insert(0, args[0])
            else:
                target.args = list(args)
            return target

        case ast.BinOp(left=left, op=op, right=right):
            left, _ = _substitute(args, rewriter.resolve(left), rewriter.transformer)
            right, _ = _substitute(args, rewriter.resolve(right), rewriter.transformer)
            return ast.copy_location(ast.BinOp(left=left, op=op, right=right), target)

        case ast.Lambda(args=arguments, body=body):
            body, _ = _substitute(args, body, rewriter.transformer)
            return ast.copy_location(ast.Lambda(args=arguments, body=body), target)

        case _:
            return target
