"""
Module to hold the decorators used in justpipe
"""

import ast
import inspect
import sys
from functools import partial
from logging import getLogger
from textwrap import dedent
from typing import Optional

from justpipe import NotADefinitionError, UnreadableSourceError
from justpipe.messages import UserMessage

from .private._PipeTransformer import parse_transform

log = getLogger(__name__)


def _is_pipes(decorator: ast.expr) -> bool:
    if isinstance(decorator, ast.Call):
        decorator = decorator.func
    match decorator:
        case ast.Name(id="pipes") | ast.Attribute(attr="pipes"):
            return True
    return False


def _namespace(thing) -> dict:
    if inspect.isclass(thing):
        return vars(sys.modules[thing.__module__])
    func = inspect.unwrap(thing)
    if not func.__code__.co_freevars:
        return func.__globals__
    # a closure can't be rebuilt from source, so the copy sees the current values as globals
    ctx = dict(func.__globals__)
    for name, cell in zip(func.__code__.co_freevars, func.__closure__):
        try:
            ctx[name] = cell.cell_contents
        except ValueError:  # not bound yet, e.g. the function itself
            continue
    return ctx


def pipes(thing=None, /, *, op: Optional[str] = None, debug: Optional[bool] = None):
    """Rewrite the pipes in a function or class, as @pipes or @pipes(op="|")."""
    if thing is None:
        return partial(pipes, op=op, debug=debug)

    try:
        lines, first_line_number = inspect.getsourcelines(thing)
        filename = inspect.getsourcefile(thing) or "<pipes>"
    except (OSError, TypeError) as e:
        raise UnreadableSourceError(UserMessage.no_source(thing, e)) from e

    tree = ast.parse(dedent("".join(lines)))
    ast.increment_lineno(tree, first_line_number - 1)
    definition = tree.body[0]
    if not isinstance(definition, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
        raise NotADefinitionError(UserMessage.not_a_definition(thing))
    # decorators above @pipes are applied to whatever we return, only those below must be redone
    decorators = definition.decorator_list
    positions = [i for i, d in enumerate(decorators) if _is_pipes(d)]
    if positions:
        definition.decorator_list = decorators[positions[-1] + 1 :]
    tree = parse_transform(tree, op=op, debug=debug, filename=filename)

    namespace = {}
    exec(compile(tree, filename, "exec"), _namespace(thing), namespace)
    log.debug("pipes(%s) recompiled from %s:%s", definition.name, filename, first_line_number)
    return namespace[definition.name]
