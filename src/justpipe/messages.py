"""
Collection of the messages directed to the user.
The lambdas keep the f-strings from being evaluated before there is something to say.
"""

from enum import Enum


class UserMessage(Enum):
    unknown_operator = (
        lambda token, choices: f"{token!r} is not a binary operator token Python knows, pick one of: {' '.join(choices)}"
    )
    no_source = (
        lambda thing, e: f"""Could not read the source of {thing!r} to rewrite its pipes ({e}).
@pipes only works on functions and classes defined in a file, not on builtins or code typed into a REPL.
If the code comes from a string, use justpipe.compile_pipes(source) instead."""
    )
    rewritten = lambda before, after: f"{before}  ->  {after}"
    debug_tree = lambda filename, source: f"### {filename} after justpipe ###\n{source}\n### end of {filename} ###"
    not_a_definition = (
        lambda thing: f"""{thing!r} is not defined by a def or class statement of its own.
@pipes can only recompile functions and classes, lambdas have to be wrapped in a def."""
    )
