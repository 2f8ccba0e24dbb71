"""
This is where the pipes begin. Welcome to justpipe!
Only imports and project-global constants are defined here.

    [a, b] / f / g(x, _) / print

is rewritten at compile time into

    print(g(x, f(a, b)))

while 4.0 / 2 stays a division.
"""


import sys
from logging import getLogger

if sys.version_info < (3, 11):
    import tomli as toml
else:
    import tomllib as toml

from justpipe.pydantics import Configuration

# the defaults tell us where to look for the file that may override them
home = Configuration().home
config_dict = {}
if (home / "config.toml").is_file():
    with open(home / "config.toml", "rb") as f:
        config_dict = toml.load(f)
del toml

config = Configuration(**config_dict)
del Configuration, config_dict

# !!! SEE NOTE !!!
# setup.py reads __version__ **AS A STRING LITERAL** from this file.
__version__ = "0.1.0"

log = getLogger(__name__)
log.setLevel(config.debug_level)


class JustpipeIssue:
    pass


class UnreadableSourceError(OSError, JustpipeIssue):
    pass


class NotADefinitionError(TypeError, JustpipeIssue):
    pass


from justpipe.modules.Decorators import pipes
from justpipe.modules.private._build_mod import load_module
from justpipe.modules.private._harness import NO_MATCH, Transformer, transform
from justpipe.modules.private._PipeTransformer import (
    PipeRewriter,
    compile_pipes,
    parse_transform,
    transform_source,
)
from justpipe.pydantics import OPERATORS, operator_for

del sys
