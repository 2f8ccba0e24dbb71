import linecache
from logging import getLogger
from pathlib import Path
from types import ModuleType
from typing import Any, Optional, Union

from beartype import beartype

from ._PipeTransformer import compile_pipes

log = getLogger(__name__)


@beartype
def load_module(
    path: Union[str, Path],
    *,
    name: Optional[str] = None,
    initial_globals: Optional[dict[str, Any]] = None,
    op: Optional[str] = None,
    debug: Optional[bool] = None,
) -> ModuleType:
    """Build a module from a source file with every pipe in it rewritten."""
    module_path = Path(path).absolute()
    code_text = module_path.read_text(encoding="utf-8")
    name = name or module_path.stem

    mod = ModuleType(name)
    mod.__dict__.update(initial_globals or {})
    mod.__file__ = str(module_path)
    mod.__package__ = name.rpartition(".")[0]
    # so that tracebacks and inspect find the source even if the file goes away
    linecache.cache[mod.__file__] = (
        len(code_text),  # size of source code
        None,  # last modified time; None means there is no physical file
        [*map(lambda ln: ln + "\x0a", code_text.splitlines())],
        mod.__file__,
    )
    codeobj = compile_pipes(code_text, mod.__file__, "exec", op=op, debug=debug)
    exec(codeobj, mod.__dict__)
    log.info("load_module(%s) -> %s", repr(str(path)), name)
    return mod
