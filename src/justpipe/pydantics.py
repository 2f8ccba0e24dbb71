"""
Pydantic model for the configuration.
"""
import ast
import os
from logging import DEBUG, NOTSET, getLogger
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from justpipe.messages import UserMessage

log = getLogger(__name__)

# every binary operator token Python has, so any of them can be turned into a pipe
OPERATORS: dict[str, type[ast.operator]] = {
    "+": ast.Add,
    "-": ast.Sub,
    "*": ast.Mult,
    "@": ast.MatMult,
    "/": ast.Div,
    "//": ast.FloorDiv,
    "%": ast.Mod,
    "**": ast.Pow,
    "<<": ast.LShift,
    ">>": ast.RShift,
    "|": ast.BitOr,
    "^": ast.BitXor,
    "&": ast.BitAnd,
}


def operator_for(token: str) -> type[ast.operator]:
    try:
        return OPERATORS[token]
    except KeyError:
        raise ValueError(UserMessage.unknown_operator(token, OPERATORS)) from None


class BaseModel(BaseModel):
    def __repr__(self):
        return self.__class__.__name__


class Configuration(BaseModel):
    model_config = ConfigDict(validate_assignment=True, validate_default=True)

    operator: str = os.getenv("JUSTPIPE_OPERATOR", "/")
    debugging: bool = bool(int(os.getenv("JUSTPIPE_DEBUG", "0")))
    home: Path = Path(os.getenv("JUSTPIPE_HOME", str(Path.home() / ".justpipe"))).absolute()

    @field_validator("operator")
    @classmethod
    def known_operator(cls, value: str) -> str:
        operator_for(value)
        return value

    @property
    def debug_level(self) -> int:
        return DEBUG if self.debugging else NOTSET

    @property
    def op(self) -> type[ast.operator]:
        return operator_for(self.operator)
