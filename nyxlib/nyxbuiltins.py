# --------------------------------------------------------------------
import dataclasses as dc
import sys
import typing as tp

from typing import Optional as Opt

from .nyxast   import Type
from .nyxvalue import VOID, Value

# ====================================================================
# Host-provided functions

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Function:
    name        : str
    parameters  : tuple[Type, ...]
    return_type : Type
    call        : tp.Callable[[list[Value]], Value]

# --------------------------------------------------------------------
class Builtins:
    """
    Registry of the functions a program may call.

    The same registry is handed to the resolver (which reads the
    signatures) and to the interpreter (which invokes the callables).
    """

    def __init__(self, output: Opt[tp.TextIO] = None):
        self.output    = output
        self.functions = dict()

    @classmethod
    def default(cls, output: Opt[tp.TextIO] = None):
        builtins = cls(output)
        builtins.register(Function(
            name        = 'print',
            parameters  = (Type.ANY,),
            return_type = Type.VOID,
            call        = builtins.print,
        ))
        return builtins

    def register(self, function: Function):
        self.functions[function.name] = function

    def get(self, name: str) -> Opt[Function]:
        return self.functions.get(name)

    def print(self, arguments: list[Value]) -> Value:
        # resolved at call time so that a redirected sys.stdout is honoured
        output = self.output or sys.stdout
        for argument in arguments:
            print(argument.display(), file = output)
        return VOID
