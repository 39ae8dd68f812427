# --------------------------------------------------------------------
import dataclasses as dc
import logging

from typing import Optional as Opt

from .nyxast      import Program
from .nyxbuiltins import Builtins
from .nyxinterp   import Interpreter, Outcome
from .nyxlexer    import Token, tokenize
from .nyxparser   import Parser
from .nyxresolver import TypeResolver
from .nyxscope    import Environment
from .nyxvalue    import Value

log = logging.getLogger(__name__)

# ====================================================================
# Pipeline entry points
#
# Each stage raises its own `Error` subclass and skips the later ones.

@dc.dataclass
class Execution:
    outcome   : Outcome
    variables : Environment[Value]

def lex(source: str) -> list[Token]:
    return tokenize(source)

def parse(source: str) -> Program:
    tokens = lex(source)
    return Parser(tokens).parse()

def check(source: str, builtins: Opt[Builtins] = None) -> Program:
    prgm = parse(source)
    return TypeResolver(builtins).resolve(prgm)

def execute(source: str, builtins: Opt[Builtins] = None) -> Execution:
    builtins    = builtins or Builtins.default()
    prgm        = check(source, builtins)
    interpreter = Interpreter(builtins)
    outcome     = interpreter.run(prgm)

    log.debug(
        'finished with %s, %d variable(s) bound',
        type(outcome).__name__, len(interpreter.variables),
    )

    return Execution(outcome, interpreter.variables)
