# --------------------------------------------------------------------
import dataclasses as dc
import logging

from typing import Optional as Opt

from .nyxast      import *
from .nyxbuiltins import Builtins
from .nyxerrors   import ErrorKind, InterpreterError
from .nyxscope    import Environment
from .nyxvalue    import *

log = logging.getLogger(__name__)

# ====================================================================
# Control outcome of a statement sequence

@dc.dataclass(frozen = True)
class Completed:
    pass

@dc.dataclass(frozen = True)
class Returned:
    value: Opt[Value] = None

Outcome = Completed | Returned

# ====================================================================
# Tree-walking interpreter

class Interpreter:
    def __init__(self, builtins: Opt[Builtins] = None):
        self.builtins  = builtins or Builtins.default()
        self.variables = Environment[Value]()

    def error(self, kind: ErrorKind, *details, position: Opt[Position] = None):
        return InterpreterError(kind, *details, position = position)

    def for_expression(self, expr: Expression) -> Value:
        match expr:
            case IntegerLiteral(value):
                return IntegerValue(value)

            case StringLiteral(value):
                return StringValue(value)

            case IdentifierExpression(identifier):
                value = self.variables.get(identifier)
                if value is None:
                    raise self.error(
                        ErrorKind.UNKNOWN_VARIABLE, identifier.name,
                        position = identifier.position,
                    )
                return value

            case BinaryOperation(left, operator, right):
                lvalue = self.for_expression(left)
                rvalue = self.for_expression(right)

                try:
                    value = binary_operation(lvalue, operator, rvalue)
                except ZeroDivisionError:
                    raise self.error(ErrorKind.DIVISION_BY_ZERO, position = expr.position)

                if value is None:
                    raise self.error(
                        ErrorKind.INVALID_BINARY_OPERATION,
                        lvalue.pprint(), operator, rvalue.pprint(),
                        position = expr.position,
                    )
                return value

            case FunctionCall(identifier, arguments):
                values   = [self.for_expression(a) for a in arguments]
                function = self.builtins.get(identifier.name)

                if function is None:
                    raise self.error(
                        ErrorKind.UNKNOWN_FUNCTION, identifier.name,
                        position = identifier.position,
                    )

                return function.call(values)

            case _:
                assert(False)

    def for_statement(self, stmt: Statement) -> Outcome:
        match stmt:
            case LetStatement(identifier, value):
                if identifier in self.variables:
                    raise self.error(
                        ErrorKind.VARIABLE_ALREADY_DECLARED, identifier.name,
                        position = identifier.position,
                    )

                self.variables.assign(identifier, self.for_expression(value))

            case ReturnStatement(value):
                result = None if value is None else self.for_expression(value)
                log.debug('return at %s', stmt.position)
                return Returned(result)

            case ExprStatement(expression):
                self.for_expression(expression)

            case _:
                assert(False)

        return Completed()

    def run(self, prgm: Program) -> Outcome:
        for stmt in prgm:
            outcome = self.for_statement(stmt)
            if isinstance(outcome, Returned):
                return outcome
        return Completed()
