# --------------------------------------------------------------------
import logging

from typing import Optional as Opt

from .nyxast      import *
from .nyxbuiltins import Builtins
from .nyxerrors   import ErrorKind, ResolveError
from .nyxscope    import Environment

log = logging.getLogger(__name__)

# ====================================================================
# Type resolution and checking

class TypeResolver:
    def __init__(self, builtins: Opt[Builtins] = None):
        self.builtins = builtins or Builtins.default()
        self.scope    = Environment[TypeLike]()

    def error(self, kind: ErrorKind, *details, position: Opt[Position] = None):
        return ResolveError(kind, *details, position = position)

    def resolve_type(self, type_: TypeLike, position: Opt[Position]) -> TypeLike:
        match type_:
            case Unresolved(None):
                return type_
            case Unresolved(name):
                raise self.error(ErrorKind.UNABLE_TO_RESOLVE_TYPE, name, position = position)
            case _:
                return type_

    def check_same(self, expected: TypeLike, actual: TypeLike, position: Opt[Position]):
        if expected != actual:
            raise self.error(ErrorKind.TYPE_MISMATCH, expected, actual, position = position)

    # ----------------------------------------------------------------
    def for_expression(self, expr: Expression) -> TypeLike:
        match expr:
            case IntegerLiteral() | StringLiteral():
                pass

            case IdentifierExpression(identifier):
                if identifier not in self.scope:
                    raise self.error(
                        ErrorKind.UNKNOWN_VARIABLE, identifier.name,
                        position = identifier.position,
                    )
                expr.type_ = self.scope[identifier]

            case BinaryOperation(left, _, right):
                ltype = self.for_expression(left)
                rtype = self.for_expression(right)
                self.check_same(ltype, rtype, expr.position)
                expr.type_ = ltype

            case FunctionCall(identifier, arguments):
                atypes   = [self.for_expression(a) for a in arguments]
                function = self.builtins.get(identifier.name)

                if function is None:
                    raise self.error(
                        ErrorKind.UNKNOWN_FUNCTION, identifier.name,
                        position = identifier.position,
                    )

                if len(function.parameters) != len(atypes):
                    raise self.error(
                        ErrorKind.INVALID_ARGUMENT_COUNT,
                        len(function.parameters), len(atypes),
                        position = identifier.position,
                    )

                for ptype, atype, argument in zip(function.parameters, atypes, arguments):
                    if ptype != Type.ANY:
                        self.check_same(ptype, atype, argument.position or identifier.position)

                expr.type_ = function.return_type

            case _:
                assert(False)

        return expr.type_

    def for_statement(self, stmt: Statement):
        match stmt:
            case LetStatement(identifier, value, type_):
                declared = self.resolve_type(type_, stmt.position)
                vtype    = self.for_expression(value)

                if declared == Unresolved() and not is_resolved(vtype):
                    raise self.error(
                        ErrorKind.UNABLE_TO_INFER_TYPE, identifier.name,
                        position = identifier.position,
                    )

                if is_resolved(declared):
                    self.check_same(declared, vtype, stmt.position)
                    stmt.type_ = declared
                else:
                    stmt.type_ = vtype

                log.debug('%s: %s', identifier.name, stmt.type_)
                self.scope.assign(identifier, stmt.type_)

            case ReturnStatement(value):
                if value is not None:
                    self.for_expression(value)

            case ExprStatement(expression):
                self.for_expression(expression)

            case _:
                assert(False)

    def resolve(self, prgm: Program) -> Program:
        for stmt in prgm:
            self.for_statement(stmt)
        return prgm

