# --------------------------------------------------------------------
import dataclasses as dc
import enum

from typing import Optional as Opt

# ====================================================================
# Source positions

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Position:
    column : int = 0
    line   : int = 0

    def next_line(self):
        return Position(column = 0, line = self.line + 1)

    def previous(self):
        return Position(column = max(self.column - 1, 0), line = self.line)

    def __str__(self):
        return f'{self.line + 1}:{self.column}'

# ====================================================================
# Types

# --------------------------------------------------------------------
class Type(enum.Enum):
    ANY     = 'Any'
    VOID    = 'Void'
    INTEGER = 'Integer'
    STRING  = 'String'

    def __str__(self):
        return self.value

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Unresolved:
    """
    A type still waiting for the resolver.

    `Unresolved()` asks for inference from context, `Unresolved(name)`
    is a declared type name nobody knows about.
    """
    name: Opt[str] = None

    def __str__(self):
        return f'Unresolved({self.name})' if self.name else 'Unresolved'

TypeLike = Type | Unresolved

TYPE_NAMES = {
    'Integer' : Type.INTEGER,
    'String'  : Type.STRING,
}

def type_of_name(name: str) -> TypeLike:
    return TYPE_NAMES.get(name, Unresolved(name))

def is_resolved(type_: TypeLike) -> bool:
    return not isinstance(type_, Unresolved)

# ====================================================================
# Abstract Syntax Tree

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Identifier:
    name     : str
    position : Position = dc.field(default = Position(), compare = False)

# --------------------------------------------------------------------
class Operator(enum.Enum):
    ADD      = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE   = '/'

    def __str__(self):
        return self.value

# --------------------------------------------------------------------
@dc.dataclass
class AST:
    position: Opt[Position] = dc.field(kw_only = True, default = None)

# --------------------------------------------------------------------
@dc.dataclass
class Expression(AST):
    @property
    def type_(self) -> TypeLike:
        return Unresolved()

# --------------------------------------------------------------------
@dc.dataclass
class IntegerLiteral(Expression):
    value: int

    @property
    def type_(self):
        return Type.INTEGER

# --------------------------------------------------------------------
@dc.dataclass
class StringLiteral(Expression):
    value: str

    @property
    def type_(self):
        return Type.STRING

# --------------------------------------------------------------------
@dc.dataclass
class IdentifierExpression(Expression):
    identifier : Identifier
    type_      : TypeLike = Unresolved()

# --------------------------------------------------------------------
@dc.dataclass
class BinaryOperation(Expression):
    left     : Expression
    operator : Operator
    right    : Expression
    type_    : TypeLike = Unresolved()

# --------------------------------------------------------------------
@dc.dataclass
class FunctionCall(Expression):
    identifier : Identifier
    arguments  : list[Expression]
    type_      : TypeLike = Unresolved()

# --------------------------------------------------------------------
class Statement(AST):
    pass

# --------------------------------------------------------------------
@dc.dataclass
class LetStatement(Statement):
    identifier : Identifier
    value      : Expression
    type_      : TypeLike = Unresolved()

# --------------------------------------------------------------------
@dc.dataclass
class ReturnStatement(Statement):
    value: Opt[Expression] = None

# --------------------------------------------------------------------
@dc.dataclass
class ExprStatement(Statement):
    expression: Expression

# --------------------------------------------------------------------
Program = list[Statement]
