# --------------------------------------------------------------------
import dataclasses as dc

from typing import Optional as Opt

from .nyxast import Operator

# ====================================================================
# Runtime values

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class IntegerValue:
    value: int

    def display(self):
        return str(self.value)

    def pprint(self):
        return f'Integer({self.value})'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class StringValue:
    value: str

    def display(self):
        return self.value

    def pprint(self):
        return f'String({self.value!r})'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class VoidValue:
    def display(self):
        return 'void'

    def pprint(self):
        return 'Void'

Value = IntegerValue | StringValue | VoidValue

VOID = VoidValue()

# ====================================================================
# Operators

def wrap_int32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)

def int_divide(left: int, right: int) -> int:
    # truncates toward zero; raises ZeroDivisionError
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient

INTEGER_OPERATIONS = {
    Operator.ADD      : lambda x, y: x + y,
    Operator.SUBTRACT : lambda x, y: x - y,
    Operator.MULTIPLY : lambda x, y: x * y,
    Operator.DIVIDE   : int_divide,
}

def binary_operation(left: Value, operator: Operator, right: Value) -> Opt[Value]:
    """
    None means the operand types cannot be combined.

    Strings concatenate whatever the operator is.
    """
    match left, right:
        case IntegerValue(x), IntegerValue(y):
            return IntegerValue(wrap_int32(INTEGER_OPERATIONS[operator](x, y)))

        case StringValue(x), StringValue(y):
            return StringValue(x + y)

        case _:
            return None
