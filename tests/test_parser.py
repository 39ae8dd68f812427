"""Tests for the recursive descent parser."""

import pytest

from nyxlib.nyxast import (
    BinaryOperation,
    ExprStatement,
    FunctionCall,
    Identifier,
    IdentifierExpression,
    IntegerLiteral,
    LetStatement,
    Operator,
    Position,
    ReturnStatement,
    StringLiteral,
    Type,
    Unresolved,
)
from nyxlib.nyxdriver import parse
from nyxlib.nyxerrors import ErrorKind, ParseError
from nyxlib.nyxlexer import TokenKind
from nyxlib.nyxparser import operator_of


def shape(expr):
    """Strip positions so trees can be compared structurally."""
    match expr:
        case IntegerLiteral(value) | StringLiteral(value):
            return value
        case IdentifierExpression(identifier):
            return identifier.name
        case BinaryOperation(left, operator, right):
            return (shape(left), operator.value, shape(right))
        case FunctionCall(identifier, arguments):
            return (identifier.name, [shape(a) for a in arguments])


def parse_one(source):
    (stmt,) = parse(source)
    return stmt


def test_let_without_annotation_is_unresolved():
    stmt = parse_one("let x = 1")
    assert isinstance(stmt, LetStatement)
    assert stmt.identifier == Identifier("x")
    assert stmt.type_ == Unresolved()
    assert stmt.value == IntegerLiteral(1, position=Position(9, 0))
    assert stmt.position == Position(3, 0)


@pytest.mark.parametrize(
    "annotation, type_",
    [
        ("Integer", Type.INTEGER),
        ("String", Type.STRING),
        ("Float", Unresolved("Float")),
    ],
)
def test_let_annotation(annotation, type_):
    stmt = parse_one(f"let x: {annotation} = 1")
    assert stmt.type_ == type_


def test_binary_operations_nest_to_the_right():
    assert shape(parse_one("let x = 1 + 2 * 3").value) == (1, "+", (2, "*", 3))
    assert shape(parse_one("8 - 2 - 1").expression) == (8, "-", (2, "-", 1))


def test_binary_operation_position_is_the_operator():
    expr = parse_one("1 + 2").expression
    assert expr.operator == Operator.ADD
    assert expr.position == Position(3, 0)


def test_operator_lookup():
    assert operator_of(TokenKind.SLASH) == Operator.DIVIDE
    assert operator_of(TokenKind.EQUALS) is None


def test_string_and_identifier_primaries():
    stmt = parse_one('let s = "a" + b')
    assert shape(stmt.value) == ("a", "+", "b")
    assert stmt.value.right.type_ == Unresolved()


def test_expression_statement():
    stmt = parse_one("x")
    assert isinstance(stmt, ExprStatement)
    assert shape(stmt.expression) == "x"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("print()", ("print", [])),
        ("print(5)", ("print", [5])),
        ('print(1, "a", x)', ("print", [1, "a", "x"])),
        ("print(1 + 2, 3)", ("print", [(1, "+", 2), 3])),
        ("print(1,)", ("print", [1])),
        ("print(, 1,, 2)", ("print", [1, 2])),
    ],
)
def test_function_calls(source, expected):
    assert shape(parse_one(source).expression) == expected


def test_function_call_as_operand():
    assert shape(parse_one("let y = f(1) + 2").value) == (("f", [1]), "+", 2)


def test_missing_comma_between_arguments():
    with pytest.raises(ParseError) as e:
        parse("print(1 2)")
    assert e.value.kind == ErrorKind.EXPECTED_TOKEN_BUT_GOT
    assert e.value.position == Position(9, 0)


def test_unclosed_call():
    with pytest.raises(ParseError) as e:
        parse("print(1")
    assert e.value.kind == ErrorKind.UNEXPECTED_EOF


def test_return_with_value():
    stmt = parse_one("return 1 + 1")
    assert isinstance(stmt, ReturnStatement)
    assert shape(stmt.value) == (1, "+", 1)
    assert stmt.position == Position(6, 0)


def test_bare_return():
    assert parse_one("return") == ReturnStatement(None, position=Position(6, 0))


def test_return_degrades_without_swallowing_next_statement():
    statements = parse("return\nlet x = 1")
    assert len(statements) == 2
    assert statements[0].value is None
    assert isinstance(statements[1], LetStatement)


@pytest.mark.parametrize("source", ["return =", "return )", "return 1 +"])
def test_return_with_broken_expression_has_no_value(source):
    assert parse(source) == [ReturnStatement(None, position=Position(6, 0))]


def test_broken_return_value_keeps_following_statement():
    statements = parse("return = 1\nlet y = 2")
    assert len(statements) == 3
    assert statements[0].value is None
    assert isinstance(statements[1], ExprStatement)
    assert shape(statements[1].expression) == 1
    assert isinstance(statements[2], LetStatement)


def test_statements_follow_each_other():
    statements = parse("let a = 1\nlet b = a\nprint(b)")
    assert [type(s) for s in statements] == [LetStatement, LetStatement, ExprStatement]


def test_empty_program():
    assert parse("") == []
    assert parse("// only a comment") == []


def test_let_expects_identifier():
    with pytest.raises(ParseError) as e:
        parse("let = 1")
    assert e.value.kind == ErrorKind.EXPECTED_TOKEN_BUT_GOT
    assert e.value.position == Position(5, 0)


def test_let_at_end_of_input():
    with pytest.raises(ParseError) as e:
        parse("let")
    assert e.value.kind == ErrorKind.EXPECTED_IDENTIFIER
    assert e.value.position == Position(3, 0)


def test_let_expects_equals():
    with pytest.raises(ParseError) as e:
        parse("let x 1")
    assert e.value.kind == ErrorKind.EXPECTED_TOKEN_BUT_GOT
    assert e.value.details[0] == "`=`"


def test_let_missing_equals_at_end():
    with pytest.raises(ParseError) as e:
        parse("let x")
    assert e.value.kind == ErrorKind.EXPECTED_TOKEN
    assert e.value.position == Position(5, 0)


def test_let_missing_value():
    with pytest.raises(ParseError) as e:
        parse("let x =")
    assert e.value.kind == ErrorKind.UNEXPECTED_EOF


def test_bad_type_annotation_points_one_column_back():
    with pytest.raises(ParseError) as e:
        parse("let x: = 1")
    assert e.value.kind == ErrorKind.EXPECTED_IDENTIFIER
    assert e.value.position == Position(7, 0)


def test_value_cannot_start_with_operator():
    with pytest.raises(ParseError) as e:
        parse("= 1")
    assert e.value.kind == ErrorKind.UNABLE_TO_PARSE_VALUE
    assert e.value.stage == "parser"


def test_keyword_in_value_position():
    with pytest.raises(ParseError) as e:
        parse("let x = let")
    assert e.value.kind == ErrorKind.UNABLE_TO_PARSE_VALUE
