# --------------------------------------------------------------------
import logging

from typing import Optional as Opt

from .nyxast    import *
from .nyxerrors import ErrorKind, ParseError
from .nyxlexer  import Keyword, Token, TokenKind
from .nyxstream import Stream

log = logging.getLogger(__name__)

OPERATORS = {
    TokenKind.PLUS     : Operator.ADD     ,
    TokenKind.MINUS    : Operator.SUBTRACT,
    TokenKind.ASTERISK : Operator.MULTIPLY,
    TokenKind.SLASH    : Operator.DIVIDE  ,
}

def operator_of(kind: TokenKind) -> Opt[Operator]:
    return OPERATORS.get(kind)

# ====================================================================
# Recursive descent parser
#
# program    ::= statement*
# statement  ::= let | return | expression
# let        ::= "let" IDENT (":" IDENT)? "=" expression
# return     ::= "return" expression?
# expression ::= primary (operator expression)?
# primary    ::= IDENT ("(" arguments? ")")? | INTEGER | STRING

class Parser:
    def __init__(self, tokens: list[Token]):
        self.tokens   = Stream(tokens)
        self.position = Position()

    def error(self, kind: ErrorKind, *details, position: Opt[Position] = None):
        return ParseError(
            kind, *details,
            position = self.position if position is None else position,
        )

    def peek(self) -> Opt[Token]:
        return self.tokens.peek()

    def consume(self) -> Opt[Token]:
        token = self.tokens.consume()
        if token is not None:
            self.position = token.position
        return token

    def expect(self, kind: TokenKind) -> Token:
        token = self.consume()

        if token is None:
            raise self.error(ErrorKind.EXPECTED_TOKEN, f'`{kind.value}`')

        if token.kind != kind:
            raise self.error(
                ErrorKind.EXPECTED_TOKEN_BUT_GOT, f'`{kind.value}`', token.pprint(),
                position = token.position,
            )

        return token

    def expect_identifier(self) -> Identifier:
        token = self.consume()

        if token is None:
            raise self.error(ErrorKind.EXPECTED_IDENTIFIER)

        if token.kind != TokenKind.IDENTIFIER:
            raise self.error(
                ErrorKind.EXPECTED_TOKEN_BUT_GOT, 'identifier', token.pprint(),
                position = token.position,
            )

        return Identifier(token.value, token.position)

    # ----------------------------------------------------------------
    def parse(self) -> Program:
        statements = []

        while self.peek() is not None:
            statements.append(self.parse_statement())

        log.debug('parsed %d statement(s)', len(statements))
        return statements

    def parse_statement(self) -> Statement:
        token = self.peek()

        match token:
            case Token(TokenKind.KEYWORD, position, Keyword.LET):
                self.consume()
                return self.parse_let_statement(position)

            case Token(TokenKind.KEYWORD, position, Keyword.RETURN):
                self.consume()
                return self.parse_return_statement(position)

            case Token(TokenKind.KEYWORD):
                raise self.error(
                    ErrorKind.UNABLE_TO_PARSE, token.pprint(),
                    position = token.position,
                )

            case _:
                return ExprStatement(self.parse_expression(), position = token.position)

    # let <identifier> (: <type>)? = <expression>
    def parse_let_statement(self, position: Position) -> LetStatement:
        identifier = self.expect_identifier()
        type_      = Unresolved()

        token = self.peek()
        if token is not None and token.kind == TokenKind.COLON:
            self.consume()
            type_ = self.parse_type_identifier()

        self.expect(TokenKind.EQUALS)
        value = self.parse_expression()

        return LetStatement(identifier, value, type_, position = position)

    # return <expression>?
    #
    # A value that fails to parse leaves a bare return. Its tokens stay
    # consumed unless the failure started on a keyword, which belongs to
    # the next statement.
    def parse_return_statement(self, position: Position) -> ReturnStatement:
        mark, seen = self.tokens.index, self.position
        start      = self.peek()

        try:
            value = self.parse_expression()
        except ParseError as e:
            log.debug('valueless return at %s (%s)', position, e.message)
            value = None

            if start is not None and start.kind == TokenKind.KEYWORD:
                self.tokens.rewind(mark)
                self.position = seen

        return ReturnStatement(value, position = position)

    def parse_type_identifier(self) -> TypeLike:
        token = self.consume()

        if token is None:
            raise self.error(ErrorKind.EXPECTED_IDENTIFIER)

        if token.kind != TokenKind.IDENTIFIER:
            raise self.error(
                ErrorKind.EXPECTED_IDENTIFIER,
                position = token.position.previous(),
            )

        return type_of_name(token.value)

    # ----------------------------------------------------------------
    def parse_expression(self) -> Expression:
        left  = self.parse_primary()
        token = self.peek()

        if token is None or (operator := operator_of(token.kind)) is None:
            return left

        self.consume()
        right = self.parse_expression()

        return BinaryOperation(left, operator, right, position = token.position)

    def parse_primary(self) -> Expression:
        token = self.consume()

        match token:
            case None:
                raise self.error(ErrorKind.UNEXPECTED_EOF)

            case Token(TokenKind.INTEGER_LITERAL, position, value):
                return IntegerLiteral(value, position = position)

            case Token(TokenKind.STRING_LITERAL, position, value):
                return StringLiteral(value, position = position)

            case Token(TokenKind.IDENTIFIER, position, name):
                identifier = Identifier(name, position)
                following  = self.peek()

                if following is not None and following.kind == TokenKind.OPEN_PAREN:
                    self.consume()
                    arguments = self.parse_arguments()
                    return FunctionCall(identifier, arguments, position = position)

                return IdentifierExpression(identifier, position = position)

            case _:
                raise self.error(
                    ErrorKind.UNABLE_TO_PARSE_VALUE, token.pprint(),
                    position = token.position,
                )

    # Stray and trailing commas are skipped
    def parse_arguments(self) -> list[Expression]:
        arguments = []
        separated = True

        while True:
            token = self.peek()

            match token:
                case None:
                    raise self.error(ErrorKind.UNEXPECTED_EOF)

                case Token(TokenKind.CLOSE_PAREN):
                    self.consume()
                    return arguments

                case Token(TokenKind.COMMA):
                    self.consume()
                    separated = True

                case _ if not separated:
                    raise self.error(
                        ErrorKind.EXPECTED_TOKEN_BUT_GOT, '`)`', token.pprint(),
                        position = token.position,
                    )

                case _:
                    arguments.append(self.parse_expression())
                    separated = False

