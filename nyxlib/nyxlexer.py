# --------------------------------------------------------------------
import dataclasses as dc
import enum
import logging
import re

from typing import Optional as Opt

import ply.lex

from .nyxast    import Position
from .nyxerrors import ErrorKind, LexError

log = logging.getLogger(__name__)

INT32_RANGE = range(-(1 << 31), 1 << 31)

# ====================================================================
# Tokens

class TokenKind(enum.Enum):
    EQUALS          = '='
    PLUS            = '+'
    MINUS           = '-'
    ASTERISK        = '*'
    SLASH           = '/'
    COLON           = ':'
    OPEN_PAREN      = '('
    CLOSE_PAREN     = ')'
    COMMA           = ','

    KEYWORD         = 'keyword'
    IDENTIFIER      = 'identifier'
    STRING_LITERAL  = 'string literal'
    INTEGER_LITERAL = 'integer literal'

class Keyword(enum.Enum):
    LET    = 'let'
    RETURN = 'return'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Token:
    kind     : TokenKind
    position : Position
    value    : Keyword | str | int | None = None

    def pprint(self):
        match self.kind:
            case TokenKind.KEYWORD:
                return f'Keyword({self.value.name.capitalize()})'
            case TokenKind.IDENTIFIER:
                return f'Identifier({self.value})'
            case TokenKind.STRING_LITERAL:
                return f'StringLiteral({self.value!r})'
            case TokenKind.INTEGER_LITERAL:
                return f'IntegerLiteral({self.value})'
            case _:
                return f'`{self.kind.value}`'

# ====================================================================
# Lexer

class Lexer:
    keywords = {
        x.value: x.name for x in Keyword
    }

    tokens = (
        'IDENTIFIER'      ,     # : str
        'STRING_LITERAL'  ,     # : str
        'INTEGER_LITERAL' ,     # : int

        # Punctuation
        'EQUALS'          ,
        'PLUS'            ,
        'MINUS'           ,
        'ASTERISK'        ,
        'SLASH'           ,
        'COLON'           ,
        'OPEN_PAREN'      ,
        'CLOSE_PAREN'     ,
        'COMMA'           ,
    ) + tuple(keywords.values())

    t_EQUALS          = re.escape('=')
    t_PLUS            = re.escape('+')
    t_MINUS           = re.escape('-')
    t_ASTERISK        = re.escape('*')
    t_SLASH           = re.escape('/')
    t_COLON           = re.escape(':')
    t_OPEN_PAREN      = re.escape('(')
    t_CLOSE_PAREN     = re.escape(')')
    t_COMMA           = re.escape(',')

    t_INTEGER_LITERAL = r'\d+'

    t_ignore          = ' '         # Only plain spaces; tabs are rejected
    t_ignore_COMMENT  = r'//[^\n]*'

    def __init__(self):
        self.lexer    = ply.lex.lex(module = self, errorlog = log)
        self.cursor   = Position()
        self.linestart = 0

    def position(self, end: int) -> Position:
        return Position(column = end - self.linestart, line = self.cursor.line)

    def t_newline(self, t):
        r'\n'
        self.cursor    = self.cursor.next_line()
        self.linestart = t.lexer.lexpos

    def t_STRING_LITERAL(self, t):
        r'"[^"\n]*"'
        return t

    def t_unterminated_string(self, t):
        r'"[^"\n]*'
        raise LexError(
            ErrorKind.UNTERMINATED_STRING,
            position = self.position(t.lexer.lexpos),
        )

    def t_IDENTIFIER(self, t):
        r'[^\W\d_]+'
        end = next((i for i, c in enumerate(t.value) if not c.isalpha()), len(t.value))

        if end == 0:
            raise LexError(
                ErrorKind.UNEXPECTED_CHARACTER, t.value[0],
                position = self.position(t.lexpos + 1),
            )

        # Letter-like symbols such as `²` end the identifier
        t.value        = t.value[:end]
        t.lexer.lexpos = t.lexpos + end
        t.type         = self.keywords.get(t.value, 'IDENTIFIER')
        return t

    def t_error(self, t):
        raise LexError(
            ErrorKind.UNEXPECTED_CHARACTER, t.value[0],
            position = self.position(t.lexpos + 1),
        )

    def to_token(self, t) -> Token:
        position = self.position(t.lexpos + len(t.value))

        match t.type:
            case 'IDENTIFIER':
                return Token(TokenKind.IDENTIFIER, position, t.value)

            case 'STRING_LITERAL':
                return Token(TokenKind.STRING_LITERAL, position, t.value[1:-1])

            case 'INTEGER_LITERAL':
                if not t.value.isascii() or int(t.value) not in INT32_RANGE:
                    raise LexError(ErrorKind.INVALID_NUMBER, t.value, position = position)
                return Token(TokenKind.INTEGER_LITERAL, position, int(t.value))

            case kind if kind in Keyword.__members__:
                return Token(TokenKind.KEYWORD, position, Keyword[kind])

            case kind:
                return Token(TokenKind[kind], position)

    def tokenize(self, source: str) -> list[Token]:
        self.cursor    = Position()
        self.linestart = 0
        self.lexer.lineno = 1
        self.lexer.input(source)

        tokens = []
        while (t := self.lexer.token()) is not None:
            tokens.append(self.to_token(t))

        log.debug('lexed %d token(s) over %d line(s)', len(tokens), self.cursor.line + 1)
        return tokens

# --------------------------------------------------------------------
def tokenize(source: str, lexer: Opt[Lexer] = None) -> list[Token]:
    return (lexer or Lexer()).tokenize(source)
