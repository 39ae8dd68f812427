# --------------------------------------------------------------------
import enum

from typing import Optional as Opt

import rich.console
import rich.text

from .nyxast import Position

# ====================================================================
# Error taxonomy

class ErrorKind(enum.Enum):
    # lexer
    UNEXPECTED_CHARACTER      = 'Unexpected character: `{0}`'
    UNTERMINATED_STRING       = 'Unterminated string literal'
    INVALID_NUMBER            = 'Invalid number: `{0}`'

    # parser
    UNABLE_TO_PARSE           = 'Unable to parse: {0}'
    UNABLE_TO_PARSE_VALUE     = 'Unable to parse a value from: {0}'
    EXPECTED_TOKEN            = 'Expected token {0}'
    EXPECTED_TOKEN_BUT_GOT    = 'Expected token {0} but got {1}'
    EXPECTED_IDENTIFIER       = 'Expected an identifier'
    UNEXPECTED_EOF            = 'Unexpected EOF'

    # resolver
    UNABLE_TO_RESOLVE_TYPE    = 'Unable to resolve type: `{0}`'
    TYPE_MISMATCH             = 'Type mismatch: expected {0}, got {1}'
    UNABLE_TO_INFER_TYPE      = 'Unable to infer the type of `{0}`'
    UNKNOWN_VARIABLE          = 'Unknown variable: `{0}`'
    UNKNOWN_FUNCTION          = 'Unknown function: `{0}`'
    INVALID_ARGUMENT_COUNT    = 'Invalid number of arguments: expected {0}, got {1}'

    # interpreter
    VARIABLE_ALREADY_DECLARED = 'Variable already declared: `{0}`'
    INVALID_BINARY_OPERATION  = 'Invalid binary operation: {0} {1} {2}'
    DIVISION_BY_ZERO          = 'Division by zero'

# --------------------------------------------------------------------
class Error(Exception):
    """
    A fatal diagnostic raised by one of the pipeline stages.

    Carries everything needed to point at the offending source column:
    the kind of error, the values that fill in its message and the
    position at which it was detected.
    """
    stage = 'pipeline'

    def __init__(self, kind: ErrorKind, *details, position: Opt[Position] = None):
        self.kind     = kind
        self.details  = details
        self.position = position if position is not None else Position()
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return self.kind.value.format(*self.details)

    def __repr__(self):
        return f'{type(self).__name__}({self.kind.name}, {self.message!r}, at {self.position})'

class LexError(Error):
    stage = 'lexer'

class ParseError(Error):
    stage = 'parser'

class ResolveError(Error):
    stage = 'resolver'

class InterpreterError(Error):
    stage = 'interpreter'

# ====================================================================
# Rendering

class Reporter:
    """
    render errors against the source they were found in
    """
    def __init__(self, source: str, console: Opt[rich.console.Console] = None):
        self.source  = source
        self.lines   = source.splitlines()
        self.console = console or rich.console.Console(stderr = True)
        self.errors  = []

    def __call__(self, error: Error):
        self.errors.append(error)
        self.console.print(self.render(error), highlight = False)

    def render(self, error: Error) -> rich.text.Text:
        line   = error.position.line
        column = max(error.position.column - 1, 0)
        source = self.lines[line] if line < len(self.lines) else ''

        aout = rich.text.Text()
        aout.append(
            f'{error.stage} error at line {line + 1} column {error.position.column}:',
            style = 'bold red',
        )
        aout.append('\n')
        aout.append(source)
        aout.append('\n')
        aout.append(f'{" " * column}^', style = 'bold')
        aout.append('\n')
        aout.append(f'{" " * column}{error.message}', style = 'bold')
        return aout

    def __bool__(self):
        return len(self.errors) != 0
