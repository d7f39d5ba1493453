"""
Tokenizer for calculator lines.

The lexer reads one line of input and produces tokens on demand. A single
slot push-back buffer gives the parser one token of lookahead.
"""
import re

from letcalc.common import Location, pos_to_line_col
from letcalc.exceptions import SyntaxError, InternalInconsistency
from letcalc.termui import h_print

# Token kinds
ADD = 'ADD'
SUB = 'SUB'
MUL = 'MUL'
DIV = 'DIV'
MOD = 'MOD'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
EQUALS = 'EQUALS'
LET = 'LET'
NUMBER = 'NUMBER'
NAME = 'NAME'
EOF = 'EOF'
INVALID = 'INVALID'

SINGLE_CHAR_TOKENS = {
    '+': ADD,
    '-': SUB,
    '*': MUL,
    '/': DIV,
    '%': MOD,
    '(': LPAREN,
    ')': RPAREN,
    '=': EQUALS,
}

KEYWORDS = {
    'let': LET,
}

# Characters skipped by C++ formatted input.
WS = ' \t\n\r\f\v'

NUMBER_RE = re.compile(r'(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?', re.ASCII)
NAME_RE = re.compile(r'[A-Za-z][A-Za-z0-9]*')


class Token:
    """
    Token or lexeme matched from the input.

    `value` is a float for NUMBER tokens, the identifier text for NAME
    tokens and None for all other kinds.
    """
    __slots__ = ['kind', 'value', 'position', 'length']

    def __init__(self, kind, value=None, position=None, length=0):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'position', position)
        object.__setattr__(self, 'length', length)

    def __setattr__(self, name, value):
        raise AttributeError(f"Token is immutable, can't set '{name}'")

    def __repr__(self):
        if self.value is None:
            return "<{}>".format(self.kind)
        return "<{}({})>".format(self.kind, self.value)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    @property
    def end_position(self):
        if self.position is None:
            return None
        return self.position + self.length


class Lexer:
    """
    Turns a line of text into tokens on demand.

    Args:
        input_str(str): The line to tokenize.
        file_name(str): File name if applicable. Used in error reporting.
        ws(str): Characters skipped in front of each token.
        debug(bool): Trace every scanned token.
    """
    def __init__(self, input_str, file_name=None, ws=WS, debug=False):
        self.input_str = input_str
        self.file_name = file_name
        self.ws = ws
        self.debug = debug
        self.position = 0
        self.buffer = None

    def get(self):
        """
        Returns the next token, taking the pushed back token first if there
        is one.
        """
        if self.buffer is not None:
            token, self.buffer = self.buffer, None
            return token

        token = self._next_token()
        if token.kind == INVALID:
            raise SyntaxError(Location.of_token(self, token),
                              character=self.input_str[token.position])
        return token

    def putback(self, token):
        """
        Returns the given token to the buffer so it is read by the next call
        to `get`.
        """
        if self.buffer is not None:
            raise InternalInconsistency(Location.of_token(self, token))
        self.buffer = token

    def ignore(self, kind):
        """
        Reads and discards tokens until a token of the given kind is read or
        the end of input is reached.
        """
        if self.buffer is not None:
            buffered, self.buffer = self.buffer, None
            if buffered.kind == kind:
                return

        while True:
            token = self._next_token()
            if token.kind in (kind, EOF):
                return

    def tokenize(self):
        """
        Returns all tokens of the input up to and including EOF.
        """
        tokens = []
        while True:
            token = self.get()
            tokens.append(token)
            if token.kind == EOF:
                return tokens

    def _skipws(self):
        input_str = self.input_str
        in_len = len(input_str)
        while self.position < in_len and input_str[self.position] in self.ws:
            self.position += 1

    def _next_token(self):
        self._skipws()
        token = self._scan()
        self.position += token.length

        if self.debug:
            h_print("Token:", token, level=1)
            h_print("New position:",
                    pos_to_line_col(self.input_str, self.position), level=1)
        return token

    def _scan(self):
        input_str = self.input_str
        position = self.position

        if position >= len(input_str):
            return Token(EOF, position=position)

        ch = input_str[position]

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            return Token(kind, position=position, length=1)

        m = NUMBER_RE.match(input_str, position)
        if m:
            return Token(NUMBER, float(m.group()), position, len(m.group()))

        m = NAME_RE.match(input_str, position)
        if m:
            text = m.group()
            kind = KEYWORDS.get(text)
            if kind is not None:
                return Token(kind, position=position, length=len(text))
            return Token(NAME, text, position, len(text))

        return Token(INVALID, position=position, length=1)
