"""
Recursive descent evaluator for calculator lines.

Each grammar level consumes exactly its own tokens and returns the value of
what it parsed. The token that ends a level is pushed back to the lexer.

    calculation := statement* EOF
    statement   := declaration | expression
    declaration := 'let' NAME '=' expression
    expression  := term (('+' | '-') term)*
    term        := primary (('*' | '/' | '%') primary)*
    primary     := '+' primary | '-' primary | '(' expression ')'
                 | NUMBER | NAME

`expression` and `term` are loops instead of left recursion so long operator
chains don't grow the call stack.
"""
import math
from letcalc.common import Location
from letcalc.exceptions import (ExpectedPrimary, MissingRParen,
                                DivisionByZero, ExpectedName, MissingEquals,
                                UndefinedVariable, NestingTooDeep)
from letcalc.lexer import (ADD, SUB, MUL, DIV, MOD, LPAREN, RPAREN, EQUALS,
                           LET, NUMBER, NAME, EOF)
from letcalc.termui import h_print


def primary(lexer, table):
    token = lexer.get()
    kind = token.kind

    if kind == ADD:
        return primary(lexer, table)

    if kind == SUB:
        return -primary(lexer, table)

    if kind == LPAREN:
        value = expression(lexer, table)
        token = lexer.get()
        if token.kind != RPAREN:
            lexer.putback(token)
            raise MissingRParen(Location.of_token(lexer, token))
        return value

    if kind == NUMBER:
        return token.value

    if kind == NAME:
        if token.value not in table:
            raise UndefinedVariable(token.value,
                                    Location.of_token(lexer, token))
        return table.get(token.value)

    lexer.putback(token)
    raise ExpectedPrimary(Location.of_token(lexer, token), token)


def _divisor(lexer, table):
    token = lexer.get()
    lexer.putback(token)
    right = primary(lexer, table)
    if right == 0.0:
        raise DivisionByZero(Location.of_token(lexer, token))
    return right


def _fmod(left, right):
    # IEEE remainder of an infinite dividend is NaN, math.fmod raises.
    if math.isinf(left):
        return math.nan
    return math.fmod(left, right)


def term(lexer, table):
    left = primary(lexer, table)
    while True:
        token = lexer.get()
        kind = token.kind
        if kind == MUL:
            left *= primary(lexer, table)
        elif kind == DIV:
            left /= _divisor(lexer, table)
        elif kind == MOD:
            left = _fmod(left, _divisor(lexer, table))
        else:
            lexer.putback(token)
            return left


def expression(lexer, table):
    left = term(lexer, table)
    while True:
        token = lexer.get()
        kind = token.kind
        if kind == ADD:
            left += term(lexer, table)
        elif kind == SUB:
            left -= term(lexer, table)
        else:
            lexer.putback(token)
            return left


def declaration(lexer, table):
    """
    Evaluates `NAME '=' expression` after the 'let' keyword has been read and
    binds the result in the table.
    """
    token = lexer.get()
    if token.kind != NAME:
        lexer.putback(token)
        raise ExpectedName(Location.of_token(lexer, token))
    name = token.value

    token = lexer.get()
    if token.kind != EQUALS:
        lexer.putback(token)
        raise MissingEquals(Location.of_token(lexer, token), name)

    value = expression(lexer, table)
    return table.define(name, value)


def statement(lexer, table):
    token = lexer.get()
    if token.kind == LET:
        return declaration(lexer, table)
    lexer.putback(token)
    return expression(lexer, table)


def calculation(lexer, table):
    """
    Evaluates statements until the end of input.

    Returns the value of the last statement, or 0.0 for an empty line.
    Statements evaluated before a failing one keep their effect on the
    table. Nesting deeper than the interpreter stack allows is reported as
    NestingTooDeep.
    """
    result = 0.0
    while True:
        token = lexer.get()
        if token.kind == EOF:
            return result
        lexer.putback(token)
        try:
            result = statement(lexer, table)
        except RecursionError as e:
            raise NestingTooDeep(
                Location(lexer.input_str, lexer.position,
                         file_name=lexer.file_name)) from e
        if lexer.debug:
            h_print("Statement value:", repr(result))
