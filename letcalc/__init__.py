# -*- coding: utf-8 -*-
# flake8: NOQA
from letcalc.lexer import Lexer, Token
from letcalc.calculator import calculation, statement, declaration, \
    expression, term, primary
from letcalc.variables import Variable, VariableTable
from letcalc.session import Session
from letcalc.common import Location
from letcalc.exceptions import CalcError, SyntaxError, ExpectedPrimary, \
    MissingRParen, UndefinedVariable, DivisionByZero, ExpectedName, \
    MissingEquals, InternalInconsistency, NestingTooDeep

from .version import __version__
