import logging

from letcalc.calculator import calculation
from letcalc.common import format_number
from letcalc.exceptions import CalcError
from letcalc.lexer import Lexer
from letcalc.termui import a_print
from letcalc.variables import VariableTable

logger = logging.getLogger(__name__)

RESULT_PREFIX = "= "


def format_result(value):
    return RESULT_PREFIX + format_number(value)


class Session:
    """
    A calculator session: a variable table shared by every evaluated line.

    Args:
        table(VariableTable): Table to start from. A new empty table is
            created if not given.
        file_name(str): Source name used in error locations.
        debug(bool): Trace tokens and statement values.
    """
    def __init__(self, table=None, file_name=None, debug=False):
        self.table = VariableTable() if table is None else table
        self.file_name = file_name
        self.debug = debug

    def evaluate(self, line):
        """
        Evaluates all statements of the given line.

        Returns the value of the last statement. Raises CalcError on the
        first failing statement, bindings made by earlier statements of the
        line are kept.
        """
        if self.debug:
            a_print("*** EVALUATING", repr(line), new_line=True)
        lexer = Lexer(line, file_name=self.file_name, debug=self.debug)
        return calculation(lexer, self.table)

    def evaluate_line(self, line):
        """
        Evaluates the line and returns a tuple (ok, text) where text is the
        formatted result or the error message.
        """
        try:
            value = self.evaluate(line)
        except CalcError as e:
            logger.debug("Evaluation of %r failed: %s", line, e)
            return False, str(e)
        return True, format_result(value)
