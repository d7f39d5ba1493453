from letcalc.termui import s_attention as _a


class Location:
    """
    Represents a location (point or span) of a token in the evaluated input.

    Args:
    input_str(str): The input line being evaluated.
    start_position(int): The position where the span starts.
    end_position(int): The end of the span if applicable.
    file_name(str): The name (path) of the file the line comes from, if any.

    Attributes:
    line, column (int): The line/column calculated from the start position
        and input_str. Lines are counted from 1 and columns from 0.
    """

    __slots__ = ['start_position', 'end_position', 'input_str', 'file_name',
                 '_line', '_column']

    def __init__(self, input_str=None, start_position=None, end_position=None,
                 file_name=None):
        self.input_str = input_str
        self.start_position = start_position
        self.end_position = end_position
        self.file_name = file_name

        # Evaluated lazily, only error reporting needs them.
        self._line = None
        self._column = None

    @classmethod
    def of_token(cls, lexer, token):
        """
        Creates the location spanning the given token in the lexer input.
        """
        return cls(lexer.input_str, token.position, token.end_position,
                   lexer.file_name)

    @property
    def line(self):
        if self._line is None:
            self.evaluate_line_col()
        return self._line

    @property
    def column(self):
        if self._column is None:
            self.evaluate_line_col()
        return self._column

    def evaluate_line_col(self):
        self._line, self._column = pos_to_line_col(
            self.input_str, self.start_position)

    def is_eof(self):
        return self.input_str is not None \
            and self.start_position is not None \
            and self.start_position >= len(self.input_str)

    def __str__(self):
        line, column = self.line, self.column
        if line is not None:
            return ('{}{}:{}:"{}"'
                    .format(f"{self.file_name}:"
                            if self.file_name else "",
                            line, column,
                            position_context(self.input_str,
                                             self.start_position)))
        if self.file_name:
            return _a(self.file_name)
        return "<Unknown location>"

    def __repr__(self):
        return str(self)


def position_context(input_str, position):
    """
    Returns position context string.
    """
    start = max(position-10, 0)
    c = str(input_str[start:position]) + _a(" **> ") \
        + str(input_str[position:position+10])
    return replace_newlines(c)


def replace_newlines(in_str):
    return in_str.replace("\n", "\\n")


def pos_to_line_col(input_str, position):
    """
    Returns position in the (line,column) form.
    """

    if position is None or input_str is None:
        return None, None

    line = input_str[: position].count('\n') + 1
    line_start_pos = input_str.rfind('\n', 0, position)
    column = position - line_start_pos - 1

    return line, column


def format_number(value):
    """
    Renders a float the way the calculator displays results: shortest of
    fixed/exponent notation with six significant digits.
    """
    return '{:g}'.format(value)
