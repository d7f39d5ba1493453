from typing import Optional

from letcalc.common import Location
from letcalc.termui import s_attention as err
from letcalc.termui import s_header as _


class CalcError(Exception):
    """
    Base class of all errors raised while evaluating a line.

    Every error is fatal to the statement being evaluated and to the rest of
    its line, never to the session.
    """
    message = None

    def __init__(self, location: Optional[Location] = None,
                 message: Optional[str] = None,
                 error_type: str = "error",
                 hint: Optional[str] = None):

        self.location = location
        self.message = message if message is not None else self.message
        self.hint = hint
        self.error_type = error_type

        context = get_context(location)
        hint = _(f"  hint: {hint}") if hint else None

        self.full_message = "\n".join(
            filter(None, [f"{err(error_type)}: {self.message}", context,
                          hint]))
        super().__init__(self.message)

    def __str__(self):
        return self.message

    def report(self):
        """
        Returns the message prefixed with the location, followed by the
        offending line with a marker under the error position.
        """
        if self.location is None:
            return self.full_message
        return f"{self.location}: {self.full_message}"


def get_context(location: Optional[Location]) -> Optional[str]:
    if location is None or location.input_str is None \
            or location.start_position is None:
        return None
    lines = location.input_str.splitlines()
    line = lines[location.line - 1] if location.line <= len(lines) else ""
    width = 1
    if location.end_position is not None:
        width = max(location.end_position - location.start_position, 1)
    return _("    | ") + f"{line}\n" \
        + _("    | ") + " " * location.column + err("^" * width)


class SyntaxError(CalcError):
    message = "Unexpected token."

    def __init__(self, location, character=None):
        self.character = character
        hint = "';' is not a statement terminator, separate statements " \
               "with spaces" if character == ';' else None
        super().__init__(location, error_type="syntax error", hint=hint)


class ExpectedPrimary(CalcError):
    message = "Expected a primary"

    def __init__(self, location, token=None):
        self.token = token
        super().__init__(location, error_type="syntax error")


class MissingRParen(CalcError):
    message = "Missing a right parenthesis."

    def __init__(self, location):
        super().__init__(location, error_type="syntax error")


class ExpectedName(CalcError):
    message = "Expected a variable name after 'let' keyword."

    def __init__(self, location):
        super().__init__(location, error_type="syntax error")


class MissingEquals(CalcError):
    def __init__(self, location, name):
        self.name = name
        super().__init__(location,
                         f"Missing '=' in a declaration of '{name}'",
                         error_type="syntax error")


class UndefinedVariable(CalcError):
    def __init__(self, name, location=None):
        self.name = name
        super().__init__(location, f"Undefined variable '{name}'",
                         hint=f"declare it first with 'let {name} = ...'")


class DivisionByZero(CalcError):
    message = "Division by zero"

    def __init__(self, location=None):
        super().__init__(location)


class InternalInconsistency(CalcError):
    """
    Raised on a broken parser invariant. Never caused by user input.
    """
    message = "Called putback with the buffer already full."

    def __init__(self, location=None, message=None):
        super().__init__(location, message, error_type="internal error")


class NestingTooDeep(CalcError):
    message = "Expression nested too deeply."

    def __init__(self, location=None):
        super().__init__(location,
                         hint="reduce the nesting of parentheses and "
                              "unary signs")
