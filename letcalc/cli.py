#!/usr/bin/env python
import io
import logging
import sys
import click
from letcalc import Lexer, Session, CalcError
from letcalc.selftest import run_self_test
from letcalc.session import format_result
from letcalc.termui import prints, e_print, h_print
import letcalc.termui as t

PROMPT = "> "
QUIT = "q"

BANNER = """
Keep entering expressions with floating point numbers, +, -, *, /, % and \
parentheses.
Declare variables with 'let name = expression', exit program by typing 'q'.
"""


@click.group(invoke_without_command=True)
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.pass_context
def letcalc(ctx, debug, no_colors):
    """
    Interactive calculator with variables.

    Starts the interactive prompt when no command is given.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors}
    t.colors = not no_colors
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    if ctx.invoked_subcommand is None:
        ctx.invoke(repl)


@letcalc.command()
@click.option('--self-test/--no-self-test', default=True,
              help="Run the self-test before the prompt.")
@click.option('--prompt', default=PROMPT, show_default=True,
              help="Prompt printed before each line.")
@click.pass_context
def repl(ctx, self_test, prompt):
    """
    Reads and evaluates lines until 'q' or end of input.
    """
    debug = ctx.obj['debug']
    if self_test:
        run_self_test()
    prints(BANNER)

    session = Session(debug=debug)
    while True:
        click.echo(prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            # End of input
            prints("")
            break
        line = line.rstrip('\r\n')
        if line == QUIT:
            break
        evaluate(session, line, debug)


@letcalc.command('eval')
@click.option('--input', '-i', 'inputs', multiple=True,
              help="Line to evaluate. May be repeated.")
@click.option('--input-file', '-f', type=click.Path(exists=True),
              help="File whose lines are evaluated.")
@click.pass_context
def eval_lines(ctx, inputs, input_file):
    """
    Evaluates the given lines in one session, one result per line.
    """
    if not (input_file or inputs):
        prints('Expected either input_file or input string.')
        sys.exit(1)
    debug = ctx.obj['debug']

    lines = list(inputs)
    session = Session(debug=debug)
    if input_file:
        session.file_name = input_file
        with io.open(input_file, 'r', encoding='utf-8') as f:
            lines.extend(line.rstrip('\r\n') for line in f)

    failed = 0
    for line in lines:
        if not evaluate(session, line, debug):
            failed += 1
    if failed:
        sys.exit(1)


@letcalc.command()
def selftest():
    """
    Runs the built-in self-test.
    """
    if run_self_test():
        sys.exit(1)


@letcalc.command()
@click.argument('line')
def tokens(line):
    """
    Prints the tokens of the given line.
    """
    try:
        for token in Lexer(line).tokenize():
            h_print(f"{token.position:>4}:", token)
    except CalcError as e:
        e_print(e.report())
        sys.exit(1)


def evaluate(session, line, debug=False):
    """
    Evaluates a line in the session and prints the result or the error.
    Returns True on success.
    """
    try:
        value = session.evaluate(line)
    except CalcError as e:
        e_print(e.report() if debug else str(e))
        return False
    prints(format_result(value))
    return True


if __name__ == '__main__':
    letcalc()
