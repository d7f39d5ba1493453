import click

colors = False

S_ATTENTION = {'fg': 'red', 'bold': True}
S_HEADER = {'fg': 'green'}


def prints(message, err=False):
    click.echo(message, err=err)


def style_message(message, style):
    if colors:
        return click.style(message, **style)
    else:
        return message


def s_header(message):
    return style_message(message, S_HEADER)


def s_attention(message):
    return style_message(message, S_ATTENTION)


def style(header, content=None, level=0, new_line=False,
          header_style=S_HEADER):
    """
    Returns a trace line: an optional blank line, `level` tabs, the styled
    header and the content if given.
    """
    line = ("\n" if new_line else "") + "\t" * level \
        + style_message(str(header), header_style)
    if content is not None:
        line += f" {content}"
    return line


def h_print(header, content=None, level=0, new_line=False):
    prints(style(header, content, level, new_line, S_HEADER))


def a_print(header, content=None, level=0, new_line=False):
    prints(style(header, content, level, new_line, S_ATTENTION))


def e_print(message):
    """
    Prints a diagnostic message to the standard error stream.
    """
    prints(s_attention(message), err=True)
