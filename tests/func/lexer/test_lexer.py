import pytest
from letcalc import Lexer, Token, SyntaxError, InternalInconsistency
from letcalc.lexer import (ADD, SUB, MUL, DIV, MOD, LPAREN, RPAREN, EQUALS,
                           LET, NUMBER, NAME, EOF)


def kinds(input_str):
    return [t.kind for t in Lexer(input_str).tokenize()]


def test_single_char_tokens():
    assert kinds("+-*/%()=") == [ADD, SUB, MUL, DIV, MOD, LPAREN, RPAREN,
                                 EQUALS, EOF]


def test_whitespace_is_skipped():
    assert kinds("  1 \t+\t2  ") == [NUMBER, ADD, NUMBER, EOF]
    assert kinds("") == [EOF]
    assert kinds("   ") == [EOF]


@pytest.mark.parametrize("input_str, value", [
    ("2", 2.0),
    ("452", 452.0),
    ("3.14", 3.14),
    ("2.", 2.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("2E-2", 0.02),
    ("1.5e+2", 150.0),
])
def test_numbers(input_str, value):
    token = Lexer(input_str).get()
    assert token.kind == NUMBER
    assert token.value == value
    assert isinstance(token.value, float)


def test_exponent_without_digits_is_not_consumed():
    tokens = Lexer("2e").tokenize()
    assert tokens[0] == Token(NUMBER, 2.0)
    assert tokens[1] == Token(NAME, "e")


def test_number_followed_by_number():
    # Second dot starts a new literal.
    tokens = Lexer("1.5.25").tokenize()
    assert [t.value for t in tokens[:2]] == [1.5, 0.25]


def test_names_and_keyword():
    tokens = Lexer("let x1 = abc2def").tokenize()
    assert [t.kind for t in tokens] == [LET, NAME, EQUALS, NAME, EOF]
    assert tokens[1].value == "x1"
    assert tokens[3].value == "abc2def"


def test_keyword_match_is_exact():
    tokens = Lexer("letter Let le").tokenize()
    assert [t.kind for t in tokens] == [NAME, NAME, NAME, EOF]
    assert [t.value for t in tokens[:3]] == ["letter", "Let", "le"]


def test_name_followed_by_operator():
    assert kinds("x+y") == [NAME, ADD, NAME, EOF]


def test_name_cannot_start_with_digit():
    tokens = Lexer("2x").tokenize()
    assert tokens[0] == Token(NUMBER, 2.0)
    assert tokens[1] == Token(NAME, "x")


def test_eof_is_repeated():
    lexer = Lexer("1")
    assert lexer.get().kind == NUMBER
    assert lexer.get().kind == EOF
    assert lexer.get().kind == EOF


def test_token_positions():
    tokens = Lexer("let  x = 10").tokenize()
    assert [t.position for t in tokens] == [0, 5, 7, 9, 11]
    assert tokens[3].end_position == 11
    assert tokens[0].length == 3


@pytest.mark.parametrize("input_str", ["@", "1 @ 2", ";", "1;", "#", "$x",
                                       "."])
def test_invalid_character(input_str):
    with pytest.raises(SyntaxError) as e:
        Lexer(input_str).tokenize()
    assert str(e.value) == "Unexpected token."


def test_invalid_character_location():
    lexer = Lexer("1 + @")
    lexer.get()
    lexer.get()
    with pytest.raises(SyntaxError) as e:
        lexer.get()
    assert e.value.location.start_position == 4
    assert e.value.character == "@"


def test_semicolon_hint():
    with pytest.raises(SyntaxError) as e:
        Lexer("1;").tokenize()
    assert "terminator" in e.value.hint


def test_putback_returns_token_on_next_get():
    lexer = Lexer("1 + 2")
    first = lexer.get()
    lexer.putback(first)
    assert lexer.get() is first
    assert lexer.get().kind == ADD


def test_putback_when_full():
    lexer = Lexer("1 + 2")
    token = lexer.get()
    lexer.putback(token)
    with pytest.raises(InternalInconsistency):
        lexer.putback(token)


def test_ignore_buffered_token():
    lexer = Lexer("1 ) 2")
    lexer.get()
    rparen = lexer.get()
    lexer.putback(rparen)
    lexer.ignore(RPAREN)
    assert lexer.get() == Token(NUMBER, 2.0)


def test_ignore_scans_input():
    lexer = Lexer("1 + @ ( 2 ) 3")
    lexer.ignore(RPAREN)
    assert lexer.get() == Token(NUMBER, 3.0)


def test_ignore_clears_unmatched_buffer():
    lexer = Lexer("1 2 ) 3")
    one = lexer.get()
    lexer.putback(one)
    lexer.ignore(RPAREN)
    assert lexer.get() == Token(NUMBER, 3.0)


def test_ignore_until_end_of_input():
    lexer = Lexer("1 + 2")
    lexer.ignore(RPAREN)
    assert lexer.get().kind == EOF


def test_token_is_immutable():
    token = Token(NUMBER, 1.0)
    with pytest.raises(AttributeError):
        token.value = 2.0


def test_debug_trace(capsys):
    Lexer("1", debug=True).tokenize()
    out = capsys.readouterr().out
    assert "Token:" in out
    assert "<NUMBER(1.0)>" in out
