from letcalc import Lexer
from letcalc.lexer import LET, NAME, EQUALS, NUMBER, MUL, EOF


def main(debug=False):
    lexer = Lexer("let area = 3.14159 * r2", debug=debug)

    tokens = lexer.tokenize()
    for token in tokens:
        print(token)

    assert [t.kind for t in tokens] == [LET, NAME, EQUALS, NUMBER, MUL,
                                        NAME, EOF]
    assert tokens[1].value == "area"
    assert tokens[3].value == 3.14159


if __name__ == "__main__":
    main(debug=True)
