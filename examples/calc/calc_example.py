from letcalc import Session

input_lines = [
    "let a = 5",
    "let b = 10",
    "a + 56.4 / 3 * 5 - b + 8 * 3",
    "let c = a % 3 (c + 1) * -2",
    "b / (a - 5)",
]


def main(debug=False):
    session = Session(debug=debug)

    results = []
    for line in input_lines:
        ok, text = session.evaluate_line(line)
        results.append(ok)
        print("Input:", line)
        print("Result" if ok else "Error", text)

    assert results == [True, True, True, True, False]
    assert session.evaluate("a + 56.4 / 3 * 5 - b + 8 * 3") \
        == 5. + 56.4 / 3 * 5 - 10 + 8 * 3
    assert session.table.get("c") == 2.0


if __name__ == "__main__":
    main(debug=True)
