import io

import pandas as pd

import main


def run_cli(argv):
    return main.main(main.build_parser().parse_args(argv))


def test_evaluate_and_print_success():
    out = io.StringIO()
    assert main.evaluate_and_print("1 + 3 - (4 / 5)", out=out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "RPN Notation: 1, 3, +, 4, 5, /, -"
    assert lines[1].startswith("Result: 3.2")


def test_evaluate_and_print_conversion_error():
    out = io.StringIO()
    assert not main.evaluate_and_print("3 + x", out=out)
    assert out.getvalue() == "Invalid token: x\n"


def test_evaluate_and_print_evaluation_error():
    out = io.StringIO()
    assert not main.evaluate_and_print("+", out=out)
    assert out.getvalue().splitlines() == ["RPN Notation: +", "Error: not enough input"]


def test_single_expression(capsys):
    assert run_cli(["--expression", "2 * (3 + 4)"]) == 0
    assert "Result: 14.0" in capsys.readouterr().out


def test_single_expression_failure(capsys):
    assert run_cli(["--expression", "3 + x"]) == 1


def test_strict_flag(capsys):
    assert run_cli(["--expression", "1 2", "--strict"]) == 1
    assert "Error: too much input" in capsys.readouterr().out


def test_repl_loop(monkeypatch, capsys):
    lines = iter(["1.5 + 2.25", "3 + x", "quit", "1 + 1"])
    monkeypatch.setattr('builtins.input', lambda prompt='': next(lines))
    assert run_cli([]) == 0
    out = capsys.readouterr().out
    assert "Result: 3.75" in out
    assert "Invalid token: x" in out
    # quit 之后不再读取
    assert "Result: 2.0" not in out


def test_repl_exits_on_eof(monkeypatch, capsys):
    def fake_input(prompt=''):
        raise EOFError

    monkeypatch.setattr('builtins.input', fake_input)
    assert run_cli([]) == 0


def test_batch_mode_writes_csv(tmp_path):
    input_path = tmp_path / "expressions.txt"
    input_path.write_text("1 + 2\n3 + x\n", encoding='utf-8')
    output_path = tmp_path / "results.csv"

    assert run_cli(["--input_path", str(input_path), "--output_path", str(output_path)]) == 0

    df = pd.read_csv(output_path)
    assert list(df['expression']) == ["1 + 2", "3 + x"]
    assert df['result'].iloc[0] == 3.0
    assert pd.isna(df['result'].iloc[1])
    assert df['error'].iloc[1] == "Invalid token: x"


def test_batch_mode_prints_table(tmp_path, capsys):
    input_path = tmp_path / "expressions.csv"
    input_path.write_text("formula\n10 - 2 - 3\n", encoding='utf-8')

    assert run_cli(["--input_path", str(input_path), "--column", "formula"]) == 0
    out = capsys.readouterr().out
    assert "10 - 2 - 3" in out
    assert "5.0" in out
