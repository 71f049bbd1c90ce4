import io

from aocsolutions.cli import PROMPT, main

SAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr()


def test_sample_total(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, SAMPLE)
    assert code == 0
    assert captured.out.splitlines() == [PROMPT, "total difference: 11"]


def test_stops_at_empty_line(monkeypatch, capsys):
    _, expected = _run(monkeypatch, capsys, SAMPLE)
    code, captured = _run(monkeypatch, capsys, SAMPLE + "\n100 1\n")
    assert code == 0
    assert captured.out == expected.out


def test_empty_input(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "")
    assert code == 0
    assert captured.out.splitlines()[-1] == "total difference: 0"


def test_invalid_line_reports_error(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "1 x\n")
    assert code == 1
    assert "error" in captured.err
    assert "total difference" not in captured.out