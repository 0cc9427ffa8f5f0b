import pytest

import declargs.__main__ as cli

DECLARATIONS = """
arguments:
  - names: [i, iterations]
    type: int
    default: 10
  - names: [v]
    kind: flag
"""


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def declarations(tmp_path):
    path = tmp_path / "args.yaml"
    path.write_text(DECLARATIONS)
    return str(path)


def test_good_command_line(declarations, capsys):
    assert cli.main([declarations, "-i", "3", "input.txt"]) == 0
    out = capsys.readouterr().out
    assert "input.txt" in out


def test_unrecognized_option_fails(declarations, capsys):
    assert cli.main([declarations, "--bogus"]) == 1
    assert "--bogus" in capsys.readouterr().out


def test_parse_error_fails(declarations):
    assert cli.main([declarations, "-i", "many"]) == 1


def test_usage(declarations, capsys):
    assert cli.main(["--usage", declarations]) == 0
    out = capsys.readouterr().out
    assert "--iterations -i <arg>" in out


def test_debug_dump(declarations, capsys):
    assert cli.main(["--debug", declarations, "-i", "4"]) == 0
    assert "Value Arg (-i):" in capsys.readouterr().out


def test_script_tokens(declarations, tmp_path):
    script = tmp_path / "args.txt"
    script.write_text("-i 4 # four\n")
    assert cli.main([declarations, ":", str(script)]) == 0


def test_missing_script(declarations, tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert cli.main([declarations, ":", missing]) == 1
    assert "unrecognized" in capsys.readouterr().out


def test_missing_declarations(tmp_path):
    assert cli.main([str(tmp_path / "nothing.yaml")]) == 2
