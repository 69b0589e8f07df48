import picoarg

from picoarg import const


def test_cli_no_args(capsys):
    assert picoarg.main([]) == 0
    assert capsys.readouterr().out == ""


def test_cli_version(capsys):
    assert picoarg.main(["-v"]) == 0
    assert capsys.readouterr().out == f"picoarg v{const.VERSION_STR}\n"


def test_cli_files_in_order(capsys):
    assert picoarg.main(["-fa.txt", "-v", "-fb.txt"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"picoarg v{const.VERSION_STR}",
        "processing 'a.txt'",
        "processing 'b.txt'",
    ]


def test_cli_help(capsys):
    assert picoarg.main(["-h", "-fa.txt"]) == 0
    out = capsys.readouterr().out
    assert "[-h] [-v] [-f<value>]" in out
    assert "process <value> as a file" in out
    assert "processing" not in out


def test_cli_parse_error(capsys):
    assert picoarg.main(["-f"]) == 1
    captured = capsys.readouterr()
    assert "Option '-f' expects a value" in captured.err
    assert captured.out == "Usage: picoarg [-h] [-v] [-f<value>]\n"


def test_cli_bare_operand(capsys):
    assert picoarg.main(["file.txt"]) == 1
    assert "Expected an option, found 'file.txt'" in capsys.readouterr().err
