from filter_content import main


def test_main_prints_short_then_full(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("5\n3.5\nhello\n-2\n", encoding="utf-8")
    out = tmp_path / "out"

    code = main(["-o", str(out), "-p", "r-", "-a", "-s", "-f", str(src)])

    assert code == 0
    stdout = capsys.readouterr().out
    assert stdout.index("Integers: 2") < stdout.index("Float average:          3.5")
    assert "Strings:  1" in stdout
    assert (out / "r-integers.txt").read_text(encoding="utf-8").splitlines() == ["5", "-2"]


def test_main_without_stats_flags_prints_nothing(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("abc\n", encoding="utf-8")

    assert main(["-o", str(tmp_path / "out"), str(src)]) == 0
    assert capsys.readouterr().out == ""


def test_main_reports_parse_error_and_does_nothing(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("1\n", encoding="utf-8")
    out = tmp_path / "out"

    code = main([str(src), "-o", str(out), "--bogus"])

    assert code == 2
    captured = capsys.readouterr()
    assert "Failed to parse command line arguments" in captured.err
    assert captured.out == ""
    assert not out.exists()


def test_main_continues_after_missing_file(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("1.25\n", encoding="utf-8")

    code = main(["-o", str(tmp_path / "out"), "-s", str(tmp_path / "missing.txt"), str(src)])

    assert code == 0
    assert "Floats:   1" in capsys.readouterr().out


def test_main_writes_log_file_when_verbose(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("x\n", encoding="utf-8")
    log_file = tmp_path / "logs" / "filter.log"

    assert main(["-v", "--log-file", str(log_file), "-o", str(tmp_path / "out"), str(src)]) == 0

    text = log_file.read_text(encoding="utf-8")
    assert "FILTER SUMMARY" in text
    assert "[FILE] Done:" in text
