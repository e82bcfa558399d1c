def test_encode_prints_report(capsys, m):
    assert m.main(["encode", "aabbc", "-n", "2"]) == 0
    out = capsys.readouterr().out
    assert "Plain text: aabbc" in out
    assert "Frequencies:" in out and "a: 2" in out and "c: 1" in out
    assert "Codes:" in out
    assert "Encoded text: " in out
    assert "saved:" in out


def test_encode_single_symbol_ternary(capsys, m):
    assert m.main(["e", "aaaa", "-n", "3", "--no-frequencies"]) == 0
    out = capsys.readouterr().out
    assert "Frequencies:" not in out
    assert "a: 0" in out
    assert "Encoded text: 0000" in out


def test_encode_hides_codes(capsys, m):
    assert m.main(["encode", "abc", "-C"]) == 0
    assert "Codes:" not in capsys.readouterr().out


def test_encode_from_file(text_file, capsys, m):
    assert m.main(["encode", str(text_file), "-n", "4"]) == 0
    out = capsys.readouterr().out
    assert "Plain text: mississippi river" in out
    assert "s: 4" in out


def test_roundtrip_from_prompt(monkeypatch, capsys, m):
    monkeypatch.setattr("builtins.input", lambda prompt: "abracadabra")
    assert m.main(["roundtrip", "-n", "5"]) == 0
    assert "OK" in capsys.readouterr().out


def test_invalid_arity_reports_error(capsys, m):
    assert m.main(["encode", "hello", "-n", "1"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("[!] Invalid arity 1")


def test_empty_input_reports_error(monkeypatch, capsys, m):
    monkeypatch.setattr("builtins.input", lambda prompt: "")
    assert m.main(["r"]) == 1
    assert capsys.readouterr().out.startswith("[!] ")


def test_closed_console_reports_error(monkeypatch, capsys, m):
    def _eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert m.main(["e"]) == 1
    assert "[!] No input given" in capsys.readouterr().out


def test_roundtrip_wide_arity(capsys, m):
    assert m.main(["r", "the quick brown fox", "-n", "40"]) == 0
    assert "40-ary" in capsys.readouterr().out
