import io

from ghostcomm.cli import main


def _run(monkeypatch, capsys, data):
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    code = main()
    return code, capsys.readouterr().out


def test_encode_option(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\nSOS\n3\n")
    assert code == 0
    assert "Encoded Morse: ... --- ... \n" in out


def test_decode_option(monkeypatch, capsys):
    morse = ".... . .-.. .-.. --- / .-- --- .-. .-.. -.. "
    code, out = _run(monkeypatch, capsys, f"2\n{morse}\n3\n")
    assert code == 0
    assert "Decoded Morse: HELLO WORLD\n" in out


def test_exit_says_salute(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "3\n")
    assert code == 0
    assert out.endswith("\nSalute!\n")
    assert out.count("=== Ghost Comm ===") == 1


def test_invalid_option(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "7\n3\n")
    assert "Invalid option.\n" in out
    assert out.count("=== Ghost Comm ===") == 2


def test_end_of_input_stops_loop(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 0
    assert "Salute!" not in out
    assert out.count("=== Ghost Comm ===") == 1


def test_menu_repeats_after_each_action(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nSOS\n2\n... --- ...\n3\n")
    assert out.count("Enter your option: ") == 3
    assert "Decoded Morse: SOS\n" in out