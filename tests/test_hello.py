from rpncalc.colors import Color
from rpncalc.hello import main


def test_main_prints_green_greeting(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == Color.GREEN.value + "Hello world!\n" + Color.RESET.value


def test_main_without_arguments(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    assert "Hello world!" in captured.out
    assert captured.out.endswith(Color.RESET.value)
    assert captured.err == ""