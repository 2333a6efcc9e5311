import io
from typing import List

import pytest

from arraybag.cli.main import main


@pytest.mark.parametrize("argv", [[], ["not-a-real-command"]])
def test_cli_invalid(argv: List[str]) -> None:
    with pytest.raises(ValueError):
        main(argv)


def test_cli_exam(capsys: pytest.CaptureFixture) -> None:
    main(["exam", "num_random_items=20"])
    assert "100 points out of the 100 points" in capsys.readouterr().out


def test_cli_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("I\n2.5\nS\nQ\n"))
    main(["interactive", "show_menu=False"])
    assert "The bags' sizes are 1 and 0" in capsys.readouterr().out
