import io
from typing import List, Tuple

import pytest

from arraybag.cli.interactive import (
    FAREWELL,
    InteractiveConfig,
    InteractiveSession,
    run_from_config,
)


def run_session(lines: List[str]) -> Tuple[InteractiveSession, str]:
    output = io.StringIO()
    session = run_from_config(
        InteractiveConfig(show_menu=False),
        input_stream=io.StringIO("".join(f"{line}\n" for line in lines)),
        output_stream=output,
    )
    return session, output.getvalue()


def test_insert_and_sizes() -> None:
    session, output = run_session(["I", "1.5", "I", "2", "i", "3", "S", "Q"])

    assert session.bags["b1"].get_data() == [1.5, 2.0]
    assert session.bags["b2"].get_data() == [3.0]
    assert "The bags' sizes are 2 and 1" in output
    assert output.rstrip().endswith(FAREWELL)


def test_erase_commands() -> None:
    session, _ = run_session(
        ["I", "1", "I", "1", "I", "2", "X", "1", "i", "4", "i", "4", "r", "4", "q"]
    )

    assert session.bags["b1"].get_data() == [1.0, 2.0]
    assert session.bags["b2"].size() == 0


@pytest.mark.parametrize("command", ["A", "C"])
def test_copy_into_b1(command: str) -> None:
    session, _ = run_session(["i", "7", command, "i", "8", "Q"])

    # b1 received a copy of b2, which has since diverged.
    assert session.bags["b1"].get_data() == [7.0]
    assert session.bags["b2"].get_data() == [7.0, 8.0]


@pytest.mark.parametrize("command", ["a", "c"])
def test_copy_into_b2(command: str) -> None:
    session, _ = run_session(["I", "5", command, "Q"])

    assert session.bags["b2"] == session.bags["b1"]
    assert session.bags["b2"] is not session.bags["b1"]


def test_display_bags() -> None:
    _, output = run_session(["I", "1", "O", "Q"])
    assert "b1 Bag\ndata: 1.0\ncapacity: 1\nused: 1" in output
    assert "b2 Bag\ndata: \ncapacity: 1\nused: 0" in output


def test_invalid_input() -> None:
    session, output = run_session(["Z", "", "I", "abc", "Q"])

    assert "Z is invalid. Sorry." in output
    assert "* is invalid. Sorry." in output
    assert "Incorrect type: expected a number." in output
    assert session.bags["b1"].get_data() == [0.0]


def test_end_of_input_stops_session() -> None:
    session, output = run_session(["I", "4"])
    assert session.bags["b1"].get_data() == [4.0]
    assert FAREWELL not in output


def test_menu_is_shown() -> None:
    output = io.StringIO()
    InteractiveSession(io.StringIO("q\n"), output).run()
    assert "Q  Quit this test program" in output.getvalue()


@pytest.mark.parametrize("command", ["I", "R", "X"])
def test_end_of_input_while_reading_number(command: str) -> None:
    session, output = run_session(["I", "0", command])

    # No number arrived, so the bag is left as it was.
    assert session.bags["b1"].get_data() == [0.0]
    assert "Incorrect type: expected a number." in output
