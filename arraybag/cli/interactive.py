"""Interactive, menu-driven driver for experimenting with two bags of numbers.

Each command is a single character read from its own line; commands that need a value read it from
the following line.

Example invocation:
    python ./arraybag/cli/interactive.py show_menu=False
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, TextIO

from arraybag import Bag
from arraybag.utils.config import get_config as cli_get_config

logger = logging.getLogger(__name__)

MENU = """
\tThe following choices are available with 2 bags:
\t\t A  Use the assignment operator to make b1 equal to b2
\t\t a  Use the assignment operator to make b2 equal to b1
\t\t C  Use the copy constructor to make b1 equal to b2
\t\t c  Use the copy constructor to make b2 equal to b1
\t\t I  Insert an item into b1
\t\t i  Insert an item into b2
\t\t R  Erase all of item from b1
\t\t r  Erase all of item from b2
\t\t X  Erase one of item from b1
\t\t x  Erase one of item from b2
\t\t O  Display both bags
\t\t S  Print the result from the size( ) functions
\t\t Q  Quit this test program
"""

FAREWELL = "Ridicule is the best test of truth."


@dataclass
class InteractiveConfig:
    show_menu: bool = True  # Whether to print the menu before every command


class InteractiveSession:
    """Holds the two bags and dispatches single-character commands to them."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO, show_menu: bool = True):
        self._input = input_stream
        self._output = output_stream
        self._show_menu = show_menu
        self.bags: Dict[str, Bag[float]] = {"b1": Bag(), "b2": Bag()}

    def _print(self, message: str) -> None:
        print(message, file=self._output)

    def _read_line(self) -> Optional[str]:
        line = self._input.readline()
        return line if line else None

    def read_number(self) -> Optional[float]:
        """Read a number for the bag, or return `None` if the input has ended."""
        self._print("\t\tPlease enter a number for the bag: ")
        line = self._read_line()
        if line is None:
            self._print("Incorrect type: expected a number.")
            return None

        try:
            return float(line.strip())
        except ValueError:
            self._print("Incorrect type: expected a number.")
            return 0.0

    def show_bags(self) -> None:
        for name, bag in self.bags.items():
            self._print(f"{name} {bag}")

    def execute(self, command: str) -> bool:
        """Run a single command, returning `False` once the session should stop."""
        # Upper-case commands act on b1, lower-case ones on b2.
        target, source = ("b1", "b2") if command.isupper() else ("b2", "b1")

        if command in "Aa":
            self.bags[target] = self.bags[source].copy()
        elif command in "Cc":
            self.bags[target] = Bag.from_bag(self.bags[source])
        elif command in "IiRrXx":
            value = self.read_number()
            if value is None:
                logger.info(f"Input ended before a number was given; {target} is unchanged")
            elif command in "Ii":
                self.bags[target].insert(value)
            elif command in "Rr":
                num_removed = self.bags[target].erase(value)
                logger.debug(f"Erased {num_removed} items from {target}")
            else:
                self.bags[target].erase_one(value)
        elif command in "Oo":
            self.show_bags()
        elif command in "Ss":
            self._print(
                f"The bags' sizes are {self.bags['b1'].size()} and {self.bags['b2'].size()}"
            )
        elif command in "Qq":
            self._print(FAREWELL)
            return False
        else:
            self._print(f"{command} is invalid. Sorry.")

        return True

    def run(self) -> None:
        self._print("\tI have initialized two empty bags of numbers.")

        while True:
            if self._show_menu:
                self._print(MENU)

            line = self._read_line()
            if line is None:
                logger.info("Reached end of input, quitting")
                break

            # An empty line still counts as a (invalid) command, mirroring a bare key press.
            command = line.rstrip("\r\n")[:1] or "*"
            if not self.execute(command):
                break


def run_from_config(
    config: InteractiveConfig,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
) -> InteractiveSession:
    session = InteractiveSession(
        input_stream=input_stream or sys.stdin,
        output_stream=output_stream or sys.stdout,
        show_menu=config.show_menu,
    )
    session.run()
    return session


def main(argv: Optional[List[str]] = None) -> InteractiveSession:
    config: InteractiveConfig = cli_get_config(argv=argv, config_cls=InteractiveConfig)
    return run_from_config(config)


if __name__ == "__main__":
    main()
