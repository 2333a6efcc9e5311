import sys
from typing import Any, Callable, Dict, List, Optional

from arraybag.cli import exam, interactive

SUPPORTED_COMMANDS: Dict[str, Callable[[Optional[List[str]]], Any]] = {
    "exam": exam.main,
    "interactive": interactive.main,
}


def main(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    supported_command_names = ", ".join(SUPPORTED_COMMANDS.keys())
    if not argv:
        raise ValueError(f"Please choose a command from: {supported_command_names}")

    command, *command_argv = argv
    if command not in SUPPORTED_COMMANDS:
        raise ValueError(f"Command {command} not supported; choose from: {supported_command_names}")

    # The chosen command parses the remaining arguments itself.
    SUPPORTED_COMMANDS[command](command_argv)


if __name__ == "__main__":
    main()
