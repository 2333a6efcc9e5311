import argparse
import sys
from typing import Callable, List, Optional, TypeVar, cast

from omegaconf import OmegaConf

R = TypeVar("R")


def get_config(argv: Optional[List[str]], config_cls: Callable[..., R]) -> R:
    """
    Build a read-only `OmegaConf` config for one of the command line tools.

    Sources are merged in increasing order of priority: the fields of `config_cls`, any YAML files
    passed with `--config` (in the order given), and finally `key=value` pairs from the command line.

    Args:
        argv: Command line arguments to parse (without the program and command name). If `None`,
            they are taken from `sys.argv`.
        config_cls: Dataclass describing which fields the config has. Pass the class itself, not an
            instance.

    Returns:
        Merged config object, which passes as an instance of `config_cls`.
    """

    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(allow_abbrev=False)  # prevent prefix matching issues
    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=list(),
        help="Path to a yaml config file. Can be repeated; later files take priority.",
    )
    args, overrides = parser.parse_known_args(argv)

    config = OmegaConf.merge(
        OmegaConf.structured(config_cls),
        *[OmegaConf.load(path) for path in args.config],
        OmegaConf.from_cli(overrides),
    )
    OmegaConf.set_readonly(config, True)
    return cast(R, config)
