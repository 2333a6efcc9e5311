from dataclasses import dataclass
from pathlib import Path

import pytest
from omegaconf.errors import ReadonlyConfigError

from arraybag.utils.config import get_config


@dataclass
class DummyConfig:
    initial_capacity: int = 1
    label: str = "bag"


def test_defaults() -> None:
    config = get_config(argv=[], config_cls=DummyConfig)
    assert config.initial_capacity == 1
    assert config.label == "bag"


def test_priority(tmpdir: Path) -> None:
    first_path = Path(tmpdir) / "first.yml"
    first_path.write_text("initial_capacity: 4\nlabel: from_first_file\n")
    second_path = Path(tmpdir) / "second.yml"
    second_path.write_text("initial_capacity: 6\n")

    config = get_config(
        argv=["--config", str(first_path), "--config", str(second_path), "label=from_cli"],
        config_cls=DummyConfig,
    )

    # Later files override earlier ones, and the command line overrides all files.
    assert config.initial_capacity == 6
    assert config.label == "from_cli"


def test_config_is_readonly() -> None:
    config = get_config(argv=["initial_capacity=8"], config_cls=DummyConfig)
    assert config.initial_capacity == 8

    with pytest.raises(ReadonlyConfigError):
        config.initial_capacity = 3
