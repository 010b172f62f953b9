# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from family_tree import config
from family_tree.config import FTConfig
from family_tree.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    yield
    configure_logging(FTConfig({}))


def test_checkout_config_file_loads(monkeypatch) -> None:
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)

    cfg = config.load_config()

    assert cfg.data_dir == "data"
    assert cfg.log_file == Path("logs") / "family_tree.log"
    assert cfg.debug is False


def test_get_config_is_cached() -> None:
    assert config.get_config() is config.get_config()


def test_missing_default_config_falls_back_to_defaults(tmp_path: Path, monkeypatch) -> None:
    # An installed package has no config/ directory next to it
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config" / "family_tree.yml")

    cfg = config.load_config()

    assert cfg.data_dir == "data"
    assert cfg.log_file is None
    assert cfg.debug is False


def test_env_var_overrides_config_path(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("paths:\n  data_dir: trees\ndebug: true\n", encoding="utf-8")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))

    cfg = config.load_config()

    assert cfg.data_dir == "trees"
    assert cfg.debug is True


def test_env_var_naming_missing_file_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))

    with pytest.raises(FileNotFoundError):
        config.load_config()


def test_empty_config_uses_defaults(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))

    cfg = config.load_config()

    assert cfg.data_dir == "data"
    assert cfg.paths == {}
    assert cfg.log_file is None


def test_module_loggers_hang_off_the_base_logger() -> None:
    log = get_logger("family_tree.builder.tree_builder")
    base = logging.getLogger("family_tree")

    assert log.parent is base
    assert log.propagate is True
    assert base.propagate is False
    assert base.handlers
    assert get_logger("stats").name == "family_tree.stats"


def test_configure_logging_writes_file_relative_to_cwd(
    tmp_path: Path, monkeypatch, restore_logging
) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = FTConfig({"logging": {"file": "run.log", "dir": "out"}})

    configure_logging(cfg)
    get_logger("family_tree.tests").info("hello from the tree")
    for handler in logging.getLogger("family_tree").handlers:
        handler.flush()

    log_path = tmp_path / "out" / "run.log"
    assert log_path.is_file()
    assert "hello from the tree" in log_path.read_text(encoding="utf-8")


def test_configure_logging_without_file_adds_no_file_handler(restore_logging) -> None:
    base = configure_logging(FTConfig({}))

    assert not any(isinstance(h, logging.FileHandler) for h in base.handlers)


def test_verbose_lowers_console_threshold(restore_logging) -> None:
    base = configure_logging(FTConfig({}), verbose=True)
    console = next(h for h in base.handlers if not isinstance(h, logging.FileHandler))
    assert console.level == logging.INFO

    base = configure_logging(FTConfig({}))
    assert console.level == logging.WARNING


def test_debug_config_forces_debug(restore_logging) -> None:
    base = configure_logging(FTConfig({"debug": True}))

    assert base.level == logging.DEBUG
