import importlib.util
import logging
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[2] / "src" / "mixtape"


def _load_module_from_path(module_name: str, path: Path):
    """Load a module from a file path under a custom name.

    Keeps the already-imported mixtape.config untouched while still running
    the real source files.
    """

    spec = importlib.util.spec_from_file_location(module_name, str(path))
    assert spec and spec.loader
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[attr-defined]
    return mod


def test_config_env_overrides_are_applied(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "info")
    monkeypatch.setenv("MIXTAPE_TAG_FIELD", "comment")
    monkeypatch.setenv("MIXTAPE_VIRTUALDJ_COMPAT", "true")

    cfg = _load_module_from_path("mixtape_real_config", SRC / "config.py")

    assert cfg.LOGGING_LEVEL == "INFO"
    assert cfg.TAG_FIELD == "comment"
    assert cfg.VIRTUALDJ_COMPAT is True
    assert cfg.TAG_SEPARATOR == ", "


def test_logger_helpers(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "warning")
    cfg = _load_module_from_path("mixtape_real_config_for_logger", SRC / "config.py")
    monkeypatch.setitem(sys.modules, "mixtape.config", cfg)
    monkeypatch.setattr(sys.modules["mixtape"], "config", cfg)

    logger_mod = _load_module_from_path("mixtape_real_logger", SRC / "logger.py")

    log = logger_mod.get_logger()
    assert log is logger_mod.logger
    assert log.level == logging.WARNING

    logger_mod.set_logging_level("bogus")
    assert log.level == logging.WARNING
    logger_mod.set_logging_level("debug")
    assert log.level == logging.DEBUG
