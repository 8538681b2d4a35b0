import logging

from arcane_core.config import _parse_config
from arcane_core.main import configure_logging


def test_configure_logging_applies_levels(monkeypatch, caplog):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    target = logging.getLogger("arcane_core.test_target")
    monkeypatch.setattr(target, "level", logging.NOTSET)

    cfg = _parse_config(
        {
            "logging": {
                "global_level": "warning",
                "module_levels": {"arcane_core.test_target": "debug", "arcane_core.other": "LOUD"},
            }
        }
    )
    with caplog.at_level(logging.WARNING, logger="arcane_core.main"):
        configure_logging(cfg)

    assert captured["level"] == logging.WARNING
    assert captured["force"] is True
    assert target.level == logging.DEBUG
    assert "Invalid log level 'LOUD'" in caplog.text
