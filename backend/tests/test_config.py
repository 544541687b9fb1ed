import logging

from uvicorn.logging import DefaultFormatter

from app.config import Settings, get_settings
from app.logging_config import configure_logging


def test_settings_defaults(settings):
    assert settings.log_level == "INFO"
    assert settings.default_friction_coefficient == 0.4
    assert settings.clamp_cone_tip_radius is False
    assert settings.max_cone_length_ratio == 0.2


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("NAIL_CLAMP_CONE_TIP_RADIUS", "true")
    monkeypatch.setenv("NAIL_DEFAULT_FRICTION_COEFFICIENT", "0.25")
    settings = Settings(_env_file=None)
    assert settings.clamp_cone_tip_radius is True
    assert settings.default_friction_coefficient == 0.25


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_installs_uvicorn_formatter():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug", use_colors=False)
        assert root.level == logging.DEBUG
        assert any(isinstance(handler.formatter, DefaultFormatter) for handler in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_configure_logging_writes_uncolored_records_to_stderr(capsys):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("INFO")
        handler = root.handlers[0]
        assert handler.formatter.use_colors is False
        logging.getLogger("app.cli").info("result ready")
        handler.flush()
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    captured = capsys.readouterr()
    assert "app.cli: result ready" in captured.err
    assert captured.out == ""
