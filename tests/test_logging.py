import json
import logging

from valuekind import logging_config


def test_logging_setup_creates_log_file(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logging_config, "LOG_DIR", log_dir)

    logging_config.setup_logging(console_level="WARNING", file_level="DEBUG")
    logger = logging.getLogger("valuekind.test")
    logger.info("Test message")

    log_file = log_dir / "valuekind.log"
    assert log_file.exists()
    assert "Test message" in log_file.read_text(encoding="utf-8")


def test_console_only_does_not_create_log_dir(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logging_config, "LOG_DIR", log_dir)

    logging_config.setup_logging(console_level="INFO")

    assert not log_dir.exists()
    assert len(logging.getLogger("valuekind").handlers) == 1


def test_setup_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path)

    logging_config.setup_logging()
    logging_config.setup_logging()

    assert len(logging.getLogger("valuekind").handlers) == 1


def test_console_output(capsys, monkeypatch):
    monkeypatch.setenv("VALUEKIND_NO_COLOR", "1")
    logging_config.setup_logging(console_level="INFO")

    logging.getLogger("valuekind.registry").info("hello console")

    err = capsys.readouterr().err
    assert "hello console" in err
    assert "INFO" in err
    assert "\033[" not in err


def test_json_formatter():
    record = logging.LogRecord("valuekind.x", logging.INFO, __file__, 10, "value %s", ("ok",), None)
    payload = json.loads(logging_config.JSONFormatter().format(record))

    assert payload["message"] == "value ok"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "valuekind.x"


def test_colored_formatter_does_not_mutate_record():
    record = logging.LogRecord("valuekind.x", logging.ERROR, __file__, 10, "bad", None, None)
    formatter = logging_config.ColoredFormatter("%(levelname)s %(message)s")

    output = formatter.format(record)

    assert "\033[31m" in output
    assert record.levelname == "ERROR"
