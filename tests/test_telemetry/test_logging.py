import json
import logging

import pytest

from scripter.config import get_logging_config
from telemetry import JSONFormatter, get_logger, timed_operation


class TestJSONFormatter:
    def test_extra_fields_become_keys(self):
        record = logging.LogRecord(
            name="video_processor.processors.transcript",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Transcript source %s finished",
            args=("native_captions",),
            exc_info=None,
        )
        record.attempt = {"source": "native_captions", "status": "success"}

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "Transcript source native_captions finished"
        assert data["level"] == "INFO"
        assert data["attempt"] == {"source": "native_captions", "status": "success"}
        assert "msg" not in data


class TestLoggingConfig:
    def test_handlers_write_into_log_dir(self, tmp_path):
        config = get_logging_config(debug=False, log_dir=str(tmp_path))

        assert config["handlers"]["acquisition_file"]["filename"] == str(tmp_path / "acquisition.log")
        assert config["handlers"]["django_file"]["formatter"] == "production"
        assert config["handlers"]["console"]["level"] == "INFO"
        assert config["loggers"]["openai"]["level"] == "WARNING"

    def test_debug_uses_detailed_files(self, tmp_path):
        config = get_logging_config(debug=True, log_dir=str(tmp_path))

        assert config["handlers"]["django_file"]["formatter"] == "detailed"
        assert config["handlers"]["console"]["level"] == "DEBUG"


class TestTimedOperation:
    def test_sync_success_is_logged(self, caplog):
        logger = get_logger("tests.timing")

        @timed_operation(name="parse", logger_instance=logger)
        def parse():
            return 42

        with caplog.at_level(logging.INFO, logger="tests.timing"):
            assert parse() == 42

        assert "parse completed in" in caplog.text

    @pytest.mark.asyncio
    async def test_async_failure_is_logged_and_reraised(self, caplog):
        logger = get_logger("tests.timing")

        @timed_operation(name="generate", logger_instance=logger)
        async def generate():
            raise ValueError("bad completion")

        with caplog.at_level(logging.INFO, logger="tests.timing"):
            with pytest.raises(ValueError):
                await generate()

        assert "generate failed after" in caplog.text
