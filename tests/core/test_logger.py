import json
import sys

import pytest
from loguru import logger

from dashboard.config.settings import Settings
from dashboard.core.logger import resolve_log_level, setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_verbose_overrides_configured_level():
    config = Settings(_env_file=None, LOG_LEVEL="WARNING")

    assert resolve_log_level(False, config) == "WARNING"
    assert resolve_log_level(True, config) == "DEBUG"


def test_log_file_receives_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "dashboard.log"
    config = Settings(_env_file=None, LOG_LEVEL="INFO", LOG_FILE=str(log_file))

    assert setup_logger(config=config) == "INFO"
    logger.info("[METRICS] pass finished")
    logger.debug("hidden below INFO")
    logger.remove()

    records = [json.loads(line)["record"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [record["message"] for record in records] == ["[METRICS] pass finished"]
