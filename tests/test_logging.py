"""Tests for the loguru sinks."""

import json

from shellaudit.utils.logging import logger, pino_compatible_sink


def test_pino_sink_writes_ndjson_to_stderr(capsys):
    handler_id = logger.add(pino_compatible_sink, level="INFO")
    try:
        logger.bind(path="build.sh").info("parsed")
    finally:
        logger.remove(handler_id)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["msg"] == "parsed"
    assert record["level"] == 30
    assert record["path"] == "build.sh"
