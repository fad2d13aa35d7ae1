import json
import logging

from wikinearby.core.logging import JsonFormatter


def test_json_formatter_includes_extras():
    record = logging.LogRecord("wikinearby.test", logging.INFO, __file__, 1, "found %d", (3,), None)
    record.radius_m = 1000

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "found 3"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "wikinearby.test"
    assert payload["radius_m"] == 1000
    assert "pathname" not in payload
