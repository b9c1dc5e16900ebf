import pytest

from logform.log_info import LogInfo, LogInfoError


def test_byte_serialization_round_trip():
    log = LogInfo("INFO", "Test message").with_meta("user", "Alice").with_meta("attempts", 3)
    restored = LogInfo.from_bytes(log.to_bytes())
    assert restored.level == "INFO"
    assert restored.message == "Test message"
    assert restored.meta["user"] == "Alice"
    assert restored.meta["attempts"] == 3


def test_from_bytes_rejects_invalid_json():
    with pytest.raises(LogInfoError):
        LogInfo.from_bytes(b"not json at all")


def test_from_bytes_requires_meta():
    with pytest.raises(LogInfoError):
        LogInfo.from_bytes(b'{"level":"INFO","message":"Test"}')


def test_from_value():
    value = {
        "level": "DEBUG",
        "message": "Another test message",
        "meta": {"id": 12345, "status": "pending"},
    }
    log = LogInfo.from_value(value)
    assert log.level == "DEBUG"
    assert log.message == "Another test message"
    assert log.meta["id"] == 12345
    assert log.meta["status"] == "pending"


def test_from_value_without_meta_gives_empty_meta():
    log = LogInfo.from_value({"level": "INFO", "message": "Test"})
    assert log.meta == {}


@pytest.mark.parametrize(
    "value",
    [
        [1, 2],
        {"message": "Test"},
        {"level": 5, "message": "Test"},
        {"level": "INFO"},
    ],
)
def test_from_value_errors(value):
    with pytest.raises(LogInfoError):
        LogInfo.from_value(value)


def test_to_value_round_trip():
    log = LogInfo("WARN", "careful").with_meta("count", 2)
    assert LogInfo.from_value(log.to_value()) == log


def test_with_meta_leaves_original_untouched():
    original = LogInfo("INFO", "Test message")
    updated = original.with_meta("key", "value")
    assert original.meta == {}
    assert updated.meta == {"key": "value"}


def test_without_meta():
    log = LogInfo("INFO", "Test message").with_meta("a", 1).with_meta("b", 2)
    assert log.without_meta("a").meta == {"b": 2}
    assert log.without_meta("missing").meta == {"a": 1, "b": 2}


def test_display_without_meta():
    assert str(LogInfo("INFO", "Test message")) == "[INFO] Test message"


def test_display_with_meta():
    log = LogInfo("ERROR", "Connection failed").with_meta("retry", 3).with_meta("host", "example.com")
    display = str(log)
    assert display.startswith("[ERROR] Connection failed {")
    assert "retry: 3" in display
    assert 'host: "example.com"' in display
    assert display.endswith("}")


def test_parse_simple():
    log = LogInfo.parse("[WARN] Something happened")
    assert log.level == "WARN"
    assert log.message == "Something happened"
    assert log.meta == {}


def test_parse_with_meta():
    log = LogInfo.parse('[DEBUG] Processing {user: "Alice", count: 5}')
    assert log.level == "DEBUG"
    assert log.message == "Processing"
    assert log.meta["count"] == 5
    assert log.meta["user"] == "Alice"


def test_parse_json():
    log = LogInfo.parse('{"level":"INFO","message":"Test","meta":{"id":123}}')
    assert log.level == "INFO"
    assert log.message == "Test"
    assert log.meta["id"] == 123


def test_display_parse_round_trip():
    original = LogInfo("INFO", "Test message").with_meta("key", "value")
    assert LogInfo.parse(str(original)) == original


def test_parse_requires_bracket():
    with pytest.raises(LogInfoError):
        LogInfo.parse("INFO no brackets here")


def test_parse_requires_closing_bracket():
    with pytest.raises(LogInfoError):
        LogInfo.parse("[INFO message")


def test_parse_json_that_is_not_an_object():
    with pytest.raises(LogInfoError):
        LogInfo.parse("123")