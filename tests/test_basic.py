import json
import re

from logform.basic import AlignFormat, PassthroughFormat, align, passthrough, printf
from logform.colorize import colorize
from logform.format import chain
from logform.log_info import LogInfo
from logform.timestamp import timestamp


def test_align_format():
    info = LogInfo("info", "Test message").with_meta("key", "value")
    result = AlignFormat().transform(info)
    assert result.message.startswith("\t")
    assert result.message == "\tTest message"
    assert result.meta == {"key": "value"}


def test_align_factory_does_not_touch_original():
    info = LogInfo("warn", "x")
    result = align().transform(info)
    assert result.message == "\tx"
    assert info.message == "x"


def test_passthrough_returns_record_unchanged():
    info = LogInfo("debug", "raw").with_meta("n", 1)
    result = passthrough().transform(info)
    assert result == LogInfo("debug", "raw", {"n": 1})


def test_passthrough_class_callable():
    info = LogInfo("info", "m")
    assert PassthroughFormat()(info) is info


def test_printf_formatter():
    formatter = printf(
        lambda info: f"{info.level} - {info.message}: "
        f"{json.dumps(info.meta, separators=(',', ':'))}"
    )
    info = LogInfo("info", "This is a message").with_meta("key", "value")
    result = formatter.transform(info)
    assert result.message == 'info - This is a message: {"key":"value"}'
    assert result.level == "info"


def test_initialize_and_test_formats():
    colors = {"info": ["blue"], "error": ["red", "bold"]}
    fmt = chain(
        timestamp(),
        colorize(colors=colors, all=True),
        printf(
            lambda info: f"{info.meta.get('timestamp', '')} - {info.level}: {info.message}"
        ),
    )
    result = fmt.transform(LogInfo("info", "This is a test message"))
    stamp = result.meta["timestamp"]
    assert re.match(r"^\d{4}-\d{2}-\d{2}T", stamp)
    assert result.message == (
        f"{stamp} - \x1b[34minfo\x1b[0m: \x1b[34mThis is a test message\x1b[0m"
    )