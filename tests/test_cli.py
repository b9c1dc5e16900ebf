import re

from logform.cli import CliFormat, cli
from logform.log_info import LogInfo

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_cli_format():
    cli_format = CliFormat(levels={"info": "info", "error": "error"})
    result = cli_format.transform(LogInfo("error", "Test message"))
    assert result.message == "\x1b[31merror\x1b[0m: Test message"


def test_cli_format_with_options():
    cli_format = cli(
        levels=["info", "error"],
        filler="*",
        all=True,
        colors={"info": "blue", "error": ["red", "bold"]},
    )
    error = cli_format.transform(LogInfo("error", "Test message"))
    assert error.message == "\x1b[1;31merror\x1b[0m:\x1b[1;31m*Test message\x1b[0m"

    info = cli_format.transform(LogInfo("info", "Another test message"))
    assert info.message == "\x1b[34minfo\x1b[0m:\x1b[34m**Another test message\x1b[0m"


def test_default_levels_line_up_once_uncoloured():
    cli_format = cli(level=False)
    messages = [
        cli_format.transform(LogInfo(level, "text")).message
        for level in ("error", "warn", "help", "data", "info", "debug", "prompt",
                      "verbose", "input", "silly")
    ]
    assert {m.index("text") for m in messages} == {len("verbose") + 2}


def test_level_field_is_coloured_and_meta_kept():
    result = cli().transform(LogInfo("info", "msg").with_meta("k", "v"))
    assert _ANSI.sub("", result.level) == "info"
    assert result.level != "info"
    assert result.meta == {"k": "v"}


def test_unknown_level_is_neither_padded_nor_coloured():
    result = cli().transform(LogInfo("custom", "msg"))
    assert result.message == "custom:msg"
    assert result.level == "custom"