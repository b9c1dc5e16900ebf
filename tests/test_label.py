from logform.label import LabelFormat, label
from logform.log_info import LogInfo


def test_label_format_message():
    fmt = LabelFormat(label="MY_LABEL", message=True)
    result = fmt.transform(LogInfo("info", "Test message"))
    assert result.message == "[MY_LABEL] Test message"


def test_label_format_meta():
    fmt = LabelFormat(label="MY_LABEL", message=False)
    result = fmt.transform(LogInfo("info", "Test message"))
    assert result.meta.get("label") == "MY_LABEL"
    assert result.message == "Test message"


def test_label_format_empty_label_message():
    fmt = LabelFormat(label="", message=True)
    result = fmt.transform(LogInfo("info", "Test message"))
    assert result.message == "[] Test message"


def test_label_format_overwrite_existing_label_meta():
    fmt = LabelFormat(label="NEW_LABEL", message=False)
    info = LogInfo("info", "Test message", {"label": "OLD_LABEL"})
    result = fmt.transform(info)
    assert result.meta.get("label") == "NEW_LABEL"
    assert info.meta["label"] == "OLD_LABEL"


def test_label_format_empty_message():
    fmt = LabelFormat(label="LABEL", message=True)
    result = fmt.transform(LogInfo("info", ""))
    assert result.message == "[LABEL] "


def test_label_factory_defaults_store_empty_label_in_meta():
    result = label().transform(LogInfo("info", "Test message", {"k": 1}))
    assert result.meta == {"k": 1, "label": ""}
    assert result.message == "Test message"


def test_label_in_message_leaves_meta_alone():
    result = label(label="MY_LABEL", message=True).transform(LogInfo("error", "x", {"k": 1}))
    assert result.meta == {"k": 1}
    assert result.level == "error"