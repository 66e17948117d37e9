"""Tests for extractor.exceptions — all error kinds."""

import pytest

from extractor.exceptions import (
    ConfigurationError,
    EmptySelectionError,
    ExtractorError,
    OutputError,
    ScanError,
    SelectionError,
)
from i18n import get_locale, set_locale


@pytest.fixture(autouse=True)
def _zh_locale():
    original = get_locale()
    set_locale("zh_CN")
    yield
    set_locale(original)


class TestExtractorError:
    def test_basic(self):
        e = ExtractorError("test")
        assert e.message == "test"
        assert e.details == {}
        assert str(e) == "test"

    def test_default_message(self):
        assert ExtractorError().message == "提取失败"

    def test_with_details(self):
        e = ExtractorError("err", details={"key": "val"})
        assert e.details == {"key": "val"}
        assert "Details:" in str(e)

    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, SelectionError, EmptySelectionError, ScanError, OutputError],
    )
    def test_subclasses(self, cls):
        assert issubclass(cls, ExtractorError)
        with pytest.raises(ExtractorError):
            raise cls()


class TestConfigurationError:
    def test_config_key(self):
        e = ConfigurationError("bad", config_key="TargetPath")
        assert e.config_key == "TargetPath"
        assert e.details == {"config_key": "TargetPath"}

    def test_default(self):
        e = ConfigurationError()
        assert e.message == "配置错误"
        assert e.details == {}


class TestSelectionError:
    def test_path_in_message(self):
        e = SelectionError(path="/data/game", reason="Permission denied")
        assert "/data/game" in str(e)
        assert e.details == {"reason": "Permission denied"}


class TestEmptySelectionError:
    def test_message(self):
        e = EmptySelectionError(root_path="./root")
        assert str(e) == "找不到指定的文件，请检查配置"
        assert e.root_path == "./root"


class TestScanError:
    def test_fields(self):
        e = ScanError(file_path="/a/ui.lua", reason="No such file or directory")
        assert e.file_path == "/a/ui.lua"
        assert "/a/ui.lua" in e.message
        assert e.details["reason"] == "No such file or directory"


class TestOutputError:
    def test_english_message(self):
        set_locale("en_US")
        e = OutputError(file_path="output.txt")
        assert e.message == "Failed to write output file: output.txt"
