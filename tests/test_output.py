"""Tests for extractor.output — the line-per-entry output file."""

import pytest

from extractor.exceptions import OutputError
from extractor.output import write_output


class TestWriteOutput:
    def test_one_line_per_entry(self, tmp_path):
        out = tmp_path / "output.txt"
        assert write_output(['"你好"', '"标题"'], out) == 2
        assert out.read_bytes() == '"你好"\n"标题"\n'.encode("utf-8")

    def test_truncates_previous_content(self, tmp_path):
        out = tmp_path / "output.txt"
        out.write_text("old content\n" * 10, encoding="utf-8")
        write_output(['"新"'], out)
        assert out.read_text(encoding="utf-8") == '"新"\n'

    def test_empty_sequence(self, tmp_path):
        out = tmp_path / "output.txt"
        assert write_output([], out) == 0
        assert out.read_bytes() == b""

    def test_no_temp_files_left(self, tmp_path):
        out = tmp_path / "output.txt"
        write_output(['"一"'], out)
        assert [p.name for p in tmp_path.iterdir()] == ["output.txt"]

    def test_missing_directory_raises(self, tmp_path):
        out = tmp_path / "missing" / "output.txt"
        with pytest.raises(OutputError) as exc_info:
            write_output(['"一"'], out)
        assert exc_info.value.file_path == str(out)

    def test_failed_write_keeps_previous_file(self, tmp_path):
        out = tmp_path / "output.txt"
        out.write_text("previous\n", encoding="utf-8")

        def broken():
            yield '"一"'
            raise OSError(5, "Input/output error")

        with pytest.raises(OutputError):
            write_output(broken(), out)
        assert out.read_text(encoding="utf-8") == "previous\n"
        assert [p.name for p in tmp_path.iterdir()] == ["output.txt"]
