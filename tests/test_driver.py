"""End-to-end extraction scenarios for extractor.driver."""

import pytest

from extractor.config import ExtractorConfig
from extractor.driver import extract, run
from extractor.exceptions import EmptySelectionError, ScanError, SelectionError


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _config(tmp_path, names=("ui.lua",), **kwargs):
    kwargs.setdefault("output_path", tmp_path / "output.txt")
    return ExtractorConfig(root_path=tmp_path / "root", accepted_names=frozenset(names), **kwargs)


class TestExtract:
    def test_basic_extraction(self, tmp_path):
        _write(
            tmp_path / "root" / "ui.lua",
            '-- header\nlabel = "你好"\n// greeting = "hi"\ntitle = "标题"  // suffix\n',
        )
        result = extract(_config(tmp_path))
        assert result.candidates == ['"你好"', '"标题"']
        assert result.count == 2

    def test_dedup_across_files(self, tmp_path):
        first = _write(tmp_path / "root" / "a" / "ui.lua", 'msg = "确认"\nx = "甲"\n')
        second = _write(tmp_path / "root" / "b" / "ui.lua", 'y = "乙"\nmsg = "确认"\n')
        result = extract(_config(tmp_path))
        assert result.candidates == ['"确认"', '"甲"', '"乙"']
        assert result.files == [first, second]
        assert result.per_file == {first: 2, second: 2}

    def test_non_matching_filename_is_empty_selection(self, tmp_path):
        _write(tmp_path / "root" / "notes.txt", 'x = "中文"\n')
        with pytest.raises(EmptySelectionError, match="请检查配置"):
            extract(_config(tmp_path))

    def test_matching_files_without_candidates(self, tmp_path):
        _write(tmp_path / "root" / "ui.lua", 'tag = "hello"\n')
        result = extract(_config(tmp_path))
        assert result.candidates == []
        assert len(result.files) == 1

    def test_missing_root(self, tmp_path):
        with pytest.raises(SelectionError):
            extract(_config(tmp_path))

    def test_parallel_matches_sequential(self, tmp_path):
        for i in range(12):
            _write(
                tmp_path / "root" / f"d{i:02d}" / "ui.lua",
                f'a = "共同"\nb = "文件{i}"\nc = "第{i % 3}组"\n',
            )
        sequential = extract(_config(tmp_path, workers=1))
        parallel = extract(_config(tmp_path, workers=4))
        assert parallel.candidates == sequential.candidates
        assert parallel.per_file == sequential.per_file
        assert sequential.candidates[:3] == ['"共同"', '"文件0"', '"第0组"']

    def test_max_per_line_respected(self, tmp_path):
        _write(tmp_path / "root" / "ui.lua", 'a = "中"\n')
        assert extract(_config(tmp_path, max_per_line=1)).candidates == ['"中"']


class TestRun:
    def test_writes_output(self, tmp_path):
        _write(tmp_path / "root" / "ui.lua", 'label = "你好"\ntitle = "标题"\n')
        result = run(_config(tmp_path))
        assert result.count == 2
        assert (tmp_path / "output.txt").read_text(encoding="utf-8") == '"你好"\n"标题"\n'

    def test_deterministic(self, tmp_path):
        for name in ["b", "a", "c"]:
            _write(tmp_path / "root" / name / "ui.lua", f'x = "{name}中"\ny = "共"\n')
        out = tmp_path / "output.txt"
        run(_config(tmp_path))
        first = out.read_bytes()
        run(_config(tmp_path))
        assert out.read_bytes() == first
        assert first == '"a中"\n"共"\n"b中"\n"c中"\n'.encode("utf-8")

    def test_no_output_on_empty_selection(self, tmp_path):
        (tmp_path / "root").mkdir()
        with pytest.raises(EmptySelectionError):
            run(_config(tmp_path))
        assert not (tmp_path / "output.txt").exists()

    def test_scan_failure_leaves_previous_output(self, tmp_path, monkeypatch):
        _write(tmp_path / "root" / "ui.lua", 'label = "你好"\n')
        out = _write(tmp_path / "output.txt", '"旧"\n')

        def failing_scan(path, **kwargs):
            raise ScanError(file_path=str(path), reason="boom")
            yield  # pragma: no cover

        monkeypatch.setattr("extractor.driver.scan_file", failing_scan)
        with pytest.raises(ScanError):
            run(_config(tmp_path))
        assert out.read_text(encoding="utf-8") == '"旧"\n'
