"""
文件查找工具单元测试
"""

from pathlib import Path

from .filename_utils import find_text_files, natural_sort_key
from .yaml_parser import load_yaml_mapping


def _touch(path: Path, content: str = "内容") -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestNaturalSortKey:
    def test_numbers_sorted_numerically(self):
        names = ["file10.txt", "file2.txt", "file1.txt"]
        assert sorted(names, key=natural_sort_key) == ["file1.txt", "file2.txt", "file10.txt"]


class TestFindTextFiles:
    def test_explicit_files_keep_input_order(self, tmp_path):
        b = _touch(tmp_path / "b.txt")
        a = _touch(tmp_path / "a.txt")
        assert find_text_files([str(b), str(a)]) == [b, a]

    def test_directory_expanded_in_natural_order(self, tmp_path):
        corpus = tmp_path / "corpus"
        corpus.mkdir()
        for name in ["p10.txt", "p2.txt", "p1.txt", "notes.md"]:
            _touch(corpus / name)
        files = find_text_files([str(corpus)])
        assert [f.name for f in files] == ["p1.txt", "p2.txt", "p10.txt"]

    def test_glob_pattern(self, tmp_path):
        _touch(tmp_path / "zh_1.txt")
        _touch(tmp_path / "zh_2.txt")
        _touch(tmp_path / "ja_1.txt")
        files = find_text_files([str(tmp_path / "zh_*.txt")])
        assert [f.name for f in files] == ["zh_1.txt", "zh_2.txt"]

    def test_duplicates_removed(self, tmp_path):
        a = _touch(tmp_path / "a.txt")
        assert find_text_files([str(a), str(tmp_path), str(a)]) == [a]

    def test_missing_path_yields_nothing(self, tmp_path):
        assert find_text_files([str(tmp_path / "nope.txt")]) == []


class TestLoadYamlMapping:
    def test_mapping(self, tmp_path):
        path = _touch(tmp_path / "cfg.yaml", "batch_size: 20\nmodel: test-model\n")
        assert load_yaml_mapping(path) == {"batch_size": 20, "model": "test-model"}

    def test_empty_file(self, tmp_path):
        path = _touch(tmp_path / "empty.yaml", "")
        assert load_yaml_mapping(path) == {}
