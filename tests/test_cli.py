"""Tests for the compdocs command line."""

import io
import json

import pytest
from compdocs.cli import build_parser, main


@pytest.fixture
def stdin(monkeypatch):
    def _feed(text: str):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


class TestParseStdin:
    """compdocs parse with a document on stdin."""

    def test_single_component_prints_object(self, stdin, capsys, project_root, button_doc):
        stdin(button_doc)
        assert main(["parse", "-", "--root", str(project_root)]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out["component"] == "Button"
        assert "methods" not in out

    def test_no_path_reads_stdin(self, stdin, capsys, button_doc):
        stdin(button_doc)
        assert main(["parse", "--no-save"]) == 0
        assert json.loads(capsys.readouterr().out)["component"] == "Button"

    def test_multi_component_prints_array(self, stdin, capsys, project_root, multi_doc):
        stdin(multi_doc)
        assert main(["parse", "-", "--root", str(project_root)]) == 0

        out = json.loads(capsys.readouterr().out)
        assert [c["component"] for c in out] == ["Input", "InputNumber"]

    def test_saves_to_store(self, stdin, capsys, project_root, test_helpers, button_doc):
        stdin(button_doc)
        main(["parse", "-", "--root", str(project_root)])

        assert test_helpers.read_index()["components"] == [
            {"name": "Button", "file": "src/data/components/Button.json"}
        ]

    def test_no_save(self, stdin, capsys, project_root, test_helpers, button_doc):
        stdin(button_doc)
        main(["parse", "-", "--no-save", "--root", str(project_root)])
        assert not test_helpers.index_path.exists()

    def test_stdout_is_pure_json(self, stdin, capsys, project_root, multi_doc):
        """Diagnostics never reach stdout."""
        stdin(multi_doc)
        main(["parse", "-", "--root", str(project_root)])

        captured = capsys.readouterr()
        json.loads(captured.out)
        assert "Saved" not in captured.out


class TestParsePaths:
    """compdocs parse with a file or directory."""

    def test_file_prints_array(self, tmp_path, capsys, project_root, button_doc):
        path = tmp_path / "button.md"
        path.write_text(button_doc, encoding="utf-8")

        assert main(["parse", str(path), "--root", str(project_root)]) == 0
        out = json.loads(capsys.readouterr().out)
        assert [c["component"] for c in out] == ["Button"]

    def test_directory(self, tmp_path, capsys, project_root, test_helpers, button_doc, multi_doc):
        docs = tmp_path / "docs"
        (docs / "input").mkdir(parents=True)
        (docs / "button.md").write_text(button_doc, encoding="utf-8")
        (docs / "input" / "input.md").write_text(multi_doc, encoding="utf-8")
        (docs / "readme.txt").write_text("### Ignored Props", encoding="utf-8")

        assert main(["parse", str(docs), "--root", str(project_root)]) == 0

        out = json.loads(capsys.readouterr().out)
        assert [c["component"] for c in out] == ["Button", "Input", "InputNumber"]
        names = [e["name"] for e in test_helpers.read_index()["components"]]
        assert names == ["Button", "Input", "InputNumber"]

    def test_directory_skips_unreadable_file(self, tmp_path, capsys, project_root, button_doc):
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "a.md").write_bytes(b"\xff\xfe\xfa invalid utf-8")
        (docs / "button.md").write_text(button_doc, encoding="utf-8")

        assert main(["parse", str(docs), "--no-save"]) == 0

        captured = capsys.readouterr()
        assert [c["component"] for c in json.loads(captured.out)] == ["Button"]

    def test_missing_path(self, tmp_path, capsys):
        assert main(["parse", str(tmp_path / "missing.md"), "--no-save"]) == 1
        assert capsys.readouterr().out == ""


class TestParser:
    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 5000

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
