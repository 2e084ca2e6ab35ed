"""Tests for figma_codegen.cli."""

from __future__ import annotations

import json

import pytest

from figma_codegen import cli
from figma_codegen.integrations.figma_models import GeneratedComponent


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    """Keep the CLI from attaching file handlers during tests."""
    monkeypatch.setattr(cli, "get_codegen_logger", lambda: None)


@pytest.fixture
def design_file(tmp_path, sample_document):
    path = tmp_path / "design.json"
    path.write_text(json.dumps({"name": "File", "document": sample_document}), encoding="utf-8")
    return path


class TestMain:
    def test_writes_components(self, design_file, tmp_path, capsys):
        out_dir = tmp_path / "out"
        code = cli.main(["--design-file", str(design_file), "--output-dir", str(out_dir)])
        assert code == 0
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "Button.tsx", "ButtonInstance.tsx", "ProfileCard.tsx", "Screen.tsx",
        ]
        assert "export default function ProfileCard()" in (out_dir / "ProfileCard.tsx").read_text()
        assert "Frames found: 4, components generated: 4" in capsys.readouterr().out

    def test_recursive_mode(self, design_file, tmp_path):
        out_dir = tmp_path / "out"
        cli.main(["--design-file", str(design_file), "--output-dir", str(out_dir), "--mode", "recursive"])
        assert (out_dir / "Inner.tsx").exists()

    def test_bare_document(self, tmp_path, sample_document):
        path = tmp_path / "doc.json"
        path.write_text(json.dumps(sample_document), encoding="utf-8")
        code = cli.main(["--design-file", str(path), "--output-dir", str(tmp_path / "out")])
        assert code == 0

    def test_no_frames_exit_code(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"document": {"type": "DOCUMENT", "children": []}}), encoding="utf-8")
        code = cli.main(["--design-file", str(path), "--output-dir", str(tmp_path / "out")])
        assert code == 1
        assert "No frames or components found" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_unreadable_file(self, tmp_path, capsys):
        code = cli.main(["--design-file", str(tmp_path / "missing.json"), "--output-dir", str(tmp_path)])
        assert code == 1
        assert "cannot read design file" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert cli.main(["--design-file", str(path), "--output-dir", str(tmp_path)]) == 1

    def test_invalid_utf8(self, tmp_path, capsys):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"document": {"name": "Caf\xe9"}}')
        assert cli.main(["--design-file", str(path), "--output-dir", str(tmp_path)]) == 1
        assert "cannot read design file" in capsys.readouterr().err

    def test_unwritable_output_dir(self, design_file, tmp_path, capsys):
        out_file = tmp_path / "out"
        out_file.write_text("not a directory", encoding="utf-8")
        code = cli.main(["--design-file", str(design_file), "--output-dir", str(out_file)])
        assert code == 1
        assert "cannot write components" in capsys.readouterr().err

    def test_frame_with_invalid_properties_skipped(self, tmp_path):
        path = tmp_path / "design.json"
        path.write_text(json.dumps({"document": {"type": "DOCUMENT", "children": [
            {"name": "Good", "type": "FRAME"},
            {"name": "Bad", "type": "FRAME", "cornerRadius": "mixed"},
        ]}}), encoding="utf-8")
        out_dir = tmp_path / "out"
        assert cli.main(["--design-file", str(path), "--output-dir", str(out_dir)]) == 0
        assert [p.name for p in out_dir.iterdir()] == ["Good.tsx"]

    def test_rejects_unknown_mode(self, design_file, tmp_path):
        with pytest.raises(SystemExit):
            cli.main(["--design-file", str(design_file), "--output-dir", str(tmp_path), "--mode", "all"])


def test_component_filenames_suffix_duplicates():
    components = [
        GeneratedComponent(name="Card", code=""),
        GeneratedComponent(name="Card", code=""),
        GeneratedComponent(name="List", code=""),
        GeneratedComponent(name="Card", code=""),
    ]
    assert cli.component_filenames(components) == ["Card.tsx", "Card_2.tsx", "List.tsx", "Card_3.tsx"]


def test_duplicate_names_written_separately(tmp_path):
    components = [GeneratedComponent(name="Card", code="a"), GeneratedComponent(name="Card", code="b")]
    written = cli.write_components(components, tmp_path)
    assert [p.read_text() for p in written] == ["a", "b"]
