"""Unit tests for core/pipeline.py"""

from datetime import datetime

import pytest

from docview.core.pipeline import run_export, run_validate


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so relative paths are isolated."""
    monkeypatch.chdir(tmp_path)


# --- run_validate ---

def test_run_validate_valid(doc_file):
    assert run_validate(str(doc_file)) == [(doc_file, None)]


def test_run_validate_reports_each_file(tmp_path, doc_file):
    """Invalid files are reported without stopping the batch."""
    bad = tmp_path / "bad.json"
    bad.write_text('{"metadata": {"title": "T", "modified": "2023-05-10"}, "blocks": [{"type": "video"}]}')
    results = dict(run_validate(str(tmp_path)))
    assert results[doc_file] is None
    assert "video" in results[bad]


def test_run_validate_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{")
    [(path, error)] = run_validate(str(bad))
    assert "Invalid JSON" in error


def test_run_validate_empty_dir(tmp_path):
    assert run_validate(str(tmp_path)) == []


# --- run_export ---

def test_run_export_writes_files(tmp_path, doc_file):
    """run_export returns one (source, output) pair per document."""
    results = run_export(str(doc_file), tmp_path / "dist", "md", datetime(2023, 5, 10))
    assert len(results) == 1
    src, out_file = results[0]
    assert src == doc_file
    assert out_file.name == "sample.md"
    assert "last_modified: today" in out_file.read_text()


def test_run_export_wraps_errors(tmp_path):
    """A parse failure is reported as RuntimeError naming the file."""
    bad = tmp_path / "bad.json"
    bad.write_text('{"blocks": []}')
    with pytest.raises(RuntimeError, match="Failed to export"):
        run_export(str(bad), tmp_path / "dist", "text")


def test_run_validate_non_utf8_file(tmp_path, doc_file):
    """An undecodable file is reported as invalid and the batch continues."""
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'{"metadata": "\xff\xfe"}')
    results = dict(run_validate(str(tmp_path)))
    assert results[doc_file] is None
    assert "UTF-8" in results[bad]


def test_run_export_mirrors_source_dirs(tmp_path, doc_file):
    """Documents with the same title in different folders get separate outputs."""
    for name in ("a", "b"):
        sub = tmp_path / "src" / name
        sub.mkdir(parents=True)
        (sub / "doc.json").write_text(doc_file.read_text())
    results = run_export(str(tmp_path / "src"), tmp_path / "dist", "text")
    outputs = [out for _, out in results]
    assert outputs == [tmp_path / "dist" / "a" / "doc.txt", tmp_path / "dist" / "b" / "doc.txt"]
    assert all(out.exists() for out in outputs)


def test_run_export_rejects_colliding_outputs(tmp_path, doc_file):
    """Two sources that slugify to the same file name fail instead of overwriting."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "My Doc.json").write_text(doc_file.read_text())
    (src / "my-doc.json").write_text(doc_file.read_text())
    with pytest.raises(RuntimeError, match="already written"):
        run_export(str(src), tmp_path / "dist", "text")
