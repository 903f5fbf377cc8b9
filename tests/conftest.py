"""Root test configuration: shared document fixtures and environment isolation"""

import json

import pytest

from docview.core.sample import SAMPLE_DOCUMENT_JSON


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DOCVIEW_* variables so each test starts from Settings defaults."""
    for name in ("SOURCE", "OUTPUT_DIR", "OUTPUT_FORMAT", "PARSER_CONFIG", "LOG_LEVEL"):
        monkeypatch.delenv(f"DOCVIEW_{name}", raising=False)


@pytest.fixture(name="sample_data")
def sample_data_fixture():
    return json.loads(SAMPLE_DOCUMENT_JSON)


@pytest.fixture(name="doc_file")
def doc_file_fixture(tmp_path):
    """Write the sample document to a JSON file and return its path."""
    f = tmp_path / "sample.json"
    f.write_text(SAMPLE_DOCUMENT_JSON)
    return f
