"""Shared fixtures for core unit tests"""

from datetime import datetime

import pytest

from docview.core.models import CheckboxBlock, Document, DocumentMetadata, HeaderBlock, ParagraphBlock


NOW = datetime(2023, 5, 10, 12, 0, 0)


@pytest.fixture(name="now")
def now_fixture():
    return NOW


@pytest.fixture(name="document")
def document_fixture():
    return Document(
        metadata=DocumentMetadata(title="Weekly Notes", modified=datetime(2023, 5, 10)),
        blocks=[
            HeaderBlock(text="Chapter 1"),
            ParagraphBlock(text="Some text."),
            CheckboxBlock(text="Done thing", checked=True),
            CheckboxBlock(text="Open thing", checked=False),
        ],
    )
