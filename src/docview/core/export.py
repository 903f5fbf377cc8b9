"""Rendering: map each block variant to text, Markdown, or HTML and write output files"""

import re
from datetime import datetime
from pathlib import Path
from typing import assert_never

import yaml
from markdown_it import MarkdownIt

from docview.core.dates import format_relative_date
from docview.core.models import Block, CheckboxBlock, Document, HeaderBlock, ParagraphBlock
from docview.core.utils.slug import slugify
from docview.logging import get_logger


logger = get_logger(__name__)

OUTPUT_EXTENSIONS = {'text': 'txt', 'md': 'md', 'html': 'html'}

MD_INLINE_SPECIAL = re.compile(r"([\\`*_\[\]<>|~#&])")
MD_LIST_MARKER = re.compile(r"^([-+])")
MD_ORDERED_MARKER = re.compile(r"^(\d+)([.)])")


def escape_markdown(text: str) -> str:
    """Escape text so it renders literally inside a single Markdown block."""
    text = " ".join(line.strip() for line in text.splitlines() if line.strip())
    text = MD_INLINE_SPECIAL.sub(r"\\\1", text)
    text = MD_LIST_MARKER.sub(r"\\\1", text)
    return MD_ORDERED_MARKER.sub(r"\1\\\2", text)


def _checkmark(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def block_to_text(block: Block) -> str:
    """Plain-text display element for a single block."""
    match block:
        case HeaderBlock(text=text):
            return f"{text}\n{'=' * len(text)}"
        case ParagraphBlock(text=text):
            return text
        case CheckboxBlock(text=text, checked=checked):
            return f"{_checkmark(checked)} {text}"
        case _:
            assert_never(block)


def block_to_markdown(block: Block) -> str:
    """Markdown source for a single block; checkboxes become task-list items."""
    match block:
        case HeaderBlock(text=text):
            return f"# {escape_markdown(text)}"
        case ParagraphBlock(text=text):
            return escape_markdown(text)
        case CheckboxBlock(text=text, checked=checked):
            return f"- {_checkmark(checked)} {escape_markdown(text)}"
        case _:
            assert_never(block)


def _last_modified(doc: Document, now: datetime | None) -> str:
    return f"Last modified: {format_relative_date(doc.metadata.modified, now)}"


def build_text(doc: Document, now: datetime | None = None) -> str:
    """Title, last-modified line, then every block in order."""
    parts = [doc.metadata.title, _last_modified(doc, now)]
    parts.extend(block_to_text(b) for b in doc.blocks)
    return "\n\n".join(parts) + "\n"


def build_markdown(doc: Document, now: datetime | None = None) -> str:
    """Return the Markdown body with a YAML frontmatter block prepended."""
    fm = {
        'title': doc.metadata.title,
        'modified': doc.metadata.modified.date().isoformat(),
        'last_modified': format_relative_date(doc.metadata.modified, now),
    }
    header = yaml.dump(fm, default_flow_style=False, allow_unicode=True, sort_keys=False)
    body = "\n\n".join(block_to_markdown(b) for b in doc.blocks)
    return f"---\n{header}---\n\n{body}\n"


def build_html(doc: Document, now: datetime | None = None, parser_config: str = 'gfm-like') -> str:
    """Render title, last-modified line and body through markdown-it."""
    parts = [f"# {escape_markdown(doc.metadata.title)}", f"*{_last_modified(doc, now)}*"]
    parts.extend(block_to_markdown(b) for b in doc.blocks)
    md = MarkdownIt(parser_config, options_update={"linkify": False, "html": False})
    return md.render("\n\n".join(parts) + "\n")


def render_document(
    doc: Document,
    fmt: str = 'text',
    now: datetime | None = None,
    parser_config: str = 'gfm-like',
    ) -> str:
    """Render a document in one of the supported output formats (text, md, html)."""
    if fmt == 'text':
        return build_text(doc, now)
    if fmt == 'md':
        return build_markdown(doc, now)
    if fmt == 'html':
        return build_html(doc, now, parser_config)
    raise ValueError(f"Unsupported output format: {fmt!r} (expected one of {', '.join(OUTPUT_EXTENSIONS)})")


def write_doc(
    doc: Document,
    output_dir: Path,
    fmt: str = 'text',
    now: datetime | None = None,
    parser_config: str = 'gfm-like',
    slug: str | None = None,
    ) -> Path:
    """Write a rendered document to output_dir / <slug>.<ext> and return the path.

    slug defaults to the slugified document title.
    """
    content = render_document(doc, fmt, now, parser_config)
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{slug or slugify(doc.metadata.title)}.{OUTPUT_EXTENSIONS[fmt]}"
    out_path.write_text(content, encoding='utf-8')
    logger.info("document_exported", title=doc.metadata.title, path=str(out_path))
    return out_path
