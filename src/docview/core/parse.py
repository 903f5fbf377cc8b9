"""JSON document discovery, decoding, and schema validation into typed models"""

import json
from pathlib import Path
from typing import Any

from docview.core.dates import parse_timestamp
from docview.core.errors import FormatError
from docview.core.models import Block, CheckboxBlock, Document, DocumentMetadata, HeaderBlock, ParagraphBlock
from docview.logging import get_logger


logger = get_logger(__name__)

JSON_EXTENSIONS = {'.json'}

# type tag -> (block model, required fields and their JSON types)
BLOCK_SCHEMAS: dict[str, tuple[type, dict[str, type]]] = {
    'h1':       (HeaderBlock,    {'text': str}),
    'p':        (ParagraphBlock, {'text': str}),
    'checkbox': (CheckboxBlock,  {'text': str, 'checked': bool}),
}


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise FormatError(f"Expected {what} to be an object, got {type(value).__name__}")
    return value


def _require_field(mapping: dict[str, Any], key: str, kind: type, what: str) -> Any:
    """Return mapping[key] if present and of the given JSON type, else raise FormatError."""
    if key not in mapping:
        raise FormatError(f"Missing '{key}' in {what}")
    value = mapping[key]
    if not isinstance(value, kind):
        raise FormatError(f"Expected '{key}' in {what} to be {kind.__name__}, got {type(value).__name__}")
    return value


def load_json(text: str) -> dict[str, Any]:
    """Decode JSON text whose top level must be an object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise FormatError("Invalid JSON: nesting too deep") from e
    return _require_mapping(data, "document")


def parse_metadata(data: Any) -> DocumentMetadata:
    """Validate data['metadata'] and return its title and parsed modified timestamp."""
    doc = _require_mapping(data, "document")
    meta = _require_field(doc, 'metadata', dict, "document")
    title = _require_field(meta, 'title', str, "metadata")
    modified = _require_field(meta, 'modified', str, "metadata")
    return DocumentMetadata(title=title, modified=parse_timestamp(modified))


def parse_block(data: Any) -> Block:
    """Decode one block mapping by its 'type' tag; extra keys are ignored."""
    block = _require_mapping(data, "block")
    tag = block.get('type')
    if not isinstance(tag, str) or tag not in BLOCK_SCHEMAS:
        raise FormatError(f"Unknown block type: {tag!r}")
    model, fields = BLOCK_SCHEMAS[tag]
    values = {name: _require_field(block, name, kind, f"'{tag}' block") for name, kind in fields.items()}
    return model(**values)


def parse_blocks(data: Any) -> list[Block]:
    """Decode data['blocks'] in order, stopping at the first invalid element."""
    doc = _require_mapping(data, "document")
    items = _require_field(doc, 'blocks', list, "document")
    return [parse_block(item) for item in items]


def parse_document(source: str | dict[str, Any]) -> Document:
    """Parse JSON text (or an already decoded mapping) into a Document."""
    data = load_json(source) if isinstance(source, str) else source
    metadata = parse_metadata(data)
    blocks = parse_blocks(data)
    logger.debug("document_parsed", title=metadata.title, blocks=len(blocks))
    return Document(metadata=metadata, blocks=blocks)


def parse_file(path: Path) -> Document:
    """Read and parse a single JSON document file."""
    try:
        return parse_document(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise FormatError(f"{path}: not valid UTF-8: {e}") from e
    except FormatError as e:
        raise FormatError(f"{path}: {e}") from e


def discover_files(path: Path) -> list[Path]:
    """Return sorted .json files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in JSON_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in JSON_EXTENSIONS)
