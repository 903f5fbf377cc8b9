"""Pipeline step functions: batch validation and export of JSON documents"""

from datetime import datetime
from pathlib import Path

from docview.core.errors import FormatError
from docview.core.export import OUTPUT_EXTENSIONS, write_doc
from docview.core.parse import discover_files, parse_file
from docview.core.utils.slug import slugify
from docview.logging import get_logger


logger = get_logger(__name__)


def run_validate(path: str) -> list[tuple[Path, str | None]]:
    """Parse every document under path. Returns (file, error) pairs; error is None when valid."""
    results = []
    for p in discover_files(Path(path)):
        try:
            parse_file(p)
        except (FormatError, OSError) as e:
            logger.warning("document_invalid", path=str(p), error=str(e))
            results.append((p, str(e)))
        else:
            results.append((p, None))
    return results


def run_export(
    path: str,
    output_dir: Path,
    fmt: str,
    now: datetime | None = None,
    parser_config: str = 'gfm-like',
    ) -> list[tuple[Path, Path]]:
    """Parse and render every document under path. Returns (source_path, output_file) pairs.

    Output mirrors the source layout relative to path:
      output_dir / <source dir> / slug(<source stem>).<ext>
    Two sources mapping to the same output file raise instead of overwriting.
    """
    root = Path(path)
    base = root if root.is_dir() else root.parent
    results = []
    written: dict[Path, Path] = {}
    for p in discover_files(root):
        try:
            rel = p.relative_to(base)
            slug = slugify(p.stem)
            dest_dir = output_dir / rel.parent
            target = dest_dir / f"{slug}.{OUTPUT_EXTENSIONS.get(fmt, fmt)}"
            if target in written:
                raise FileExistsError(f"output {target} already written for {written[target]}")
            doc = parse_file(p)
            out_file = write_doc(doc, dest_dir, fmt, now, parser_config, slug=slug)
            written[out_file] = p
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to export {p}: {e}") from e
    return results
