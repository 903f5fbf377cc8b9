"""Slug generation for output file names"""

import re


def slugify(text: str, default: str = "document") -> str:
    """Convert a title to a lowercase, hyphen-separated file-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or default
