"""Rewriting of relative image URLs to GitHub raw URLs."""

import logging
import re
from typing import Optional

from slidediff.schemas.presentation_schema import RepositoryInfo

logger = logging.getLogger(__name__)

_ABSOLUTE_PREFIXES = ("http://", "https://", "//", "data:", "blob:")
_MARKDOWN_IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_PARENT_SEGMENTS = re.compile(r"^(\.\./)+")


def is_relative_url(url: str) -> bool:
    """True unless the URL has a scheme, is protocol-relative, or is a data/blob URL."""
    return not url.startswith(_ABSOLUTE_PREFIXES)


def transform_image_url(src: str, repository_info: Optional[RepositoryInfo] = None) -> str:
    """Resolve a relative image path to a raw.githubusercontent.com URL.

    Paths starting with '/' are taken from the repository root; other
    relative paths are resolved against ``repository_info.base_path``.
    Leading '../' segments are dropped since navigation above the markdown
    file is not supported.
    """
    if repository_info is None or not is_relative_url(src):
        return src

    if src.startswith("/"):
        full_path = src[1:]
    else:
        clean_path = src
        if clean_path.startswith("./"):
            clean_path = clean_path[2:]
        if clean_path.startswith("../"):
            logger.warning(f"Parent directory navigation in image URL is not supported: {src}")
            clean_path = _PARENT_SEGMENTS.sub("", clean_path)

        base_path = repository_info.base_path.strip("/")
        full_path = f"{base_path}/{clean_path}" if base_path else clean_path

    return (
        f"https://raw.githubusercontent.com/{repository_info.owner}/{repository_info.repo}"
        f"/{repository_info.branch}/{full_path}"
    )


def transform_markdown_image_urls(
    markdown_content: str,
    repository_info: Optional[RepositoryInfo] = None,
) -> str:
    """Rewrite every ``![alt](src)`` image in a markdown string."""
    if repository_info is None:
        return markdown_content

    def _replace(match: re.Match) -> str:
        alt_text, image_path = match.group(1), match.group(2)
        return f"![{alt_text}]({transform_image_url(image_path, repository_info)})"

    return _MARKDOWN_IMAGE.sub(_replace, markdown_content)
