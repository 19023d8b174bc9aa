"""Split slide markdown into typed chunks (markdown, mermaid, code).

The base splitter only separates mermaid diagrams from the surrounding
markdown. Further chunk kinds are recognized by an ordered list of chunk
parsers, each of which may replace a markdown chunk with finer chunks.
"""

import logging
import re
from typing import Callable, Optional

from slidediff.schemas.chunk_schema import (
    BaseChunk,
    ChunkType,
    CodeChunk,
    MarkdownChunk,
    MermaidChunk,
)

logger = logging.getLogger(__name__)

ChunkParser = Callable[[str, str], list[BaseChunk]]

_MERMAID_BLOCK = re.compile(r"^```mermaid\n(.*?)\n^```$", re.MULTILINE | re.DOTALL)
_FENCE_MARKERS = ("```", "~~~")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def hash_markdown_string(text: str) -> str:
    """Deterministic short hash used to build chunk and slide ids.

    32-bit rolling ``h * 31 + c`` over UTF-16 code units, rendered in base 36.
    """
    h = 0
    data = text.encode("utf-16-le")
    for k in range(0, len(data), 2):
        h = (h * 31 + int.from_bytes(data[k : k + 2], "little")) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    h = abs(h)

    if h == 0:
        return "0"
    digits: list[str] = []
    while h:
        h, rem = divmod(h, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def parse_markdown_chunks(
    markdown_content: str,
    id_prefix: str,
    custom_parsers: Optional[list[ChunkParser]] = None,
) -> list[BaseChunk]:
    """Split markdown into chunks.

    Args:
        markdown_content: Slide markdown.
        id_prefix: Prefix for chunk ids, usually the slide id.
        custom_parsers: Chunk parsers run in order over the markdown chunks.
            A parser returning a non-empty list replaces the chunk it was
            given; an empty list keeps the chunk as it was.

    Returns:
        Chunks in document order. Empty content gives an empty list.
    """
    if not isinstance(markdown_content, str):
        raise TypeError(f"Markdown content must be a string, got {type(markdown_content).__name__}")

    if not markdown_content.strip():
        return []

    try:
        chunks = _split_mermaid(markdown_content, id_prefix)
        for parser in custom_parsers or []:
            chunks = _apply_parser(parser, chunks)
        return chunks
    except Exception as e:
        logger.error(f"Could not split markdown into chunks for '{id_prefix}': {e}")
        return [
            MarkdownChunk(
                content=markdown_content,
                id=f"{id_prefix}-md-error-fallback-{hash_markdown_string(markdown_content)}",
            )
        ]


def _split_mermaid(markdown_content: str, id_prefix: str) -> list[BaseChunk]:
    chunks: list[BaseChunk] = []
    last_index = 0
    part_counter = 0

    for match in _MERMAID_BLOCK.finditer(markdown_content):
        part_counter += 1
        if match.start() > last_index:
            md_content = markdown_content[last_index : match.start()]
            if md_content.strip():
                chunks.append(
                    MarkdownChunk(
                        content=md_content,
                        id=f"{id_prefix}-md-{part_counter}-{hash_markdown_string(md_content)}",
                    )
                )

        part_counter += 1
        mermaid_content = match.group(1).strip()
        chunks.append(
            MermaidChunk(
                content=mermaid_content,
                id=f"{id_prefix}-mermaid-{part_counter}-{hash_markdown_string(mermaid_content)}",
            )
        )
        last_index = match.end()

    if last_index < len(markdown_content):
        part_counter += 1
        remaining = markdown_content[last_index:]
        if remaining.strip():
            chunks.append(
                MarkdownChunk(
                    content=remaining,
                    id=f"{id_prefix}-md-{part_counter}-{hash_markdown_string(remaining)}",
                )
            )

    return chunks


def _apply_parser(parser: ChunkParser, chunks: list[BaseChunk]) -> list[BaseChunk]:
    result: list[BaseChunk] = []
    for chunk in chunks:
        if chunk.type != ChunkType.MARKDOWN:
            result.append(chunk)
            continue
        parsed = parser(chunk.content, chunk.id)
        if parsed:
            result.extend(parsed)
        else:
            result.append(chunk)
    return result


def parse_code_chunks(markdown_content: str, id_prefix: str) -> list[BaseChunk]:
    """Chunk parser that splits fenced code blocks out of markdown.

    Returns an empty list when the content holds no closed fence, so the
    chunk is kept unchanged.
    """
    lines = markdown_content.split("\n")
    chunks: list[BaseChunk] = []
    pending: list[str] = []
    part_counter = 0
    found_block = False
    i = 0

    while i < len(lines):
        stripped = lines[i].strip()
        marker = stripped[:3]
        if marker in _FENCE_MARKERS:
            close = _find_fence_close(lines, i + 1, marker)
            if close is not None:
                found_block = True
                if "".join(pending).strip():
                    part_counter += 1
                    md_content = "\n".join(pending)
                    chunks.append(
                        MarkdownChunk(
                            content=md_content,
                            id=f"{id_prefix}-md-{part_counter}-{hash_markdown_string(md_content)}",
                        )
                    )
                pending = []

                part_counter += 1
                info = stripped[3:].strip()
                code_content = "\n".join(lines[i + 1 : close])
                chunks.append(
                    CodeChunk(
                        content=code_content,
                        language=info.split()[0] if info else None,
                        id=f"{id_prefix}-code-{part_counter}-{hash_markdown_string(code_content)}",
                    )
                )
                i = close + 1
                continue
        pending.append(lines[i])
        i += 1

    if not found_block:
        return []

    if "".join(pending).strip():
        part_counter += 1
        md_content = "\n".join(pending)
        chunks.append(
            MarkdownChunk(
                content=md_content,
                id=f"{id_prefix}-md-{part_counter}-{hash_markdown_string(md_content)}",
            )
        )
    return chunks


def _find_fence_close(lines: list[str], start: int, marker: str) -> Optional[int]:
    for j in range(start, len(lines)):
        if lines[j].strip().startswith(marker):
            return j
    return None
