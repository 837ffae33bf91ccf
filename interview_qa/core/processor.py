import logging
import re
from pathlib import Path
from typing import Dict, Any, List

from interview_qa.core.extractor import extract_question_data, extract_toc_data, split_lines
from interview_qa.models.schemas import ExtractionResult

logger = logging.getLogger(__name__)

MARKDOWN_CONTENT_TYPES = ("text/markdown", "text/x-markdown", "text/plain")
MARKDOWN_SUFFIXES = (".md", ".markdown")

_SEPARATOR_RUN = re.compile(r"(?:[^\w\-]|_)+")


class MarkdownProcessor:
    """Runs both extractors over a Markdown document"""

    def __init__(self, strict_toc: bool = False):
        self.strict_toc = strict_toc

    def process_text(self, markdown: str) -> ExtractionResult:
        """
        Extract the TOC and the question/answer pairs from raw Markdown.
        Raises MalformedTocRowError only in strict mode.
        """
        skipped: List[int] = []
        toc = extract_toc_data(
            markdown,
            strict=self.strict_toc,
            on_malformed=lambda line_number, line: skipped.append(line_number),
        )
        questions = extract_question_data(markdown)
        logger.info(
            f"Extracted {len(toc)} TOC entries and {len(questions)} questions"
            f" ({len(skipped)} malformed TOC rows skipped)"
        )
        return ExtractionResult(toc=toc, questions=questions, skipped_toc_rows=skipped)

    async def process_markdown(self, file) -> Dict[str, Any]:
        """
        Process an uploaded Markdown file.
        ``file`` only needs ``filename``, ``content_type`` and an async ``read()``.
        """
        raw = await file.read()
        markdown = decode_markdown(raw)
        result = self.process_text(markdown)

        return {
            "result": result,
            "metadata": build_metadata(markdown, result, filename=file.filename,
                                       content_type=file.content_type),
        }


def decode_markdown(raw: bytes) -> str:
    """Decode as UTF-8, dropping a leading BOM. Raises UnicodeDecodeError."""
    return raw.decode("utf-8-sig")


def is_markdown_upload(filename: str, content_type: str) -> bool:
    if content_type and content_type.split(";")[0].strip() in MARKDOWN_CONTENT_TYPES:
        return True
    return bool(filename) and filename.lower().endswith(MARKDOWN_SUFFIXES)


def source_name(filename: str) -> str:
    """Label for an uploaded document: the file stem with odd characters folded to '_'"""
    name = _SEPARATOR_RUN.sub("_", Path(filename or "").stem).strip("_")
    return name or "upload"


def summarize(result: ExtractionResult) -> Dict[str, Any]:
    return {
        "toc_count": len(result.toc),
        "question_count": len(result.questions),
        "skipped_toc_rows": len(result.skipped_toc_rows),
    }


def build_metadata(markdown: str, result: ExtractionResult, **extra) -> Dict[str, Any]:
    metadata = {"line_count": len(split_lines(markdown)) if markdown else 0}
    metadata.update(summarize(result))
    metadata.update(extra)
    return metadata
