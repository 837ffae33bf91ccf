import asyncio
import logging
import aiofiles
from pathlib import Path
from interview_qa.config import settings
from interview_qa.core.processor import MarkdownProcessor
from interview_qa.core.extractor import MalformedTocRowError

# Configure logging
logging.basicConfig(
    level=settings.log_level_value,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

class LocalFile:
    """Wrapper for local file to mimic UploadFile interface partially"""
    def __init__(self, path: Path):
        self.path = path
        self.filename = path.name
        self.content_type = "text/markdown"

    async def read(self):
        async with aiofiles.open(self.path, 'rb') as f:
            return await f.read()

async def process_local_files(markdown_dir=None):
    """
    Extract TOC and questions from every Markdown file in ``markdown_dir``
    and log a summary per file. Returns {filename: metadata}.
    """
    md_dir = Path(markdown_dir or settings.markdown_dir)

    if not md_dir.exists():
        logger.error(f"Markdown directory not found: {md_dir}")
        return {}

    processor = MarkdownProcessor(strict_toc=settings.strict_toc)

    md_files = sorted(md_dir.glob("*.md"))
    if not md_files:
        logger.warning(f"No Markdown files found in {md_dir}")
        return {}

    logger.info(f"Found {len(md_files)} Markdown files to process")

    summary = {}
    for md_path in md_files:
        try:
            logger.info(f"Processing {md_path.name}...")
            processed = await processor.process_markdown(LocalFile(md_path))
            metadata = processed["metadata"]
            summary[md_path.name] = metadata
            logger.info(
                f"Processed {md_path.name}: {metadata['toc_count']} TOC entries, "
                f"{metadata['question_count']} questions, "
                f"{metadata['skipped_toc_rows']} malformed TOC rows skipped"
            )
        except (UnicodeDecodeError, MalformedTocRowError) as e:
            logger.error(f"Error processing {md_path.name}: {str(e)}")

    logger.info("All processing complete.")
    return summary

def main():
    asyncio.run(process_local_files())

if __name__ == "__main__":
    main()
