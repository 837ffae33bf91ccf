import logging
from typing import Optional

import httpx

from interview_qa.core.extractor import MalformedTocRowError
from interview_qa.core.processor import MarkdownProcessor
from interview_qa.models.schemas import ExtractionResult

logger = logging.getLogger(__name__)


class DocumentFetcher:
    """Fetches the remote README and extracts its sections"""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        processor: Optional[MarkdownProcessor] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.processor = processor or MarkdownProcessor()
        # Tests pass an httpx.MockTransport here
        self.transport = transport

    async def fetch_text(self) -> str:
        """GET the document. Raises httpx.HTTPError or httpx.InvalidURL on failure."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            return response.text

    async def fetch_and_extract_data(self) -> ExtractionResult:
        """
        Fetch the document and run both extractors.
        Any failure is logged and yields empty results; there is no partial success.
        """
        try:
            markdown = await self.fetch_text()
            logger.info(f"Fetched {len(markdown)} characters from {self.url}")
            return self.processor.process_text(markdown)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error fetching data from {self.url}: {str(e)}")
        except MalformedTocRowError as e:
            logger.error(f"Error extracting data from {self.url}: {str(e)}")
        except Exception as e:
            logger.error(f"Unexpected error loading {self.url}: {str(e)}")
        return ExtractionResult()
