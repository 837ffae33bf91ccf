import asyncio
import logging
from typing import List, Optional

from interview_qa.core.fetcher import DocumentFetcher
from interview_qa.core.lookup import NO_ANSWER_FOUND, find_question_for_title
from interview_qa.models.schemas import ExtractionResult, QAEntry, TocEntry

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory TOC and questions for the configured document"""

    def __init__(self, fetcher: DocumentFetcher):
        self.fetcher = fetcher
        self._result = ExtractionResult()
        self._loaded = False
        self._lock: Optional[asyncio.Lock] = None

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def toc(self) -> List[TocEntry]:
        return self._result.toc

    @property
    def questions(self) -> List[QAEntry]:
        return self._result.questions

    def _get_lock(self) -> asyncio.Lock:
        # Created lazily so the lock binds to the running loop
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    async def _fetch(self) -> None:
        self._result = await self.fetcher.fetch_and_extract_data()
        self._loaded = True
        logger.info(
            f"Loaded {len(self._result.toc)} TOC entries and "
            f"{len(self._result.questions)} questions from {self.fetcher.url}"
        )

    async def load(self) -> ExtractionResult:
        """Fetch and extract, replacing whatever was held before"""
        async with self._get_lock():
            await self._fetch()
        return self._result

    async def ensure_loaded(self) -> ExtractionResult:
        """Load on first use; later calls return the held result"""
        if not self._loaded:
            async with self._get_lock():
                if not self._loaded:
                    await self._fetch()
        return self._result

    async def reload(self) -> ExtractionResult:
        return await self.load()

    def answer_for(self, title: str) -> Optional[QAEntry]:
        return find_question_for_title(title, self.questions)

    def answer_text_for(self, title: str) -> str:
        match = self.answer_for(title)
        return match.answer if match else NO_ANSWER_FOUND
