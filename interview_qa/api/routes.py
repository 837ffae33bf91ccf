from fastapi import APIRouter, UploadFile, File, HTTPException, Query
from typing import List
import logging

from interview_qa.config import settings
from interview_qa.core.extractor import MalformedTocRowError
from interview_qa.core.fetcher import DocumentFetcher
from interview_qa.core.lookup import NO_ANSWER_FOUND
from interview_qa.core.processor import MarkdownProcessor, is_markdown_upload, source_name, summarize
from interview_qa.core.render import render_markdown
from interview_qa.core.store import DocumentStore
from interview_qa.core.view_state import show_tooltip
from interview_qa.models.schemas import (
    AnswerResponse,
    ClickEvent,
    ExtractionResponse,
    QAEntry,
    TocEntry,
    TooltipState,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# Initialize processor and the store for the remote document
processor = MarkdownProcessor(strict_toc=settings.strict_toc)
store = DocumentStore(
    DocumentFetcher(settings.document_url, timeout=settings.fetch_timeout, processor=processor)
)

@router.get("/toc", response_model=List[TocEntry])
async def get_toc():
    """
    Table of contents of the remote document, in document order.
    """
    result = await store.ensure_loaded()
    return result.toc

@router.get("/questions", response_model=List[QAEntry])
async def get_questions():
    """
    All question/answer pairs of the remote document.
    """
    result = await store.ensure_loaded()
    return result.questions

@router.get("/answer", response_model=AnswerResponse)
async def get_answer(title: str = Query(..., min_length=1)):
    """
    Answer for a TOC title: the first question whose heading contains the title.
    """
    await store.ensure_loaded()
    match = store.answer_for(title)
    answer = match.answer if match else NO_ANSWER_FOUND
    return AnswerResponse(
        title=title,
        answer=answer,
        found=match is not None,
        html=render_markdown(answer),
    )

@router.post("/tooltip", response_model=TooltipState)
async def click_toc_item(event: ClickEvent):
    """
    Handle a click on a TOC item and return the panel state to display.
    """
    await store.ensure_loaded()
    return show_tooltip(store.answer_text_for(event.title), event.x, event.y)

@router.post("/reload", response_model=ExtractionResponse)
async def reload_document():
    """
    Fetch the remote document again and re-extract both sections.
    """
    result = await store.reload()
    return ExtractionResponse(
        source=store.fetcher.url,
        toc=result.toc,
        questions=result.questions,
        metadata=summarize(result),
    )

@router.post("/upload-markdown", response_model=ExtractionResponse)
async def upload_markdown(file: UploadFile = File(...)):
    """
    Upload a Markdown file and extract its table of contents and questions.
    """
    if not is_markdown_upload(file.filename, file.content_type):
        raise HTTPException(status_code=400, detail="File must be Markdown")

    try:
        processed = await processor.process_markdown(file)
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded")
    except MalformedTocRowError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error processing Markdown: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error processing Markdown: {str(e)}")

    result = processed["result"]
    return ExtractionResponse(
        source=source_name(file.filename),
        toc=result.toc,
        questions=result.questions,
        metadata=processed["metadata"],
    )
