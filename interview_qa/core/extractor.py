"""
Section extraction for the interview questions README.

The document carries two sentinel-delimited blocks: a Markdown table listing
the question titles, and the questions themselves as level-3 headings each
followed by their answer. Both extractors are pure functions over the text.
"""
import logging
import re
from enum import Enum
from functools import reduce
from typing import Any, Callable, Iterator, List, NamedTuple, Optional, Tuple

from interview_qa.models.schemas import QAEntry, TocEntry

logger = logging.getLogger(__name__)

TOC_START = "<!-- TOC_START -->"
TOC_END = "<!-- TOC_END -->"
QUESTIONS_START = "<!-- QUESTIONS_START -->"
QUESTIONS_END = "<!-- QUESTIONS_END -->"

QUESTION_MARKER = "###"
SUBHEADING_MARKER = "####"

_LINK_CELL = re.compile(r"\[[^\]]*\]")
_WHITESPACE = re.compile(r"\s+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SectionState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


class MalformedTocRowError(ValueError):
    """A line inside the TOC section is not a table row with a title cell"""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed TOC row at line {line_number}: {line!r}")


def split_lines(markdown: str) -> List[str]:
    """Split on CRLF, CR or LF. A trailing break leaves a final empty line."""
    return _LINE_BREAK.split(markdown)


def _next_state(line: str, start: str, end: str) -> Optional[SectionState]:
    """Return the new state if the line is a sentinel, None otherwise"""
    if start in line:
        return SectionState.INSIDE
    if end in line:
        return SectionState.OUTSIDE
    return None


# ---------------------------------------------------------------------------
# Table of contents
# ---------------------------------------------------------------------------

def slugify(title: str) -> str:
    """Lowercase the title and collapse each whitespace run into one hyphen."""
    return _WHITESPACE.sub("-", title.lower())


def _title_cell(fields: List[str]) -> str:
    # Rows are either "| No | [Title](#a) |" or "| No | No | [Title](#a) |";
    # the title is the first linked cell from the third field on, else the third field.
    for field in fields[2:]:
        if _LINK_CELL.search(field):
            return field
    return fields[2]


def parse_toc_row(line: str) -> Optional[str]:
    """
    Return the display title of a TOC table row.

    Returns None for a line without enough ``|`` separators to have a title
    cell. Header and separator rows still return their text; filtering them
    is the caller's job.
    """
    fields = line.split("|")
    if len(fields) < 3:
        return None

    cell = _title_cell(fields).strip()
    cell = cell.replace("[", "", 1).replace("]", "!", 1)
    return cell.split("!")[0]


def _is_table_chrome(title: str) -> bool:
    return title.startswith("Ques") or title.startswith("---")


def iter_toc_entries(
    markdown: str,
    strict: bool = False,
    on_malformed: Optional[Callable[[int, str], None]] = None,
) -> Iterator[TocEntry]:
    """
    Lazily yield TOC entries in document order.

    Malformed rows inside the TOC section are skipped with a warning, or
    raise MalformedTocRowError when ``strict`` is set. ``on_malformed`` is
    called with the line number and text of every skipped row.
    """
    state = SectionState.OUTSIDE

    for line_number, line in enumerate(split_lines(markdown), start=1):
        new_state = _next_state(line, TOC_START, TOC_END)
        if new_state is not None:
            state = new_state
            continue
        if state is not SectionState.INSIDE or not line.strip():
            continue

        title = parse_toc_row(line)
        if title is None:
            if strict:
                raise MalformedTocRowError(line_number, line)
            logger.warning(f"Skipping malformed TOC row at line {line_number}: {line!r}")
            if on_malformed is not None:
                on_malformed(line_number, line)
            continue

        if _is_table_chrome(title):
            continue

        yield TocEntry(title=title, id=slugify(title))


def extract_toc_data(
    markdown: str,
    strict: bool = False,
    on_malformed: Optional[Callable[[int, str], None]] = None,
) -> List[TocEntry]:
    """Extract the table of contents as a list."""
    return list(iter_toc_entries(markdown, strict=strict, on_malformed=on_malformed))


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

# Persistent stack of (head, rest) pairs, newest first; pushing never copies.
Stack = Optional[Tuple[Any, Any]]


def _push(stack: Stack, item: Any) -> Stack:
    return (item, stack)


def _unwind(stack: Stack) -> List[Any]:
    """Items of the stack in push order."""
    items = []
    while stack is not None:
        item, stack = stack
        items.append(item)
    items.reverse()
    return items


class PendingQuestion(NamedTuple):
    question: str = ""
    answer_lines: Stack = None

    def with_line(self, line: str) -> "PendingQuestion":
        return self._replace(answer_lines=_push(self.answer_lines, line))

    @property
    def answer(self) -> str:
        return "".join(f"{line}\n" for line in _unwind(self.answer_lines))

    def is_complete(self) -> bool:
        return bool(self.question) and self.answer_lines is not None

    def to_entry(self) -> QAEntry:
        return QAEntry(question=self.question, answer=self.answer)


class QuestionFold(NamedTuple):
    state: SectionState = SectionState.OUTSIDE
    pending: PendingQuestion = PendingQuestion()
    completed: Stack = None


def is_question_heading(line: str) -> bool:
    """Level-3 heading: has the ``###`` marker but not the deeper ``####``."""
    return QUESTION_MARKER in line and SUBHEADING_MARKER not in line


def _emit(acc: QuestionFold) -> Stack:
    if acc.pending.is_complete():
        return _push(acc.completed, acc.pending.to_entry())
    return acc.completed


def step_question_fold(acc: QuestionFold, line: str) -> QuestionFold:
    """Advance the accumulator by one line."""
    new_state = _next_state(line, QUESTIONS_START, QUESTIONS_END)
    if new_state is not None:
        return acc._replace(state=new_state)
    if acc.state is not SectionState.INSIDE:
        return acc

    if is_question_heading(line):
        return acc._replace(completed=_emit(acc), pending=PendingQuestion(question=line))

    return acc._replace(pending=acc.pending.with_line(line))


def finish_question_fold(acc: QuestionFold) -> List[QAEntry]:
    """Flush the last pending question, if it has an answer."""
    return _unwind(_emit(acc))


def extract_question_data(markdown: str) -> List[QAEntry]:
    """
    Group the questions section into question/answer pairs.

    A heading with no answer lines before the next heading is dropped.
    """
    acc = reduce(step_question_fold, split_lines(markdown), QuestionFold())
    return finish_question_fold(acc)
