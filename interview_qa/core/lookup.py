from typing import Iterable, Optional

from interview_qa.models.schemas import QAEntry

NO_ANSWER_FOUND = "No answer found."


def find_question_for_title(title: str, questions: Iterable[QAEntry]) -> Optional[QAEntry]:
    """
    Return the first entry whose heading contains ``title``.

    Matching is a case-sensitive substring test against the raw heading, so a
    title contained in several headings binds to the earliest one.
    """
    return next((entry for entry in questions if title in entry.question), None)


def get_answer_for_title(title: str, questions: Iterable[QAEntry]) -> str:
    match = find_question_for_title(title, questions)
    return match.answer if match else NO_ANSWER_FOUND
