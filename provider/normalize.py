"""
Coerce untrusted question payloads into QuizQuestion objects.

The model is asked for a fixed JSON shape but nothing guarantees it. Every
payload passes through normalize_questions() before it reaches a session,
the built-in fallback included.
"""

from collections.abc import Mapping

from quiz.models import AnswerOption, QuizQuestion

MAX_QUESTIONS = 5
MAX_OPTIONS = 3

DEFAULT_CHARACTER = "Holly"
DEFAULT_QUESTION_TEXT = "Question unavailable."
DEFAULT_FEEDBACK_CORRECT = "Correct."
DEFAULT_FEEDBACK_INCORRECT = "Wrong."


def normalize_questions(raw) -> list:
    """Return at most MAX_QUESTIONS questions, or [] if raw is not a sequence."""
    if not isinstance(raw, (list, tuple)):
        return []
    return [normalize_question(item) for item in raw[:MAX_QUESTIONS]]


def normalize_question(raw) -> QuizQuestion:
    """Fill in defaults field by field; a question is never rejected outright."""
    if isinstance(raw, QuizQuestion):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raw = {}

    return QuizQuestion(
        character=_text(raw.get("character"), DEFAULT_CHARACTER),
        question_text=_text(raw.get("questionText"), DEFAULT_QUESTION_TEXT),
        options=_options(raw.get("options")),
        feedback_correct=_text(raw.get("feedbackCorrect"), DEFAULT_FEEDBACK_CORRECT),
        feedback_incorrect=_text(raw.get("feedbackIncorrect"), DEFAULT_FEEDBACK_INCORRECT),
    )


def _text(value, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _options(raw) -> tuple:
    if not isinstance(raw, (list, tuple)):
        return ()

    options = []
    for item in raw[:MAX_OPTIONS]:
        if isinstance(item, AnswerOption):
            options.append(item)
        elif isinstance(item, Mapping):
            text = item.get("text")
            options.append(AnswerOption(
                text=text if isinstance(text, str) else "",
                is_correct=item.get("isCorrect") is True,
            ))
    return tuple(options)
