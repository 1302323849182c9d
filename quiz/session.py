"""
Transition functions for the quiz session.

Each intent is a pure function from one Session snapshot to the next. Calls
made outside their legal screen are ignored (the same snapshot comes back)
unless strict=True, in which case InvalidIntent is raised instead.

    START -> LOADING -> PLAYING -> WON | LOST -> START
"""

from dataclasses import replace

from quiz.models import Screen, Session

WIN_VERDICT = "HIRED!"
WIN_LINE = "CELEBRATORY DISCO MODE ACTIVATED!"
LOSE_VERDICT = "REJECTED"
LOSE_LINE = "You are a total Smeg Head."


class InvalidIntent(ValueError):
    """Raised in strict mode when an intent is not legal for the current screen."""

    def __init__(self, intent: str, screen: Screen, reason: str):
        self.intent = intent
        self.screen = screen
        self.reason = reason
        super().__init__(f"{intent} not allowed on {screen.name}: {reason}")


def reject(session: Session, intent: str, reason: str, strict: bool) -> Session:
    if strict:
        raise InvalidIntent(intent, session.screen, reason)
    print(f"  Ignored {intent} on {session.screen.name}: {reason}")
    return session


def _clear_question_state(session: Session, **changes) -> Session:
    return replace(
        session,
        revealed=False,
        selected_option_index=None,
        feedback=None,
        **changes,
    )


def begin_loading(session: Session, session_id: str, strict: bool = False) -> Session:
    if session.screen != Screen.START:
        return reject(session, "begin_session", "a session is already under way", strict)
    return Session(screen=Screen.LOADING, session_id=session_id)


def load_succeeded(session: Session, session_id: str, questions, strict: bool = False) -> Session:
    """Apply the provider's questions, if they belong to the session still loading."""
    if session.screen != Screen.LOADING or session.session_id != session_id:
        return reject(session, "load_succeeded", "stale provider response", strict)

    questions = tuple(questions)
    if not questions:
        print("  Warning: provider returned no questions, back to start")
        return Session()
    # A question without options can never be answered, so the session could never end
    if any(not question.options for question in questions):
        print("  Warning: provider returned a question without options, back to start")
        return Session()

    return _clear_question_state(
        session,
        screen=Screen.PLAYING,
        questions=questions,
        current_index=0,
        score=0,
    )


def load_failed(session: Session, session_id: str, strict: bool = False) -> Session:
    if session.screen != Screen.LOADING or session.session_id != session_id:
        return reject(session, "load_failed", "stale provider response", strict)
    return Session()


def reveal_options(session: Session, strict: bool = False) -> Session:
    if session.screen != Screen.PLAYING:
        return reject(session, "reveal_options", "no question on screen", strict)
    if session.revealed:
        return session
    return replace(session, revealed=True)


def submit_answer(session: Session, index: int, strict: bool = False) -> Session:
    """Lock in an answer for the current question. The first answer wins."""
    if session.screen != Screen.PLAYING:
        return reject(session, "submit_answer", "no question on screen", strict)
    if not session.revealed:
        return reject(session, "submit_answer", "options not revealed yet", strict)
    if session.selected_option_index is not None:
        return reject(session, "submit_answer", "question already answered", strict)

    question = session.current_question
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(question.options):
        return reject(
            session,
            "submit_answer",
            f"option {index!r} out of range for {len(question.options)} options",
            strict,
        )

    if question.options[index].is_correct:
        return replace(
            session,
            selected_option_index=index,
            score=session.score + 1,
            feedback=question.feedback_correct,
        )
    return replace(
        session,
        selected_option_index=index,
        feedback=question.feedback_incorrect,
    )


def advance(session: Session, strict: bool = False) -> Session:
    """Move on to the next question, or settle the result after the last one."""
    if session.screen != Screen.PLAYING:
        return reject(session, "advance", "no question on screen", strict)
    if session.feedback is None:
        return reject(session, "advance", "current question not answered", strict)

    if session.current_index + 1 < len(session.questions):
        return _clear_question_state(session, current_index=session.current_index + 1)

    # Win only on a clean sheet
    if session.score == len(session.questions):
        return replace(session, screen=Screen.WON)
    return replace(session, screen=Screen.LOST)


def restart(session: Session, strict: bool = False) -> Session:
    if session.screen in (Screen.LOADING, Screen.PLAYING):
        return reject(session, "restart", "session still in progress", strict)
    return Session()


def session_view(session: Session) -> dict:
    """
    Everything the presentation layer may observe about a session.

    Option correctness stays hidden until an answer has been locked in.
    """
    view = {
        "screen": session.screen.value,
        "currentIndex": session.current_index,
        "questionCount": len(session.questions),
        "score": session.score,
        "revealed": session.revealed,
        "selectedOptionIndex": session.selected_option_index,
        "feedback": session.feedback,
        "question": None,
        "result": None,
    }

    question = session.current_question
    if question is not None:
        answered = session.selected_option_index is not None
        options = []
        for opt in question.options:
            entry = {"text": opt.text}
            if answered:
                entry["isCorrect"] = opt.is_correct
            options.append(entry)
        view["question"] = {
            "character": question.character,
            "questionText": question.question_text,
            "options": options,
        }
        view["progress"] = f"Q{session.current_index + 1}/{len(session.questions)}"
        view["isLastQuestion"] = session.is_last_question

    if session.is_finished:
        won = session.screen == Screen.WON
        view["result"] = {
            "verdict": WIN_VERDICT if won else LOSE_VERDICT,
            "message": WIN_LINE if won else LOSE_LINE,
            "summary": f"You scored {session.score} out of {len(session.questions)}.",
        }

    return view
