from dataclasses import dataclass, field
from enum import Enum


class Screen(Enum):
    START = "start"
    LOADING = "loading"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class AnswerOption:
    text: str
    is_correct: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "isCorrect": self.is_correct}


@dataclass(frozen=True)
class QuizQuestion:
    """One interview question, asked by a crew member."""

    character: str
    question_text: str
    options: tuple = ()
    feedback_correct: str = "Correct."
    feedback_incorrect: str = "Wrong."

    def to_dict(self) -> dict:
        """Render in the camelCase shape the question provider speaks."""
        return {
            "character": self.character,
            "questionText": self.question_text,
            "options": [opt.to_dict() for opt in self.options],
            "feedbackCorrect": self.feedback_correct,
            "feedbackIncorrect": self.feedback_incorrect,
        }


@dataclass(frozen=True)
class Session:
    """
    Snapshot of one playthrough. Never mutated; every intent produces a new
    Session via the functions in quiz.session.

    session_id is assigned when loading starts and identifies which provider
    call is allowed to fill in the questions.
    """

    screen: Screen = Screen.START
    questions: tuple = field(default_factory=tuple)
    current_index: int = 0
    score: int = 0
    revealed: bool = False
    selected_option_index: int | None = None
    feedback: str | None = None
    session_id: str | None = None

    @property
    def current_question(self) -> QuizQuestion | None:
        if self.screen != Screen.PLAYING:
            return None
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    @property
    def is_last_question(self) -> bool:
        return self.current_index + 1 >= len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.screen in (Screen.WON, Screen.LOST)
