"""Tests for quiz.controller: intents, the loading guard and provider failures."""

import threading

import pytest

from provider.gemini import StaticQuestionProvider
from quiz.controller import QuizController
from quiz.models import Screen, Session
from quiz.session import InvalidIntent


def _payload(n=2):
    return [
        {
            "character": "Cat",
            "questionText": f"Question {i}?",
            "options": [
                {"text": "Cool", "isCorrect": True},
                {"text": "Uncool", "isCorrect": False},
                {"text": "Very uncool", "isCorrect": False},
            ],
            "feedbackCorrect": "Ooh!",
            "feedbackIncorrect": "Eww.",
        }
        for i in range(n)
    ]


class BlockingProvider:
    """Provider that waits until released, to observe the LOADING screen."""

    def __init__(self, payload):
        self.release = threading.Event()
        self.calls = 0
        self._inner = StaticQuestionProvider(payload)

    def fetch_questions(self):
        self.calls += 1
        self.release.wait(timeout=5)
        return self._inner.fetch_questions()


class FailingProvider:
    def fetch_questions(self):
        raise RuntimeError("fallback path exploded")


@pytest.fixture
def controller():
    ctrl = QuizController(StaticQuestionProvider(_payload()))
    yield ctrl
    ctrl.shutdown()


def _start(ctrl):
    _, future = ctrl.begin_session()
    assert future is not None
    return future.result(timeout=5)


class NoneProvider:
    def fetch_questions(self):
        return None


class RawProvider:
    """Hands back the unnormalized payload, bypassing StaticQuestionProvider."""

    def __init__(self, payload):
        self.payload = payload

    def fetch_questions(self):
        return self.payload


class TestBeginSession:
    def test_loads_questions(self, controller):
        session = _start(controller)
        assert session.screen == Screen.PLAYING
        assert len(session.questions) == 2
        assert controller.session is session

    def test_returns_loading_snapshot(self, controller):
        loading, future = controller.begin_session()
        assert loading.screen == Screen.LOADING
        assert loading.session_id is not None
        assert future.result(timeout=5).screen == Screen.PLAYING

    def test_loading_is_visible_before_provider_returns(self):
        provider = BlockingProvider(_payload())
        ctrl = QuizController(provider)
        try:
            loading, future = ctrl.begin_session()
            assert loading.screen == Screen.LOADING
            assert ctrl.session is loading

            provider.release.set()
            assert future.result(timeout=5).screen == Screen.PLAYING
        finally:
            ctrl.shutdown()

    def test_reentrant_begin_is_noop(self):
        provider = BlockingProvider(_payload())
        ctrl = QuizController(provider)
        try:
            loading, future = ctrl.begin_session()

            session, second = ctrl.begin_session()
            assert second is None
            assert session is loading
            assert ctrl.session is loading

            provider.release.set()
            future.result(timeout=5)
            assert provider.calls == 1
            assert ctrl.session.screen == Screen.PLAYING
        finally:
            ctrl.shutdown()

    def test_reentrant_begin_strict_raises(self):
        provider = BlockingProvider(_payload())
        ctrl = QuizController(provider, strict=True)
        try:
            _, future = ctrl.begin_session()
            with pytest.raises(InvalidIntent):
                ctrl.begin_session()
            provider.release.set()
            future.result(timeout=5)
        finally:
            ctrl.shutdown()

    def test_provider_exception_returns_to_start(self):
        ctrl = QuizController(FailingProvider())
        try:
            assert _start(ctrl) == Session()
        finally:
            ctrl.shutdown()

    def test_empty_payload_returns_to_start(self):
        ctrl = QuizController(StaticQuestionProvider([]))
        try:
            assert _start(ctrl).screen == Screen.START
        finally:
            ctrl.shutdown()

    def test_none_payload_returns_to_start_and_recovers(self):
        ctrl = QuizController(NoneProvider())
        try:
            assert _start(ctrl) == Session()

            ctrl.provider = StaticQuestionProvider(_payload())
            assert _start(ctrl).screen == Screen.PLAYING
        finally:
            ctrl.shutdown()

    def test_raw_payload_is_normalized(self):
        ctrl = QuizController(RawProvider([{"questionText": "X", "options": [{"text": "a", "isCorrect": True}]}]))
        try:
            session = _start(ctrl)
            assert session.screen == Screen.PLAYING
            assert session.questions[0].character == "Holly"
            assert session.questions[0].feedback_correct == "Correct."

            ctrl.reveal()
            assert ctrl.answer(0).score == 1
            assert ctrl.advance().screen == Screen.WON
        finally:
            ctrl.shutdown()

    def test_raw_payload_truncated_to_five(self):
        ctrl = QuizController(RawProvider(_payload(8)))
        try:
            assert len(_start(ctrl).questions) == 5
        finally:
            ctrl.shutdown()

    def test_question_without_options_returns_to_start(self):
        ctrl = QuizController(StaticQuestionProvider([{"questionText": "Hi", "options": "oops"}]))
        try:
            assert _start(ctrl) == Session()
            assert ctrl.restart() == Session()
        finally:
            ctrl.shutdown()



class TestPlaythrough:
    def test_win(self, controller):
        _start(controller)
        for _ in range(2):
            controller.reveal()
            controller.answer(0)
            controller.advance()
        assert controller.session.screen == Screen.WON
        assert controller.session.score == 2

    def test_lose_then_restart(self, controller):
        _start(controller)
        controller.reveal()
        controller.answer(0)
        controller.advance()
        controller.reveal()
        controller.answer(1)
        assert controller.session.feedback == "Eww."
        controller.advance()

        assert controller.session.screen == Screen.LOST
        assert controller.session.score == 1

        assert controller.restart() == Session()
        assert _start(controller).score == 0

    def test_second_answer_ignored(self, controller):
        _start(controller)
        controller.reveal()
        controller.answer(1)
        session = controller.answer(0)
        assert session.selected_option_index == 1
        assert session.score == 0

    def test_strict_rejects_answer_before_reveal(self):
        ctrl = QuizController(StaticQuestionProvider(_payload()), strict=True)
        try:
            _start(ctrl)
            with pytest.raises(InvalidIntent):
                ctrl.answer(0)
            assert ctrl.session.selected_option_index is None
        finally:
            ctrl.shutdown()
