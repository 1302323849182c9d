import concurrent.futures
import threading
import uuid

from provider.normalize import normalize_questions
from quiz import session as transitions
from quiz.models import Screen, Session


class QuizController:
    """Holds the current session and feeds user intents through the transitions.

    The only asynchronous step is the question provider call started by
    begin_session(). It runs on the executor and its result is applied only to
    the session it was started for.
    """

    def __init__(self, provider, executor=None, strict: bool = False):
        self.provider = provider
        self.strict = strict
        self._executor = executor or concurrent.futures.ThreadPoolExecutor(max_workers=1)
        self._lock = threading.Lock()
        self._session = Session()

    @property
    def session(self) -> Session:
        return self._session

    def begin_session(self):
        """Enter LOADING and start fetching questions.

        Returns (session, future). session is the snapshot taken under the lock
        before the provider call was submitted: LOADING when the session
        started, the unchanged snapshot when the intent was ignored. future is
        None when ignored, otherwise it resolves to the snapshot after the
        provider result was applied.
        """
        with self._lock:
            if self._session.screen != Screen.START:
                ignored = transitions.reject(
                    self._session, "begin_session", "a session is already under way", self.strict
                )
                return ignored, None
            session_id = uuid.uuid4().hex
            self._session = transitions.begin_loading(self._session, session_id)
            loading = self._session

        print(f"  Loading questions for session {session_id[:8]}")
        return loading, self._executor.submit(self._load, session_id)

    def _load(self, session_id: str) -> Session:
        try:
            questions = normalize_questions(self.provider.fetch_questions())
        except Exception as e:
            print(f"  Warning: question provider failed: {e}")
            with self._lock:
                self._session = transitions.load_failed(self._session, session_id)
                return self._session

        with self._lock:
            self._session = transitions.load_succeeded(self._session, session_id, questions)
            return self._session

    def reveal(self) -> Session:
        return self._apply(transitions.reveal_options)

    def answer(self, index: int) -> Session:
        return self._apply(transitions.submit_answer, index)

    def advance(self) -> Session:
        return self._apply(transitions.advance)

    def restart(self) -> Session:
        return self._apply(transitions.restart)

    def _apply(self, transition, *args) -> Session:
        with self._lock:
            self._session = transition(self._session, *args, strict=self.strict)
            return self._session

    def shutdown(self, wait: bool = True):
        self._executor.shutdown(wait=wait)
