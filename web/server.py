from flask import Flask, request, jsonify

from quiz.session import InvalidIntent, session_view

app = Flask(__name__)

# Lazy-initialized controller (created on first request, after .env is loaded)
_controller = None


def _get_controller():
    """Lazy-initialize the quiz controller on first use."""
    global _controller
    if _controller is None:
        from provider.config import ProviderConfig
        from provider.gemini import GeminiQuestionProvider
        from quiz.controller import QuizController
        _controller = QuizController(GeminiQuestionProvider(ProviderConfig.from_env()))
    return _controller


def _state_response(session):
    return jsonify(session_view(session))


@app.errorhandler(InvalidIntent)
def invalid_intent(e):
    return jsonify({"error": str(e), "screen": e.screen.value}), 409


@app.route("/api/state", methods=["GET"])
def get_state():
    """Current session snapshot."""
    return _state_response(_get_controller().session)


@app.route("/api/start", methods=["POST"])
def start():
    """Begin a session. Returns the LOADING snapshot straight away; poll /api/state.

    When a session is already under way the intent is ignored and the current
    snapshot comes back with 200.
    """
    session, future = _get_controller().begin_session()
    if future is None:
        return _state_response(session)
    return _state_response(session), 202


@app.route("/api/reveal", methods=["POST"])
def reveal():
    return _state_response(_get_controller().reveal())


@app.route("/api/answer", methods=["POST"])
def answer():
    """Lock in an answer. Body: {"index": <option index>}."""
    data = request.get_json(silent=True) or {}
    index = data.get("index")
    if isinstance(index, bool) or not isinstance(index, int):
        return jsonify({"error": "index must be an integer"}), 400
    return _state_response(_get_controller().answer(index))


@app.route("/api/next", methods=["POST"])
def next_question():
    return _state_response(_get_controller().advance())


@app.route("/api/restart", methods=["POST"])
def restart():
    return _state_response(_get_controller().restart())


def start_server(port=5000):
    """Start the quiz API server."""
    print(f"\n{'=' * 60}")
    print(f"  Red Dwarf Recruitment")
    print(f"  API listening on http://localhost:{port}/api/state")
    print(f"{'=' * 60}\n")
    app.run(host="0.0.0.0", port=port, debug=False)
