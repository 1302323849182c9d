import argparse
import os
import string

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

from provider.config import ProviderConfig
from provider.gemini import GeminiQuestionProvider, StaticQuestionProvider
from quiz.controller import QuizController
from quiz.models import Screen
from quiz.session import session_view

PITCH = (
    '"Listen up, you smeeeeeg heeeead! We need crew. '
    'Are you qualified to scrape the chicken soup nozzle? Prove it."'
)


def _prompt(text: str) -> str | None:
    """input() that returns None when the user bails out."""
    try:
        return input(text).strip()
    except (EOFError, KeyboardInterrupt):
        return None


def _build_controller(offline: bool) -> QuizController:
    if offline:
        return QuizController(StaticQuestionProvider())
    return QuizController(GeminiQuestionProvider(ProviderConfig.from_env()))


def _play_question(controller: QuizController) -> bool:
    """Walk one question through reveal, answer and advance. False means quit."""
    view = session_view(controller.session)
    question = view["question"]

    print(f"\n  {view['progress']}{'SCORE: ' + str(view['score']):>40}")
    print(f"  [{question['character']}]")
    print(f"  {question['questionText']}\n")

    if _prompt("  Press Enter to reveal answers... ") is None:
        return False
    view = session_view(controller.reveal())

    letters = string.ascii_uppercase
    for idx, opt in enumerate(view["question"]["options"]):
        print(f"    {letters[idx]}) {opt['text']}")

    while controller.session.selected_option_index is None:
        choice = _prompt("\n  Your answer: ")
        if choice is None:
            return False
        choice = choice.upper()
        if len(choice) != 1 or choice not in letters:
            print("  Pick one of the letters above.")
            continue
        controller.answer(letters.index(choice))

    print(f'\n  "{controller.session.feedback}"')
    label = "Finish Interview >" if controller.session.is_last_question else "Next Question >"
    if _prompt(f"  {label} ") is None:
        return False
    controller.advance()
    return True


def _show_result(controller: QuizController):
    result = session_view(controller.session)["result"]
    print(f"\n{'=' * 60}")
    print(f"  {result['verdict']}")
    print(f"  {result['message']}")
    print(f"  {result['summary']}")
    print(f"{'=' * 60}")


def run_terminal(controller: QuizController):
    """Play the interview in the terminal until the user quits."""
    print("=" * 60)
    print("  RED DWARF RECRUITMENT")
    print("=" * 60)

    while True:
        print(f"\n  {PITCH}\n")
        answer = _prompt("Begin interview? (y/n): ")
        if answer is None or answer.lower() not in ("", "y", "yes"):
            print("Goodbye!")
            return

        _, future = controller.begin_session()
        if future is None:
            continue
        print("  ACCESSING HOLLY'S DATABASE...")
        future.result()

        if controller.session.screen != Screen.PLAYING:
            print("  Holly's database is offline. Try again later.")
            continue

        while controller.session.screen == Screen.PLAYING:
            if not _play_question(controller):
                print("\nGoodbye!")
                return

        _show_result(controller)
        again = _prompt("\nTry again? (y/n): ")
        controller.restart()
        if again is None or again.lower() not in ("y", "yes"):
            print("Goodbye!")
            return


def run_cli():
    parser = argparse.ArgumentParser(
        description="Red Dwarf Recruitment: a job interview quiz run by Holly"
    )
    parser.add_argument(
        "--web",
        action="store_true",
        help="Launch the JSON API server instead of the terminal game",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port for --web (default: 5000)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip Gemini and use the built-in questions",
    )
    args = parser.parse_args()

    if args.web:
        from web import server
        server._controller = _build_controller(args.offline)
        server.start_server(port=args.port)
        return

    controller = _build_controller(args.offline)
    try:
        run_terminal(controller)
    finally:
        controller.shutdown(wait=False)


if __name__ == "__main__":
    run_cli()
