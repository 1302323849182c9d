import json

from google import genai
from google.genai import types

from knowledge.fallback_questions import FALLBACK_QUESTIONS
from provider.config import ProviderConfig
from provider.normalize import normalize_questions
from provider.prompts import USER_PROMPT, build_response_schema, build_system_instruction


class ProviderUnavailable(Exception):
    """Raised when Gemini can't be reached: no credentials, network or API errors."""
    pass


class MalformedResponse(Exception):
    """Raised when Gemini answers with something that isn't a usable question list."""
    pass


def fallback_questions() -> list:
    return normalize_questions(FALLBACK_QUESTIONS)


class GeminiQuestionProvider:
    """Generates the interview with Gemini, falling back to the built-in questions."""

    def __init__(self, config: ProviderConfig, client=None):
        self.config = config
        self._client = client

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.config.api_key)
        return self._client

    def fetch_questions(self) -> list:
        """Return normalized questions. Never raises for provider-side failures."""
        try:
            return self._generate()
        except ProviderUnavailable as e:
            print(f"  Warning: Gemini unavailable ({e}), using built-in questions")
        except MalformedResponse as e:
            print(f"  Warning: unusable Gemini response ({e}), using built-in questions")
        return fallback_questions()

    def _generate(self) -> list:
        if not self.config.has_credentials:
            raise ProviderUnavailable("API key is missing")

        config = types.GenerateContentConfig(
            system_instruction=build_system_instruction(),
            response_mime_type="application/json",
            response_schema=build_response_schema(),
        )

        print(f"  Using model: {self.config.model}")
        try:
            response = self._get_client().models.generate_content(
                model=self.config.model,
                contents=USER_PROMPT,
                config=config,
            )
        except Exception as e:
            raise ProviderUnavailable(str(e)) from e

        try:
            text = response.text
        except Exception as e:
            raise MalformedResponse(f"unreadable response: {e}") from e
        if not text:
            raise MalformedResponse("no response text generated")

        try:
            parsed = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise MalformedResponse(f"invalid JSON: {e}") from e

        questions = normalize_questions(parsed)
        if not questions:
            raise MalformedResponse("no questions in response")
        if any(not question.options for question in questions):
            raise MalformedResponse("question without options in response")
        return questions


class StaticQuestionProvider:
    """Serves a fixed payload, normalized like any live response."""

    def __init__(self, questions=None):
        self.questions = FALLBACK_QUESTIONS if questions is None else questions

    def fetch_questions(self) -> list:
        return normalize_questions(self.questions)
