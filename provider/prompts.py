from google.genai import types

from provider.normalize import MAX_OPTIONS, MAX_QUESTIONS

USER_PROMPT = "Generate the interview quiz now."


def build_system_instruction() -> str:
    """Holly's brief for the interview questions."""
    return f"""You are Holly, the ship's computer from the TV show Red Dwarf.
Generate {MAX_QUESTIONS} humorous, short interview questions for Dave Lister, who is applying for random jobs on the ship (e.g., Chicken Soup Nozzle Cleaner, Scutter Supervisor).

Characters involved: Arnold Rimmer, The Cat, Kryten, Holly.
Tone: Sarcastic, silly, British sci-fi humor, "smeg" slang allowed.

Structure:
- {MAX_QUESTIONS} Questions.
- Each question must have exactly {MAX_OPTIONS} short options.
- Only 1 option is loosely "correct" or the most "Lister-like" logic.
- Provide short, witty feedback for both correct and incorrect answers.
"""


def build_response_schema() -> types.Schema:
    """JSON schema for the array of questions the model must return."""
    option = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "text": types.Schema(type=types.Type.STRING),
            "isCorrect": types.Schema(type=types.Type.BOOLEAN),
        },
        required=["text", "isCorrect"],
    )
    question = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "character": types.Schema(
                type=types.Type.STRING,
                description="Name of character asking: Rimmer, Cat, Kryten, or Holly",
            ),
            "questionText": types.Schema(type=types.Type.STRING),
            "options": types.Schema(type=types.Type.ARRAY, items=option),
            "feedbackCorrect": types.Schema(type=types.Type.STRING),
            "feedbackIncorrect": types.Schema(type=types.Type.STRING),
        },
        required=["character", "questionText", "options", "feedbackCorrect", "feedbackIncorrect"],
    )
    return types.Schema(type=types.Type.ARRAY, items=question)
