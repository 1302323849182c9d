"""Built-in interview, served whenever the model can't be reached or answers garbage."""

RIMMER_QUESTION = {
    "character": "Rimmer",
    "questionText": "Space Corps Directive 34124 states what?",
    "options": [
        {"text": "No officer with false teeth should attempt oral sex in zero gravity.", "isCorrect": True},
        {"text": "Always salute with the left hand on Tuesdays.", "isCorrect": False},
        {"text": "Never eat gazpacho soup warm.", "isCorrect": False},
    ],
    "feedbackCorrect": "Precisely, Lister! For once you're not a total smeg head.",
    "feedbackIncorrect": "Wrong! You are a total gimboid.",
}

CAT_QUESTION = {
    "character": "The Cat",
    "questionText": "What is the most important rule of space travel?",
    "options": [
        {"text": "Check fuel levels.", "isCorrect": False},
        {"text": "Always look cool, even when exploding.", "isCorrect": True},
        {"text": "Calculate jump coordinates.", "isCorrect": False},
    ],
    "feedbackCorrect": "YEAAAAH! You got style, buddy!",
    "feedbackIncorrect": "Uncool. Majorly uncool.",
}

KRYTEN_QUESTION = {
    "character": "Kryten",
    "questionText": "Sir, would you like some toast?",
    "options": [
        {"text": "No, I want a muffin.", "isCorrect": True},
        {"text": "Yes, please.", "isCorrect": False},
        {"text": "Only if it's brown.", "isCorrect": False},
    ],
    "feedbackCorrect": "Ah, excellent choice Sir. No toast it is.",
    "feedbackIncorrect": "The toaster will be most displeased, Sir.",
}

HOLLY_QUESTION = {
    "character": "Holly",
    "questionText": "What's the IQ of 6000 PE teachers?",
    "options": [
        {"text": "6000.", "isCorrect": False},
        {"text": "The same as a glass of water.", "isCorrect": True},
        {"text": "Genius level.", "isCorrect": False},
    ],
    "feedbackCorrect": "Correct. Or the square root of a shoe.",
    "feedbackIncorrect": "Wrong. It's actually equivalent to a glow worm.",
}

LISTER_QUESTION = {
    "character": "Lister",
    "questionText": "What's the best way to cure a space hangover?",
    "options": [
        {"text": "Vitamins and rest.", "isCorrect": False},
        {"text": "Triple fried egg sandwich with chili sauce and chutney.", "isCorrect": True},
        {"text": "Jogging.", "isCorrect": False},
    ],
    "feedbackCorrect": "You beauty! I can taste it already.",
    "feedbackIncorrect": "Jogging?! Are you trying to kill me?",
}

FALLBACK_QUESTIONS = [
    RIMMER_QUESTION,
    CAT_QUESTION,
    KRYTEN_QUESTION,
    HOLLY_QUESTION,
    LISTER_QUESTION,
]
