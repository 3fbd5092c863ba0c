"""
Mock AI feedback for free-text answers.
Four pseudo-random percentages in fixed ranges plus canned sentences keyed by tech stack.
Not an evaluation algorithm: the answer text is only checked for emptiness.
"""
from __future__ import annotations

import random
from typing import Any

SCORE_RANGES: dict[str, tuple[int, int]] = {
    "accuracy": (60, 95),
    "completeness": (55, 95),
    "clarity": (65, 98),
    "relevance": (70, 100),
}

_TEMPLATES: dict[str, dict[str, list[str]]] = {
    "javascript": {
        "strengths": [
            "Good grasp of JavaScript scoping rules.",
            "Clear explanation of how the language behaves at runtime.",
        ],
        "improvements": [
            "Mention hoisting and the temporal dead zone explicitly.",
            "Add a short code example to illustrate the difference.",
        ],
    },
    "react": {
        "strengths": [
            "Solid understanding of React component patterns.",
            "Correct use of hook terminology.",
        ],
        "improvements": [
            "Discuss the rules of hooks and why they exist.",
            "Compare with class component lifecycle methods.",
        ],
    },
    "algorithms": {
        "strengths": [
            "Correct reasoning about complexity.",
            "Good identification of the worst-case input.",
        ],
        "improvements": [
            "State the average case alongside the worst case.",
            "Explain how pivot selection changes the bound.",
        ],
    },
    "default": {
        "strengths": [
            "The answer addresses the core of the question.",
            "Structure is easy to follow.",
        ],
        "improvements": [
            "Support the main points with a concrete example.",
            "Cover edge cases and trade-offs.",
        ],
    },
}


def _templates_for(tech_stack: str | None) -> dict[str, list[str]]:
    return _TEMPLATES.get((tech_stack or "").strip().lower(), _TEMPLATES["default"])


def generate_mock_feedback(
    tech_stack: str | None,
    answer: str | None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """Return scores, strengths, improvements and a summary sentence."""
    if not (answer or "").strip():
        return {
            **{k: 0 for k in SCORE_RANGES},
            "overall": 0,
            "strengths": [],
            "improvements": ["Provide an answer to receive feedback."],
            "summary": "No answer was submitted.",
        }

    rng = rng or random.Random()
    scores = {k: rng.randint(lo, hi) for k, (lo, hi) in SCORE_RANGES.items()}
    overall = round(sum(scores.values()) / len(scores))
    templates = _templates_for(tech_stack)
    stack_label = (tech_stack or "").strip() or "this topic"

    if overall >= 85:
        verdict = f"Excellent answer demonstrating strong {stack_label} knowledge."
    elif overall >= 70:
        verdict = f"Good answer with a solid understanding of {stack_label}."
    else:
        verdict = f"Reasonable attempt; review the key {stack_label} concepts."

    return {
        **scores,
        "overall": overall,
        "strengths": list(templates["strengths"]),
        "improvements": list(templates["improvements"]),
        "summary": f"{verdict} Overall score: {overall}%.",
    }


def format_feedback_text(feedback: dict[str, Any]) -> str:
    """Flatten feedback into the text stored in user_responses.ai_feedback."""
    lines = [feedback["summary"]]
    if feedback["strengths"]:
        lines.append("Strengths: " + " ".join(feedback["strengths"]))
    if feedback["improvements"]:
        lines.append("Improvements: " + " ".join(feedback["improvements"]))
    lines.append(
        "Scores - accuracy {accuracy}%, completeness {completeness}%, "
        "clarity {clarity}%, relevance {relevance}%".format(**feedback)
    )
    return "\n".join(lines)
