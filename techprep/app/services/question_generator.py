"""
Keyword-based interview question generation from extracted resume text.
Fixed sequence of case-insensitive substring checks; each hit appends canned questions.
"""
from __future__ import annotations

from techprep.app.schemas.resume import GeneratedQuestion

# (keywords, questions) - order matters, output follows this order
_KEYWORD_RULES: tuple[tuple[tuple[str, ...], tuple[tuple[str, str, str], ...]], ...] = (
    (
        ("javascript", "js"),
        (
            ("JavaScript", "Explain the difference between var, let, and const in JavaScript.", "Medium"),
            ("JavaScript", "What is event delegation and why is it useful?", "Hard"),
        ),
    ),
    (
        ("react",),
        (
            ("React", "What are React Hooks and how do they differ from class components?", "Medium"),
            ("React", "Explain the React component lifecycle methods.", "Hard"),
        ),
    ),
    (
        ("python",),
        (
            ("Python", "Explain the difference between lists and tuples in Python.", "Easy"),
            ("Python", "What are Python decorators and how do you use them?", "Hard"),
        ),
    ),
    (
        ("java",),
        (
            ("Java", "What is the difference between abstract classes and interfaces in Java?", "Medium"),
            ("Java", "Explain Java memory management and garbage collection.", "Hard"),
        ),
    ),
    (
        ("database", "sql"),
        (
            ("Database", "Explain ACID properties in database transactions.", "Hard"),
            ("Database", "What is the difference between SQL and NoSQL databases?", "Medium"),
        ),
    ),
    (
        ("aws", "cloud"),
        (
            ("Cloud Computing", "What are the different types of cloud service models (IaaS, PaaS, SaaS)?", "Medium"),
            ("AWS", "Explain the difference between EC2, Lambda, and ECS.", "Hard"),
        ),
    ),
    (
        ("docker", "container"),
        (
            ("DevOps", "What are the benefits of containerization with Docker?", "Medium"),
        ),
    ),
    (
        ("kubernetes", "k8s"),
        (
            ("DevOps", "Explain Kubernetes pods, services, and deployments.", "Hard"),
        ),
    ),
    (
        ("senior", "lead", "manager", "architect"),
        (
            ("Leadership", "How do you handle technical disagreements within your team?", "Medium"),
            ("Architecture", "Describe how you would design a scalable system for high traffic.", "Hard"),
        ),
    ),
)

# Always appended, whatever the resume says
GENERAL_QUESTIONS: tuple[tuple[str, str, str], ...] = (
    ("General", "Describe your most challenging project and how you overcame the difficulties.", "Medium"),
    ("Problem Solving", "How do you approach debugging a complex issue in your code?", "Medium"),
    ("Best Practices", "What are some code review best practices you follow?", "Easy"),
)


def _to_questions(rows: tuple[tuple[str, str, str], ...]) -> list[GeneratedQuestion]:
    return [GeneratedQuestion(category=c, question=q, difficulty=d) for c, q, d in rows]


def generate_questions_from_resume(extracted_text: str | None) -> list[GeneratedQuestion]:
    """
    Build the interview question list for a resume.

    Pure function of ``extracted_text.lower()``. Plain substring tests, so
    "javascript" also triggers the Java rule and "json" triggers JavaScript.
    No dedup or ranking.
    """
    lower_text = (extracted_text or "").lower()
    questions: list[GeneratedQuestion] = []
    for keywords, rows in _KEYWORD_RULES:
        if any(k in lower_text for k in keywords):
            questions.extend(_to_questions(rows))
    questions.extend(_to_questions(GENERAL_QUESTIONS))
    return questions
