"""
Static substitutes used when the AI call is unavailable or fails.
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from careerforge.core.utils import join_list
from careerforge.models.schemas import CoverLetterRequest

QUIZ_SIZE = 10

NO_AI_TIP = (
    "Focus on revising the key concepts behind the questions you missed. "
    "Re-read explanations and practice with similar problems."
)
AI_ERROR_TIP = "Review the relevant topics and practice targeted exercises to strengthen weak areas."


# -----------------------------
# Cover letter
# -----------------------------
def fallback_cover_letter(user, data: CoverLetterRequest) -> str:
    experience = user.experience if user.experience is not None else 0
    industry = user.industry or "the industry"
    skills = join_list(user.skills) or "communication, problem solving"
    name = user.name or "Candidate"

    return f"""Dear Hiring Manager,

I am excited to apply for the {data.job_title} position at {data.company_name}. With {experience} year(s) of experience in {industry}, I have developed strong skills in {skills} that align well with your needs.

In my previous roles, I have contributed to outcomes such as:
- Delivering high-quality features on time
- Collaborating effectively with cross-functional teams
- Continuously improving processes and documentation

I am particularly interested in this opportunity at {data.company_name} because it aligns with my background and goals. I believe my experience and proactive approach will enable me to contribute quickly and effectively to your team.

Thank you for considering my application. I would welcome the opportunity to discuss how I can add value to {data.company_name}.

Sincerely,
{name}
"""


# -----------------------------
# Industry insights
# -----------------------------
def default_insights(industry: Optional[str] = None) -> Dict[str, Any]:
    # Same table for every industry
    return {
        "salary_ranges": [
            {"role": "Junior Engineer", "min": 30000, "max": 50000, "median": 40000, "location": "Remote"},
            {"role": "Mid Engineer", "min": 50000, "max": 90000, "median": 70000, "location": "Remote"},
            {"role": "Senior Engineer", "min": 90000, "max": 140000, "median": 115000, "location": "Remote"},
            {"role": "Manager", "min": 100000, "max": 160000, "median": 130000, "location": "Remote"},
            {"role": "Director", "min": 140000, "max": 200000, "median": 170000, "location": "Remote"},
        ],
        "growth_rate": 8,
        "demand_level": "High",
        "top_skills": ["Problem Solving", "Communication", "Leadership", "Time Management", "Teamwork"],
        "market_outlook": "Positive",
        "key_trends": ["AI Adoption", "Automation", "Remote Work", "Cloud Migration", "Data-Driven Decisions"],
        "recommended_skills": ["SQL", "Python", "Project Management", "Public Speaking", "Writing"],
    }


# -----------------------------
# Quiz
# -----------------------------
def _question(question: str, options: List[str], correct_answer: str, explanation: str) -> Dict[str, Any]:
    return {
        "question": question,
        "options": options,
        "correct_answer": correct_answer,
        "explanation": explanation,
    }


def _quiz_pool(industry: str) -> List[Dict[str, Any]]:
    return [
        _question(
            f"Which of the following best describes a core design concept in {industry}?",
            ["Loose coupling", "Global state everywhere", "Hidden side-effects", "No testing needed"],
            "Loose coupling",
            "Loose coupling improves maintainability and testability.",
        ),
        _question(
            "Which HTTP method is idempotent?",
            ["POST", "PUT", "PATCH", "CONNECT"],
            "PUT",
            "PUT replaces a resource and is idempotent by definition.",
        ),
        _question(
            "What is the time complexity of binary search on a sorted array?",
            ["O(n)", "O(log n)", "O(n log n)", "O(1)"],
            "O(log n)",
            "Each step halves the search space.",
        ),
        _question(
            "Which data structure operates on a FIFO principle?",
            ["Stack", "Queue", "Tree", "Graph"],
            "Queue",
            "Queues process elements First-In-First-Out.",
        ),
        _question(
            "Which SQL clause filters rows before grouping?",
            ["WHERE", "HAVING", "GROUP BY", "ORDER BY"],
            "WHERE",
            "WHERE filters rows; HAVING filters groups.",
        ),
        _question(
            "What does ACID stand for in databases?",
            [
                "Atomicity, Consistency, Isolation, Durability",
                "Accuracy, Consistency, Isolation, Durability",
                "Atomicity, Concurrency, Integrity, Durability",
                "Availability, Consistency, Isolation, Durability",
            ],
            "Atomicity, Consistency, Isolation, Durability",
            "ACID are key transaction properties.",
        ),
        _question(
            "Which HTTP status code represents 'Unauthorized' (no valid credentials)?",
            ["400", "401", "403", "404"],
            "401",
            "401 indicates authentication is required or failed.",
        ),
        _question(
            "Which of these is a NoSQL database?",
            ["PostgreSQL", "MySQL", "MongoDB", "SQLite"],
            "MongoDB",
            "MongoDB is a document-oriented NoSQL database.",
        ),
        _question(
            "What does CSS Flexbox primarily control?",
            ["2D grid layout", "One-dimensional layout", "Server rendering", "Accessibility"],
            "One-dimensional layout",
            "Flexbox lays out items in a row or column.",
        ),
        _question(
            "Which JavaScript array method returns a shallow copy without mutating the original?",
            ["push", "slice", "splice", "sort"],
            "slice",
            "slice() with no arguments returns a new array containing the same elements.",
        ),
        _question(
            "What is the purpose of unit testing?",
            [
                "Test integrated systems only",
                "Verify individual components in isolation",
                "Measure performance",
                "Deploy automatically",
            ],
            "Verify individual components in isolation",
            "Unit tests validate small pieces of code independently.",
        ),
        _question(
            "Which cloud model gives you most control over OS and runtime?",
            ["SaaS", "PaaS", "IaaS", "FaaS"],
            "IaaS",
            "IaaS provides virtualized infrastructure with OS-level control.",
        ),
        _question(
            "What does 'idempotent' mean in API design?",
            [
                "Multiple calls have the same effect as a single call",
                "Calls are always cached",
                "Calls are always asynchronous",
                "Calls must be retried",
            ],
            "Multiple calls have the same effect as a single call",
            "Idempotent operations can be safely retried.",
        ),
        _question(
            "Which one is NOT a JavaScript primitive?",
            ["string", "number", "object", "boolean"],
            "object",
            "Objects are reference types; not primitives.",
        ),
        _question(
            "What does Git 'rebase' do?",
            [
                "Combines multiple commits into one",
                "Moves/rewrites commits onto another base",
                "Discards local changes",
                "Creates a new branch",
            ],
            "Moves/rewrites commits onto another base",
            "Rebase reapplies commits on a new base tip.",
        ),
        _question(
            "Which practice helps keep a production deployment reversible?",
            ["Blue-green deployment", "Editing servers by hand", "Skipping staging", "Deleting old builds"],
            "Blue-green deployment",
            "Blue-green keeps the previous environment ready to switch back to.",
        ),
    ]


def fallback_quiz(industry: Optional[str] = None, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    """
    Pick QUIZ_SIZE questions from the static pool in random order, with each
    question's options shuffled independently.
    """
    rng = rng or random.Random()
    pool = _quiz_pool((industry or "software").lower())

    # random.shuffle is an in-place Fisher-Yates shuffle
    rng.shuffle(pool)

    selected = []
    for q in pool[:QUIZ_SIZE]:
        options = list(q["options"])
        rng.shuffle(options)
        selected.append({**q, "options": options})
    return selected
