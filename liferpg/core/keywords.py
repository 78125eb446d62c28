"""
Keyword Tables
Read-only lookup tables driving the brain dump classifier.

Order matters: urgency and mood are first-match-wins over the table order,
emotions and categories report matches in table order.
"""
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from liferpg.models.classification import (
    Category,
    Emotion,
    Mood,
    PatternFrequency,
    Urgency,
)


URGENCY_KEYWORDS = MappingProxyType({
    Urgency.NOW: ("urgent", "asap", "now", "immediately", "emergency", "crisis", "help", "panic"),
    Urgency.TODAY: ("today", "deadline", "due", "meeting", "appointment"),
    Urgency.THIS_WEEK: ("this week", "soon", "friday", "monday", "tuesday", "wednesday", "thursday"),
    Urgency.SOMEDAY: ("someday", "eventually", "maybe", "consider", "idea", "think about"),
})

EMOTION_KEYWORDS = MappingProxyType({
    Emotion.ANXIETY: ("worried", "anxious", "stressed", "panic", "overwhelmed", "scared"),
    Emotion.EXCITEMENT: ("excited", "awesome", "amazing", "great", "fantastic", "love"),
    Emotion.FRUSTRATION: ("frustrated", "annoyed", "angry", "mad", "hate", "ugh"),
    Emotion.SADNESS: ("sad", "depressed", "down", "terrible", "awful", "horrible"),
    Emotion.CONFUSION: ("confused", "lost", "dont know", "unclear", "mixed up"),
    Emotion.MOTIVATION: ("motivated", "ready", "determined", "focused", "energized"),
    Emotion.FATIGUE: ("tired", "exhausted", "drained", "burnt out", "worn out"),
})

MOOD_KEYWORDS = MappingProxyType({
    Mood.TERRIBLE: ("terrible", "awful", "horrible", "worst", "crisis"),
    Mood.BAD: ("bad", "sad", "frustrated", "stressed", "worried"),
    Mood.OKAY: ("okay", "fine", "normal", "alright", "meh"),
    Mood.GOOD: ("good", "better", "positive", "happy", "nice"),
    Mood.AMAZING: ("amazing", "awesome", "fantastic", "excellent", "perfect"),
})

CATEGORY_KEYWORDS = MappingProxyType({
    Category.WORK: ("work", "job", "meeting", "project", "deadline", "boss", "client", "office"),
    Category.PERSONAL: ("personal", "family", "relationship", "friend", "home", "life"),
    Category.HEALTH: ("health", "doctor", "exercise", "diet", "sleep", "medication", "therapy"),
    Category.FINANCE: ("money", "budget", "bill", "payment", "expense", "income", "bank"),
    Category.LEARNING: ("learn", "study", "course", "book", "skill", "practice", "research"),
    Category.CREATIVE: ("creative", "art", "music", "write", "design", "photography", "idea"),
    Category.MAINTENANCE: ("clean", "organize", "fix", "repair", "maintain", "update"),
    Category.SOCIAL: ("social", "party", "event", "hangout", "visit", "call", "text"),
})

# Categories without an entry (personal, maintenance, social, general) suggest nothing
SKILL_TREES_BY_CATEGORY = MappingProxyType({
    Category.WORK: ("productivity", "organization", "communication"),
    Category.HEALTH: ("self-care", "wellness", "routine-building"),
    Category.LEARNING: ("focus", "memory", "skill-development"),
    Category.CREATIVE: ("creativity", "expression", "innovation"),
    Category.FINANCE: ("organization", "planning", "responsibility"),
})

# Matched against the original-case text. A capture never crosses a line
# terminator (\r, \n, U+2028, U+2029), digits are ASCII only, and the
# end anchor is the very end of input: \Z
_LINE = r"[^\r\n\u2028\u2029]+?"
_TASK_FLAGS = re.IGNORECASE | re.ASCII

TASK_PATTERNS = (
    re.compile(rf"need to ({_LINE})(?:\.|\Z)", _TASK_FLAGS),
    re.compile(rf"should ({_LINE})(?:\.|\Z)", _TASK_FLAGS),
    re.compile(rf"must ({_LINE})(?:\.|\Z)", _TASK_FLAGS),
    re.compile(rf"have to ({_LINE})(?:\.|\Z)", _TASK_FLAGS),
    re.compile(rf"remember to ({_LINE})(?:\.|\Z)", _TASK_FLAGS),
    re.compile(rf"don't forget ({_LINE})(?:\.|\Z)", _TASK_FLAGS),
    re.compile(rf"- ({_LINE})(?:\n|\Z)", _TASK_FLAGS),
    re.compile(rf"\* ({_LINE})(?:\n|\Z)", _TASK_FLAGS),
    re.compile(rf"\d+\. ({_LINE})(?:\n|\Z)", _TASK_FLAGS),
)
MIN_TASK_LENGTH = 3

CAPITAL_RUN = re.compile(r"[A-Z]{2,}")


@dataclass(frozen=True)
class PatternRule:
    """A fixed behavioural-pattern trigger."""
    name: str
    triggers: Tuple[str, ...]
    confidence: float
    suggestion: str
    frequency: PatternFrequency = PatternFrequency.RECURRING


PATTERN_RULES = (
    PatternRule(
        "memory_issues",
        ("forgot", "remember"),
        0.8,
        "Consider using reminders or memory aids",
    ),
    PatternRule(
        "overwhelm",
        ("overwhelmed", "too much"),
        0.9,
        "Break tasks into smaller, manageable pieces",
    ),
    PatternRule(
        "procrastination",
        ("procrastinating", "putting off"),
        0.85,
        "Use time-blocking or the Pomodoro technique",
    ),
)

# Special-case tags on top of categories and emotions
TAG_TRIGGERS = MappingProxyType({
    "urgent": ("urgent", "asap"),
    "idea": ("idea", "thought"),
    "reminder": ("reminder", "remember"),
})

REMINDER_TRIGGERS = ("reminder", "remember", "don't forget")
REFLECTION_TRIGGERS = ("feeling", "thinking", "reflect")
NOTE_TRIGGERS = ("idea", "thought", "note")

CRISIS_KEYWORDS = ("crisis", "emergency", "help", "suicide", "harm")

MIN_REVIEW_WORDS = 3
MAX_REVIEW_WORDS = 200
BRIEF_CAPTURE_LENGTH = 20
