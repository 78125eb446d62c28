"""
Brain Dump Classifier
Turns free text into a structured ClassificationResult using keyword tables.

Pipeline:
    raw text → urgency / emotions / mood / categories / tasks / patterns
             → tags, action, priority, review flag, confidence, summary

Every step is an independent pure function over the lowercased text (or the
raw text, where casing or line structure matters). The whole pipeline is
total: any string, including the empty string, yields a result.
"""
import time
from typing import List, Sequence
from loguru import logger

from liferpg.core import keywords
from liferpg.models.classification import (
    Category,
    ClassificationResult,
    DetectedPattern,
    Emotion,
    ExtractedEntities,
    ExtractedTask,
    Mood,
    Priority,
    SuggestedAction,
    SuggestedQuestType,
    Urgency,
)
from liferpg.utils.observability import log_classification


def _contains_any(text: str, words: Sequence[str]) -> bool:
    return any(word in text for word in words)


def count_words(raw_text: str) -> int:
    """
    Count words by splitting on the space character.

    Empty input counts as one word and runs of spaces count the empty
    fragments between them, so "" → 1 and "a  b" → 3.
    """
    return len(raw_text.split(" "))


def extract_entities(raw_text: str) -> ExtractedEntities:
    return ExtractedEntities(
        word_count=count_words(raw_text),
        has_exclamation="!" in raw_text,
        has_question="?" in raw_text,
        has_capital_words=keywords.CAPITAL_RUN.search(raw_text) is not None,
        text_length=len(raw_text),
    )


def detect_urgency(text: str) -> Urgency:
    """First matching table wins: now > today > this_week > someday."""
    for urgency, words in keywords.URGENCY_KEYWORDS.items():
        if _contains_any(text, words):
            return urgency
    return Urgency.UNKNOWN


def detect_emotions(text: str) -> List[Emotion]:
    return [
        emotion
        for emotion, words in keywords.EMOTION_KEYWORDS.items()
        if _contains_any(text, words)
    ]


def detect_mood(text: str, emotions: Sequence[Emotion]) -> Mood:
    """
    Direct keyword match first, then inference from emotions.
    """
    for mood, words in keywords.MOOD_KEYWORDS.items():
        if _contains_any(text, words):
            return mood

    if Emotion.EXCITEMENT in emotions or Emotion.MOTIVATION in emotions:
        return Mood.GOOD
    if Emotion.ANXIETY in emotions or Emotion.SADNESS in emotions:
        return Mood.BAD
    if Emotion.FRUSTRATION in emotions and Emotion.FATIGUE in emotions:
        return Mood.TERRIBLE

    return Mood.OKAY


def categorize(text: str) -> List[Category]:
    categories = [
        category
        for category, words in keywords.CATEGORY_KEYWORDS.items()
        if _contains_any(text, words)
    ]
    return categories or [Category.GENERAL]


def extract_tasks(raw_text: str) -> List[ExtractedTask]:
    """
    Apply every task pattern to the raw text.

    Patterns overlap ("need to remember to pay" matches twice) and the
    duplicates are kept: downstream quest typing counts raw extractions.
    """
    tasks: List[ExtractedTask] = []

    for pattern in keywords.TASK_PATTERNS:
        for match in pattern.finditer(raw_text):
            fragment = match.group(1).strip()
            if len(fragment) <= keywords.MIN_TASK_LENGTH:
                continue

            lowered = fragment.lower()
            tasks.append(ExtractedTask(
                text=fragment,
                urgency=detect_urgency(lowered),
                category=categorize(lowered)[0],
            ))

    return tasks


def detect_patterns(text: str) -> List[DetectedPattern]:
    return [
        DetectedPattern(
            pattern=rule.name,
            confidence=rule.confidence,
            frequency=rule.frequency,
            suggestion=rule.suggestion,
        )
        for rule in keywords.PATTERN_RULES
        if _contains_any(text, rule.triggers)
    ]


def generate_tags(
    text: str,
    categories: Sequence[Category],
    emotions: Sequence[Emotion],
) -> List[str]:
    tags = [str(category) for category in categories]
    tags.extend(str(emotion) for emotion in emotions)
    tags.extend(
        tag
        for tag, triggers in keywords.TAG_TRIGGERS.items()
        if _contains_any(text, triggers)
    )
    # dict.fromkeys keeps first-seen order
    return list(dict.fromkeys(tags))


def suggest_action(
    text: str,
    tasks: Sequence[ExtractedTask],
    urgency: Urgency,
) -> SuggestedAction:
    if tasks and urgency != Urgency.UNKNOWN:
        return SuggestedAction.CREATE_QUEST if len(tasks) > 1 else SuggestedAction.CREATE_TASK

    if _contains_any(text, keywords.REMINDER_TRIGGERS):
        return SuggestedAction.CREATE_REMINDER

    if _contains_any(text, keywords.REFLECTION_TRIGGERS):
        return SuggestedAction.ADD_TO_REFLECTION

    if _contains_any(text, keywords.NOTE_TRIGGERS):
        return SuggestedAction.ADD_NOTE

    return SuggestedAction.CREATE_TASK if tasks else SuggestedAction.ADD_NOTE


def calculate_priority(
    urgency: Urgency,
    emotions: Sequence[Emotion],
    has_exclamation: bool,
    has_capital_words: bool,
) -> Priority:
    if urgency == Urgency.NOW or Emotion.ANXIETY in emotions:
        return Priority.CRITICAL
    if urgency == Urgency.TODAY or has_exclamation or has_capital_words:
        return Priority.HIGH
    if urgency == Urgency.THIS_WEEK or Emotion.FRUSTRATION in emotions:
        return Priority.MEDIUM
    return Priority.LOW


def requires_human_review(
    text: str,
    emotions: Sequence[Emotion],
    priority: Priority,
    word_count: int,
) -> bool:
    # Mixed anxiety and sadness
    if Emotion.ANXIETY in emotions and Emotion.SADNESS in emotions:
        return True

    if priority == Priority.CRITICAL:
        return True

    if word_count > keywords.MAX_REVIEW_WORDS or word_count < keywords.MIN_REVIEW_WORDS:
        return True

    return _contains_any(text, keywords.CRISIS_KEYWORDS)


def calculate_confidence(
    word_count: int,
    categories: Sequence[Category],
    task_count: int,
) -> float:
    """
    Heuristic evidence score in [0.5, 1.0].

    The "general" fallback category is not evidence and does not count.
    """
    matched = sum(1 for category in categories if category != Category.GENERAL)
    score = 0.5

    if word_count > 10:
        score += 0.2
    if word_count > 50:
        score += 0.1

    if matched > 0:
        score += 0.1
    if matched > 1:
        score += 0.05

    if task_count > 0:
        score += 0.1
    if task_count > 2:
        score += 0.05

    return min(score, 1.0)


def build_interpretation(
    raw_text: str,
    categories: Sequence[Category],
    tasks: Sequence[ExtractedTask],
    emotions: Sequence[Emotion],
    urgency: Urgency,
) -> str:
    parts = [f"This appears to be a {'/'.join(categories)}-related brain dump."]

    if emotions:
        parts.append(f"Detected emotions: {', '.join(emotions)}.")

    if tasks:
        parts.append(f"Found {len(tasks)} potential task(s) or action item(s).")

    if urgency != Urgency.UNKNOWN:
        parts.append(f"Urgency level: {urgency}.")

    if len(raw_text) < keywords.BRIEF_CAPTURE_LENGTH:
        parts.append("This is a brief capture that might benefit from expansion.")

    return " ".join(parts)


def suggest_skill_trees(categories: Sequence[Category]) -> List[str]:
    skills: List[str] = []
    for category in categories:
        skills.extend(keywords.SKILL_TREES_BY_CATEGORY.get(category, ()))
    return list(dict.fromkeys(skills))


def suggest_quest_type(urgency: Urgency, priority: Priority, task_count: int) -> SuggestedQuestType:
    if urgency == Urgency.NOW or priority == Priority.CRITICAL:
        return SuggestedQuestType.URGENT
    if task_count > 2:
        return SuggestedQuestType.MULTI_STEP
    if urgency == Urgency.TODAY:
        return SuggestedQuestType.DAILY
    if urgency == Urgency.THIS_WEEK:
        return SuggestedQuestType.WEEKLY
    return SuggestedQuestType.STANDARD


def classify_brain_dump(raw_text: str) -> ClassificationResult:
    """
    Classify a brain dump. Pure and deterministic: identical input always
    yields an equal result.

    Args:
        raw_text: The user's free-text capture, any length, may be empty

    Returns:
        Fully populated ClassificationResult
    """
    text = raw_text.strip().lower()
    entities = extract_entities(raw_text)

    urgency = detect_urgency(text)
    emotions = detect_emotions(text)
    mood = detect_mood(text, emotions)
    categories = categorize(text)
    tasks = extract_tasks(raw_text)
    patterns = detect_patterns(text)
    tags = generate_tags(text, categories, emotions)

    action = suggest_action(text, tasks, urgency)
    priority = calculate_priority(
        urgency, emotions, entities.has_exclamation, entities.has_capital_words
    )

    return ClassificationResult(
        interpretation=build_interpretation(raw_text, categories, tasks, emotions, urgency),
        suggested_action=action,
        detected_urgency=urgency,
        detected_emotions=emotions,
        detected_mood=mood,
        categories=categories,
        extracted_tasks=tasks,
        patterns=patterns,
        tags=tags,
        suggested_skill_trees=suggest_skill_trees(categories),
        suggested_quest_type=suggest_quest_type(urgency, priority, len(tasks)),
        extracted_entities=entities,
        confidence_score=calculate_confidence(entities.word_count, categories, len(tasks)),
        requires_human_review=requires_human_review(text, emotions, priority, entities.word_count),
        priority=priority,
    )


class BrainDumpClassifier:
    """
    Injectable wrapper around classify_brain_dump that adds structured logging.
    Holds no state between calls.
    """

    def __init__(self):
        logger.info("BrainDumpClassifier initialized with keyword rules")

    def classify(self, raw_text: str, **log_context) -> ClassificationResult:
        """
        Classify text and log the derived labels.

        Args:
            raw_text: Brain dump text
            **log_context: Extra fields for the structured log (e.g. brain_dump_id)
        """
        started = time.perf_counter()
        result = classify_brain_dump(raw_text)
        duration_ms = (time.perf_counter() - started) * 1000

        log_classification(
            urgency=result.detected_urgency.value,
            priority=result.priority.value,
            suggested_action=result.suggested_action.value,
            confidence_score=result.confidence_score,
            requires_human_review=result.requires_human_review,
            duration_ms=duration_ms,
            task_count=len(result.extracted_tasks),
            **log_context,
        )
        return result
