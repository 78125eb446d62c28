"""
CLI Runner for the Brain Dump Classifier
Command-line tool to try the classifier on real text, no database needed.

Usage:
    python -m liferpg.core.cli_runner "I need to call the doctor today!"
    python -m liferpg.core.cli_runner --json "idea: learn the guitar someday"
    python -m liferpg.core.cli_runner            # runs the demo set
"""
import sys
from loguru import logger

from liferpg.core.classifier import BrainDumpClassifier
from liferpg.core.quest_generator import generate_quest_draft
from liferpg.models.classification import ClassificationResult
from liferpg.utils.observability import configure_logging


DEMO_DUMPS = [
    "I need to call the doctor today, it's urgent!",
    "I'm so overwhelmed and forgot everything, I need to remember to pay the bill",
    "Groceries:\n- buy oat milk\n- fix the kitchen tap\n- call mum about the party",
    "Had an idea for a song, maybe write it someday",
    "Feeling tired and frustrated with work, keep putting off the project report",
]


def print_result(text: str, result: ClassificationResult) -> None:
    print(f"\n{'─' * 70}")
    print(f"🧠 {text!r}")
    print(f"{'─' * 70}")
    print(f"   Interpretation: {result.interpretation}")
    print(f"   Action:         {result.suggested_action}")
    print(f"   Urgency:        {result.detected_urgency}")
    print(f"   Priority:       {result.priority}")
    print(f"   Mood:           {result.detected_mood}")
    print(f"   Emotions:       {', '.join(result.detected_emotions) or '-'}")
    print(f"   Categories:     {', '.join(result.categories)}")
    print(f"   Tags:           {', '.join(result.tags) or '-'}")
    print(f"   Skill trees:    {', '.join(result.suggested_skill_trees) or '-'}")
    print(f"   Quest type:     {result.suggested_quest_type}")
    print(f"   Confidence:     {result.confidence_score:.0%}")
    print(f"   Needs review:   {'yes' if result.requires_human_review else 'no'}")

    for task in result.extracted_tasks:
        print(f"   ✅ Task: {task.text} ({task.urgency}, {task.category})")
    for pattern in result.patterns:
        print(f"   🔁 Pattern: {pattern.pattern} ({pattern.confidence:.0%}) - {pattern.suggestion}")

    if result.extracted_tasks:
        draft = generate_quest_draft(result)
        print(f"   🗡️  Quest: {draft.quest_name} [{draft.quest_type}, {draft.difficulty}, {draft.xp_reward} XP]")


def main(argv: list[str]) -> int:
    configure_logging()

    as_json = "--json" in argv
    texts = [arg for arg in argv if arg != "--json"] or DEMO_DUMPS

    classifier = BrainDumpClassifier()

    for text in texts:
        result = classifier.classify(text)
        if as_json:
            print(result.model_dump_json(indent=2))
        else:
            print_result(text, result)

    logger.info(f"Classified {len(texts)} brain dump(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
