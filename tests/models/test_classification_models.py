"""
Classification Model Tests
Validation, immutability and JSON shape of the classifier output contract.
"""
import pytest
from pydantic import ValidationError

from liferpg.core.classifier import classify_brain_dump
from liferpg.models.classification import (
    Category,
    ClassificationResult,
    DetectedPattern,
    ExtractedTask,
    PatternFrequency,
    SuggestedQuestType,
    Urgency,
)


@pytest.fixture
def urgent_result() -> ClassificationResult:
    return classify_brain_dump("I need to call the doctor today, it's urgent!")


class TestClassificationResult:
    """Test suite for ClassificationResult."""

    def test_json_uses_label_strings(self, urgent_result):
        """Enums serialize as their wire labels."""
        data = urgent_result.model_dump(mode="json")

        assert data["suggested_action"] == "create_task"
        assert data["detected_urgency"] == "now"
        assert data["detected_mood"] == "okay"
        assert data["categories"] == ["health", "social"]
        assert data["priority"] == "critical"
        assert data["suggested_quest_type"] == "urgent"
        assert data["extracted_tasks"][0] == {
            "text": "call the doctor today, it's urgent!",
            "urgency": "now",
            "category": "health",
        }
        assert data["extracted_entities"]["word_count"] == 9

    def test_multi_step_label(self):
        """The multi-step quest type keeps its hyphen on the wire."""
        assert SuggestedQuestType.MULTI_STEP.value == "multi-step"

    def test_validates_from_json(self, urgent_result):
        """A JSON dump validates back into an equal result."""
        restored = ClassificationResult.model_validate_json(urgent_result.model_dump_json())
        assert restored == urgent_result

    def test_frozen(self, urgent_result):
        """Results are immutable once built."""
        with pytest.raises(ValidationError):
            urgent_result.priority = "low"

    def test_categories_cannot_be_empty(self, urgent_result):
        """At least one category is always present."""
        data = urgent_result.model_dump()
        data["categories"] = []

        with pytest.raises(ValidationError):
            ClassificationResult.model_validate(data)

    def test_confidence_bounds(self, urgent_result):
        """Confidence must stay within [0, 1]."""
        data = urgent_result.model_dump()
        data["confidence_score"] = 1.5

        with pytest.raises(ValidationError):
            ClassificationResult.model_validate(data)

    def test_unknown_label_rejected(self, urgent_result):
        data = urgent_result.model_dump()
        data["detected_urgency"] = "yesterday"

        with pytest.raises(ValidationError):
            ClassificationResult.model_validate(data)


class TestNestedModels:

    def test_extracted_task(self):
        task = ExtractedTask(text="pay rent", urgency="today", category="finance")

        assert task.urgency == Urgency.TODAY
        assert task.category == Category.FINANCE

    def test_pattern_confidence_bounds(self):
        with pytest.raises(ValidationError):
            DetectedPattern(
                pattern="overwhelm",
                confidence=-0.1,
                frequency=PatternFrequency.RECURRING,
            )

    def test_pattern_suggestion_optional(self):
        pattern = DetectedPattern(
            pattern="overwhelm",
            confidence=0.9,
            frequency=PatternFrequency.FIRST_TIME,
        )
        assert pattern.suggestion is None
