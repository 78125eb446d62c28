"""
Tests for quest draft generation and brain dump XP rewards.
"""
import pytest

from liferpg.core.classifier import classify_brain_dump
from liferpg.core.quest_generator import (
    DEFAULT_QUEST_NAME,
    MAX_QUEST_NAME_LENGTH,
    brain_dump_xp_reward,
    generate_quest_draft,
)
from liferpg.models.quest import Difficulty, QuestType


class TestGenerateQuestDraft:

    def test_urgent_single_task(self):
        result = classify_brain_dump("I need to call the doctor today, it's urgent!")
        draft = generate_quest_draft(result)

        assert draft.quest_name == "Call the doctor today, it's urgent!"
        assert draft.quest_type == QuestType.MAIN
        assert draft.difficulty == Difficulty.HARD
        # hard base (100) + one objective (10)
        assert draft.xp_reward == 110
        assert draft.quest_description == result.interpretation
        assert draft.skill_tree_rewards == ["self-care", "wellness", "routine-building"]
        assert draft.confidence_score == result.confidence_score

    def test_list_becomes_epic_with_ordered_objectives(self):
        text = "Groceries:\n- buy oat milk\n- fix the kitchen tap\n* call mum\n1. book the dentist"
        draft = generate_quest_draft(classify_brain_dump(text))

        assert draft.quest_type == QuestType.EPIC
        assert draft.difficulty == Difficulty.EASY
        assert draft.quest_name == "Buy oat milk"
        assert [o.objective_order for o in draft.objectives] == [1, 2, 3, 4]
        assert [o.objective_text for o in draft.objectives] == [
            "buy oat milk",
            "fix the kitchen tap",
            "call mum",
            "book the dentist",
        ]
        assert all(o.is_required for o in draft.objectives)
        assert draft.xp_reward == 25 + 4 * 10

    def test_no_tasks_uses_default_name(self):
        draft = generate_quest_draft(classify_brain_dump("xyz abc qqq"))

        assert draft.quest_name == DEFAULT_QUEST_NAME
        assert draft.quest_type == QuestType.SIDE
        assert draft.difficulty == Difficulty.EASY
        assert draft.objectives == []
        assert draft.xp_reward == 25

    def test_long_task_name_truncated(self):
        result = classify_brain_dump("I need to " + "a" * 80)
        draft = generate_quest_draft(result)

        assert len(draft.quest_name) == MAX_QUEST_NAME_LENGTH
        assert draft.quest_name.endswith("...")
        assert draft.quest_name.startswith("A")
        # Objective keeps the full text
        assert draft.objectives[0].objective_text == "a" * 80

    def test_overrides(self):
        result = classify_brain_dump("I need to call the doctor today, it's urgent!")
        draft = generate_quest_draft(
            result,
            quest_name="See the doctor",
            quest_type=QuestType.DAILY,
            difficulty=Difficulty.LEGENDARY,
        )

        assert draft.quest_name == "See the doctor"
        assert draft.quest_type == QuestType.DAILY
        assert draft.difficulty == Difficulty.LEGENDARY
        assert draft.xp_reward == 200 + 10

    def test_weekly_and_daily_mapping(self):
        weekly = generate_quest_draft(classify_brain_dump("sort the garage this week"))
        daily = generate_quest_draft(classify_brain_dump("dentist appointment"))

        assert weekly.quest_type == QuestType.WEEKLY
        assert weekly.difficulty == Difficulty.NORMAL
        assert daily.quest_type == QuestType.DAILY
        assert daily.difficulty == Difficulty.NORMAL


class TestBrainDumpXpReward:

    @pytest.mark.parametrize("quests,expected", [(0, 25), (1, 35), (3, 55)])
    def test_reward(self, quests, expected):
        assert brain_dump_xp_reward(quests) == expected

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            brain_dump_xp_reward(-1)
