# tests/test_question_bank.py

import logging

import pytest

from models.assessment_item import AssessmentItem
from models.cefr_level import CEFRLevel, Skill
from models.placement_questions import PLACEMENT_QUESTIONS
from services.question_bank_service import QuestionBankService


def test_every_item_has_valid_correct_index(default_bank):
    for item in default_bank.all_items():
        assert 0 <= item.correct_option_index < len(item.options), item.id


def test_default_bank_covers_every_tier(default_bank):
    assert len(default_bank) == 36
    for tier in CEFRLevel:
        assert len(default_bank.items_by_difficulty(tier)) == 6, tier


def test_all_items_keeps_declaration_order(default_bank):
    ids = [item.id for item in default_bank.all_items()]
    assert ids == [q.id for q in PLACEMENT_QUESTIONS]
    assert ids[0] == "a1_1"
    assert ids[-1] == "c2_6"


def test_items_by_difficulty_filters_on_tier(default_bank):
    b2 = default_bank.items_by_difficulty(CEFRLevel.B2)
    assert {item.difficulty for item in b2} == {CEFRLevel.B2}
    assert [item.id for item in b2] == [f"b2_{i}" for i in range(1, 7)]


def test_find_by_id_returns_none_when_absent(default_bank):
    assert default_bank.find_by_id("c1_4").difficulty == CEFRLevel.C1
    assert default_bank.find_by_id("does_not_exist") is None


def test_returned_lists_do_not_mutate_bank(default_bank):
    default_bank.all_items().clear()
    default_bank.items_by_difficulty(CEFRLevel.A1).pop()
    assert len(default_bank) == 36
    assert len(default_bank.items_by_difficulty(CEFRLevel.A1)) == 6


def test_duplicate_ids_are_rejected():
    item = PLACEMENT_QUESTIONS[0]
    with pytest.raises(ValueError):
        QuestionBankService([item, item])


def test_empty_tier_is_tolerated_and_logged(make_bank, caplog):
    with caplog.at_level(logging.WARNING, logger="services.question_bank_service"):
        bank = make_bank({CEFRLevel.A1: 2, CEFRLevel.B1: 2})
    assert bank.items_by_difficulty(CEFRLevel.C2) == []
    assert "C2" in caplog.text


def test_item_rejects_out_of_range_correct_index():
    with pytest.raises(ValueError):
        AssessmentItem(
            id="bad",
            text="?",
            options=("a", "b"),
            correct_option_index=2,
            difficulty=CEFRLevel.A1,
            skill=Skill.GRAMMAR,
        )


def test_item_rejects_empty_options():
    with pytest.raises(ValueError):
        AssessmentItem(
            id="bad",
            text="?",
            options=(),
            correct_option_index=0,
            difficulty=CEFRLevel.A1,
            skill=Skill.GRAMMAR,
        )


def test_item_coerces_string_enums():
    item = AssessmentItem(
        id="x",
        text="?",
        options=["a", "b"],
        correct_option_index=1,
        difficulty="B2",
        skill="reading",
    )
    assert item.difficulty is CEFRLevel.B2
    assert item.skill is Skill.READING
    assert item.options == ("a", "b")
