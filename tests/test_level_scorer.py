# tests/test_level_scorer.py

import pytest

from models.cefr_level import CEFRLevel, Confidence, PlacementLevel
from models.graded_answer import GradedAnswer
from services.exceptions import EmptyAnswerSetError
from services.level_scorer_service import LevelScorerService


def _answers(correct, total, question_id="a1_1"):
    return [
        GradedAnswer(question_id=question_id, selected_option_index=0, is_correct=i < correct)
        for i in range(total)
    ]


@pytest.fixture
def scorer(default_bank):
    return LevelScorerService(default_bank)


def test_eighteen_of_twenty_is_c2_high(scorer):
    result = scorer.score(_answers(18, 20))
    assert result.percentage == pytest.approx(90.0)
    assert result.level == PlacementLevel.C2
    assert result.confidence == Confidence.HIGH
    assert result.correct_count == 18
    assert result.total_questions == 20


def test_four_of_ten_is_a2_medium(scorer):
    result = scorer.score(_answers(4, 10))
    assert result.percentage == pytest.approx(40.0)
    assert result.level == PlacementLevel.A2
    assert result.confidence == Confidence.MEDIUM


def test_empty_answers_are_rejected(scorer):
    with pytest.raises(EmptyAnswerSetError):
        scorer.score([])


@pytest.mark.parametrize(
    "correct, total, level, confidence",
    [
        (9, 10, PlacementLevel.C2, Confidence.HIGH),
        (899, 1000, PlacementLevel.C1, Confidence.HIGH),
        (11, 20, PlacementLevel.B1, Confidence.MEDIUM),
        (3, 5, PlacementLevel.B1, Confidence.HIGH),
        (1, 5, PlacementLevel.A1, Confidence.LOW),
        (199, 1000, PlacementLevel.A0, Confidence.MEDIUM),
    ],
)
def test_threshold_boundaries(scorer, correct, total, level, confidence):
    result = scorer.score(_answers(correct, total))
    assert result.level == level
    assert result.confidence == confidence


@pytest.mark.parametrize(
    "percentage, level, confidence",
    [
        (100.0, PlacementLevel.C2, Confidence.HIGH),
        (90.0, PlacementLevel.C2, Confidence.HIGH),
        (85.0, PlacementLevel.C1, Confidence.HIGH),
        (84.9, PlacementLevel.C1, Confidence.MEDIUM),
        (80.0, PlacementLevel.C1, Confidence.MEDIUM),
        (79.9, PlacementLevel.B2, Confidence.HIGH),
        (75.0, PlacementLevel.B2, Confidence.HIGH),
        (70.0, PlacementLevel.B2, Confidence.MEDIUM),
        (69.9, PlacementLevel.B1, Confidence.HIGH),
        (60.0, PlacementLevel.B1, Confidence.HIGH),
        (55.0, PlacementLevel.B1, Confidence.MEDIUM),
        (54.9, PlacementLevel.A2, Confidence.HIGH),
        (45.0, PlacementLevel.A2, Confidence.HIGH),
        (40.0, PlacementLevel.A2, Confidence.MEDIUM),
        (39.9, PlacementLevel.A1, Confidence.MEDIUM),
        (30.0, PlacementLevel.A1, Confidence.MEDIUM),
        (29.9, PlacementLevel.A1, Confidence.LOW),
        (20.0, PlacementLevel.A1, Confidence.LOW),
        (19.9, PlacementLevel.A0, Confidence.MEDIUM),
        (0.0, PlacementLevel.A0, Confidence.MEDIUM),
    ],
)
def test_level_for_percentage_table(scorer, percentage, level, confidence):
    assert scorer.level_for_percentage(percentage) == (level, confidence)


@pytest.mark.parametrize("total", [1, 7, 20, 36])
def test_more_correct_answers_never_lower_the_level(scorer, total):
    ranks = [scorer.score(_answers(correct, total)).level.rank for correct in range(total + 1)]
    assert ranks == sorted(ranks)


def test_totals_match_input(scorer):
    answers = [
        GradedAnswer("a1_1", 0, True),
        GradedAnswer("b2_3", 1, False),
        GradedAnswer("c1_2", 0, True),
        GradedAnswer("unknown", 3, False),
        GradedAnswer("c2_6", 0, True),
    ]
    result = scorer.score(answers)
    assert result.correct_count == 3
    assert result.total_questions == 5


def test_is_correct_flag_is_trusted(scorer):
    # a1_1 correct index is 0; the flag still wins
    answers = [GradedAnswer("a1_1", 3, True), GradedAnswer("a1_2", 0, False)]
    result = scorer.score(answers)
    assert result.correct_count == 1


def test_per_tier_tallies_skip_unknown_ids(scorer):
    answers = [
        GradedAnswer("a1_1", 0, True),
        GradedAnswer("a1_2", 1, False),
        GradedAnswer("c2_1", 0, True),
        GradedAnswer("zz_9", 0, True),
    ]
    result = scorer.score(answers)
    assert result.total_by_difficulty[CEFRLevel.A1] == 2
    assert result.correct_by_difficulty[CEFRLevel.A1] == 1
    assert result.total_by_difficulty[CEFRLevel.C2] == 1
    assert result.correct_by_difficulty[CEFRLevel.C2] == 1
    assert sum(result.total_by_difficulty.values()) == 3
    assert result.correct_count == 3
    assert result.total_questions == 4
    assert result.percentage == pytest.approx(75.0)


def test_tallies_cover_every_tier(scorer):
    result = scorer.score(_answers(1, 1))
    assert set(result.total_by_difficulty) == set(CEFRLevel)
    assert set(result.correct_by_difficulty) == set(CEFRLevel)


def test_tier_mix_does_not_change_level(scorer):
    easy = [GradedAnswer(f"a1_{i}", 0, i <= 3) for i in range(1, 7)]
    hard = [GradedAnswer(f"c2_{i}", 0, i <= 3) for i in range(1, 7)]
    easy_result = scorer.score(easy)
    hard_result = scorer.score(hard)
    assert (easy_result.level, easy_result.confidence) == (hard_result.level, hard_result.confidence)


def test_all_unknown_ids_still_scored(scorer):
    answers = [GradedAnswer(f"ghost_{i}", 0, True) for i in range(5)]
    result = scorer.score(answers)
    assert result.level == PlacementLevel.C2
    assert sum(result.total_by_difficulty.values()) == 0
