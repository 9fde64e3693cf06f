"""
Pytest Configuration and Fixtures.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from models.assessment_item import AssessmentItem
from models.cefr_level import CEFRLevel, Skill
from services.question_bank_service import QuestionBankService


def build_items(per_tier):
    """Sinh câu hỏi giả: per_tier là dict tier -> số câu, hoặc một số nguyên cho mọi bậc"""
    if isinstance(per_tier, int):
        per_tier = {tier: per_tier for tier in CEFRLevel}
    items = []
    for tier in CEFRLevel:
        for i in range(per_tier.get(tier, 0)):
            items.append(
                AssessmentItem(
                    id=f"{tier.value.lower()}_{i + 1}",
                    text=f"{tier.value} question {i + 1}",
                    options=("right", "wrong", "wrong again", "still wrong"),
                    correct_option_index=0,
                    difficulty=tier,
                    skill=Skill.GRAMMAR,
                )
            )
    return items


@pytest.fixture
def default_bank():
    return QuestionBankService.default()


@pytest.fixture
def make_bank():
    def _make(per_tier):
        return QuestionBankService(build_items(per_tier))
    return _make


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(1234)
