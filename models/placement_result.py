"""
PlacementResult Model
"""

from dataclasses import dataclass, field
from typing import Dict

from models.cefr_level import CEFRLevel, Confidence, PlacementLevel


def _empty_tally() -> Dict[CEFRLevel, int]:
    return {tier: 0 for tier in CEFRLevel}


@dataclass
class PlacementResult:
    """Kết quả xếp lớp của một lượt làm bài"""
    level: PlacementLevel
    confidence: Confidence
    correct_count: int
    total_questions: int
    percentage: float = 0.0
    # Chỉ dùng để báo cáo, không ảnh hưởng tới level / confidence
    correct_by_difficulty: Dict[CEFRLevel, int] = field(default_factory=_empty_tally)
    total_by_difficulty: Dict[CEFRLevel, int] = field(default_factory=_empty_tally)
