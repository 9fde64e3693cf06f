"""
CEFR Level Enums
"""

from enum import Enum


class CEFRLevel(str, Enum):
    """Bậc độ khó của câu hỏi theo khung CEFR (A1 thấp nhất, C2 cao nhất)"""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        return list(CEFRLevel).index(self)


class PlacementLevel(str, Enum):
    """
    Trình độ xếp lớp trả về cho người học.

    A0 = "dưới A1", không có câu hỏi nào mang bậc này trong ngân hàng câu hỏi.
    """
    A0 = "A0"
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        return list(PlacementLevel).index(self)


class Confidence(str, Enum):
    """Mức độ chắc chắn của kết quả xếp lớp"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Skill(str, Enum):
    GRAMMAR = "grammar"
    VOCABULARY = "vocabulary"
    READING = "reading"
