"""
AssessmentItem Model
"""

from dataclasses import dataclass
from typing import Tuple

from models.cefr_level import CEFRLevel, Skill


@dataclass(frozen=True)
class AssessmentItem:
    """Một câu hỏi trong ngân hàng câu hỏi xếp lớp"""
    id: str
    text: str
    options: Tuple[str, ...]
    correct_option_index: int
    difficulty: CEFRLevel
    skill: Skill

    def __post_init__(self):
        """
        Chuẩn hóa và kiểm tra dữ liệu:
        - options luôn là tuple (thứ tự đáp án có ý nghĩa)
        - 0 <= correct_option_index < len(options)
        """
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "difficulty", CEFRLevel(self.difficulty))
        object.__setattr__(self, "skill", Skill(self.skill))

        if not self.options:
            raise ValueError(f"Câu hỏi {self.id} không có đáp án nào")
        if not 0 <= self.correct_option_index < len(self.options):
            raise ValueError(
                f"Câu hỏi {self.id}: correct_option_index={self.correct_option_index} "
                f"nằm ngoài phạm vi [0, {len(self.options)})"
            )
