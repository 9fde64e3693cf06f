"""
Question Bank Service
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from models.assessment_item import AssessmentItem
from models.cefr_level import CEFRLevel
from models.placement_questions import PLACEMENT_QUESTIONS

logger = logging.getLogger(__name__)


class QuestionBankService:
    """
    Ngân hàng câu hỏi xếp lớp, chỉ đọc.

    Dữ liệu được cố định khi khởi tạo; các hàm tra cứu luôn trả về list mới
    nên phía gọi không thể làm thay đổi ngân hàng.
    """

    def __init__(self, items: Iterable[AssessmentItem]):
        """
        Args:
            items: Danh sách câu hỏi theo thứ tự khai báo

        Raises:
            ValueError: Nếu có hai câu hỏi trùng id
        """
        self._items: List[AssessmentItem] = list(items)
        self._by_id: Dict[str, AssessmentItem] = {}
        self._by_difficulty: Dict[CEFRLevel, List[AssessmentItem]] = defaultdict(list)

        for item in self._items:
            if item.id in self._by_id:
                raise ValueError(f"Trùng question_id trong ngân hàng câu hỏi: {item.id}")
            self._by_id[item.id] = item
            self._by_difficulty[item.difficulty].append(item)

        for tier in CEFRLevel:
            if not self._by_difficulty.get(tier):
                logger.warning("Question bank has no items for tier %s", tier.value)

    @classmethod
    def default(cls) -> "QuestionBankService":
        """Ngân hàng câu hỏi mặc định của bài kiểm tra xếp lớp"""
        return cls(PLACEMENT_QUESTIONS)

    def all_items(self) -> List[AssessmentItem]:
        return list(self._items)

    def items_by_difficulty(self, tier: CEFRLevel) -> List[AssessmentItem]:
        """Tất cả câu hỏi thuộc một bậc (có thể rỗng)"""
        return list(self._by_difficulty.get(CEFRLevel(tier), []))

    def find_by_id(self, question_id: str) -> Optional[AssessmentItem]:
        """
        Tra cứu câu hỏi theo id.

        Returns:
            AssessmentItem hoặc None nếu không tồn tại (không raise)
        """
        return self._by_id.get(question_id)

    def __len__(self) -> int:
        return len(self._items)
