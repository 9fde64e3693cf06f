"""
Quiz Sampler Service
"""

import logging
import math
from typing import Dict, List, Mapping, Optional

import numpy as np

from models.assessment_item import AssessmentItem
from models.cefr_level import CEFRLevel
from services.exceptions import InvalidQuizSizeError
from services.question_bank_service import QuestionBankService

logger = logging.getLogger(__name__)

# Với 20 câu: A1 3, A2 3, B1 4, B2 4, C1 3, C2 3
DEFAULT_TIER_WEIGHTS: Dict[CEFRLevel, float] = {
    CEFRLevel.A1: 0.15,
    CEFRLevel.A2: 0.15,
    CEFRLevel.B1: 0.20,
    CEFRLevel.B2: 0.20,
    CEFRLevel.C1: 0.15,
    CEFRLevel.C2: 0.15,
}


class QuizSamplerService:
    """
    Service để chọn bộ câu hỏi cho bài kiểm tra xếp lớp

    Chiến lược: lấy mẫu phân tầng theo bậc CEFR với tỉ lệ cố định,
    sau đó xáo trộn toàn bộ để không lộ thứ tự theo bậc.
    """

    def __init__(self,
                 bank: QuestionBankService,
                 tier_weights: Optional[Mapping[CEFRLevel, float]] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Args:
            bank: Ngân hàng câu hỏi
            tier_weights: Tỉ lệ câu hỏi cho từng bậc (mặc định DEFAULT_TIER_WEIGHTS)
            rng: Bộ sinh số ngẫu nhiên cố định (chỉ dùng cho test).
                 None => mỗi lần gọi sample() tạo một generator mới, không seed
        """
        weights = dict(tier_weights) if tier_weights is not None else dict(DEFAULT_TIER_WEIGHTS)
        missing = [tier.value for tier in CEFRLevel if tier not in weights]
        if missing:
            raise ValueError(f"Thiếu tỉ lệ cho các bậc: {', '.join(missing)}")
        if any(w < 0 for w in weights.values()):
            raise ValueError("Tỉ lệ câu hỏi theo bậc không được âm")

        self.bank = bank
        self.tier_weights = {tier: float(weights[tier]) for tier in CEFRLevel}
        self._rng = rng

    def target_counts(self, total_questions: int) -> Dict[CEFRLevel, int]:
        """
        Số câu mục tiêu cho từng bậc = ceil(total_questions * weight)

        Tổng có thể vượt total_questions vài câu do làm tròn lên;
        phần dư bị cắt bởi giới hạn tổng trong sample().
        """
        self._validate_total(total_questions)
        # round() loại bỏ sai số dấu phẩy động trước khi ceil (vd 100 * 0.15)
        return {
            tier: int(math.ceil(round(total_questions * weight, 9)))
            for tier, weight in self.tier_weights.items()
        }

    def sample(self, total_questions: int) -> List[AssessmentItem]:
        """
        Chọn ngẫu nhiên bộ câu hỏi phân tầng

        Args:
            total_questions: Số câu cần chọn (số nguyên dương)

        Returns:
            Danh sách câu hỏi không trùng id, độ dài <= total_questions.
            Nếu một bậc không đủ câu thì lấy hết bậc đó, phần thiếu không bù từ bậc khác.

        Raises:
            InvalidQuizSizeError: total_questions <= 0 hoặc không phải số nguyên
        """
        targets = self.target_counts(total_questions)
        rng = self._rng if self._rng is not None else np.random.default_rng()

        selected: List[AssessmentItem] = []
        for tier in CEFRLevel:
            pool = self.bank.items_by_difficulty(tier)
            count = min(targets[tier], len(pool))
            if count < targets[tier]:
                logger.debug(
                    "Tier %s under-filled: target %d, pool %d",
                    tier.value, targets[tier], len(pool),
                )

            drawn = 0
            while drawn < count and len(selected) < total_questions:
                idx = int(rng.integers(len(pool)))
                pool[idx], pool[-1] = pool[-1], pool[idx]
                selected.append(pool.pop())
                drawn += 1

        for i in range(len(selected) - 1, 0, -1):
            j = int(rng.integers(i + 1))
            selected[i], selected[j] = selected[j], selected[i]

        return selected[:total_questions]

    @staticmethod
    def _validate_total(total_questions: int) -> None:
        if isinstance(total_questions, bool) or not isinstance(total_questions, (int, np.integer)):
            raise InvalidQuizSizeError(
                f"Số câu hỏi phải là số nguyên dương, nhận được: {total_questions!r}"
            )
        if total_questions <= 0:
            raise InvalidQuizSizeError(
                f"Số câu hỏi phải là số nguyên dương, nhận được: {total_questions}"
            )
