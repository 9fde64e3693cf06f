"""
Level Scorer Service
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from models.cefr_level import CEFRLevel, Confidence, PlacementLevel
from models.graded_answer import GradedAnswer
from models.placement_result import PlacementResult
from services.exceptions import EmptyAnswerSetError
from services.question_bank_service import QuestionBankService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBand:
    """
    Một dòng trong bảng ngưỡng điểm.

    percentage >= min_percentage => level. Confidence là upper_confidence nếu
    percentage >= upper_from, ngược lại là lower_confidence.
    """
    min_percentage: float
    level: PlacementLevel
    upper_from: float
    upper_confidence: Confidence
    lower_confidence: Confidence


# Xét từ trên xuống, dòng đầu tiên khớp được chọn
SCORE_BANDS: Tuple[ScoreBand, ...] = (
    ScoreBand(90.0, PlacementLevel.C2, 90.0, Confidence.HIGH, Confidence.HIGH),
    ScoreBand(80.0, PlacementLevel.C1, 85.0, Confidence.HIGH, Confidence.MEDIUM),
    ScoreBand(70.0, PlacementLevel.B2, 75.0, Confidence.HIGH, Confidence.MEDIUM),
    ScoreBand(55.0, PlacementLevel.B1, 60.0, Confidence.HIGH, Confidence.MEDIUM),
    ScoreBand(40.0, PlacementLevel.A2, 45.0, Confidence.HIGH, Confidence.MEDIUM),
    ScoreBand(20.0, PlacementLevel.A1, 30.0, Confidence.MEDIUM, Confidence.LOW),
    ScoreBand(0.0, PlacementLevel.A0, 0.0, Confidence.MEDIUM, Confidence.MEDIUM),
)


class LevelScorerService:
    """
    Service để xếp trình độ từ các câu trả lời đã chấm
    """

    def __init__(self, bank: QuestionBankService, bands: Sequence[ScoreBand] = SCORE_BANDS):
        self.bank = bank
        self.bands: List[ScoreBand] = list(bands)

    def level_for_percentage(self, percentage: float) -> Tuple[PlacementLevel, Confidence]:
        """
        Map tỉ lệ đúng (0-100) sang (level, confidence) theo bảng ngưỡng

        Chỉ phụ thuộc vào percentage.
        """
        for band in self.bands:
            if percentage >= band.min_percentage:
                if percentage >= band.upper_from:
                    return band.level, band.upper_confidence
                return band.level, band.lower_confidence
        last = self.bands[-1]
        return last.level, last.lower_confidence

    def score(self, answers: Sequence[GradedAnswer]) -> PlacementResult:
        """
        Tính kết quả xếp lớp

        Args:
            answers: Các câu trả lời đã chấm (is_correct do phía gọi cung cấp)

        Returns:
            PlacementResult gồm level, confidence, số câu đúng / tổng số câu
            và thống kê theo bậc (chỉ để báo cáo)

        Raises:
            EmptyAnswerSetError: Nếu answers rỗng
        """
        if not answers:
            raise EmptyAnswerSetError("Không có câu trả lời nào để tính điểm")

        total_questions = len(answers)
        correct_count = sum(1 for a in answers if a.is_correct)
        # Nhân trước khi chia để ngưỡng chính xác (vd 11/20 => đúng 55.0)
        percentage = 100.0 * correct_count / total_questions

        correct_by_difficulty = {tier: 0 for tier in CEFRLevel}
        total_by_difficulty = {tier: 0 for tier in CEFRLevel}
        for answer in answers:
            item = self.bank.find_by_id(answer.question_id)
            if item is None:
                logger.debug("Answer references unknown question %s", answer.question_id)
                continue
            total_by_difficulty[item.difficulty] += 1
            if answer.is_correct:
                correct_by_difficulty[item.difficulty] += 1

        level, confidence = self.level_for_percentage(percentage)

        return PlacementResult(
            level=level,
            confidence=confidence,
            correct_count=correct_count,
            total_questions=total_questions,
            percentage=percentage,
            correct_by_difficulty=correct_by_difficulty,
            total_by_difficulty=total_by_difficulty,
        )
