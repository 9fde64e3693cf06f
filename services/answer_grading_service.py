"""
Answer Grading Service
"""

from typing import Iterable, List, Tuple

from models.graded_answer import GradedAnswer
from services.exceptions import InvalidOptionError, UnknownQuestionError
from services.question_bank_service import QuestionBankService


class AnswerGradingService:
    """
    Chấm câu trả lời bằng cách so sánh với correct_option_index trong ngân hàng câu hỏi
    """

    def __init__(self, bank: QuestionBankService):
        self.bank = bank

    def grade(self, question_id: str, selected_option_index: int) -> GradedAnswer:
        """
        Raises:
            UnknownQuestionError: question_id không có trong ngân hàng
            InvalidOptionError: selected_option_index nằm ngoài phạm vi options
        """
        item = self.bank.find_by_id(question_id)
        if item is None:
            raise UnknownQuestionError(question_id)

        if not 0 <= selected_option_index < len(item.options):
            raise InvalidOptionError(
                f"Câu hỏi {question_id}: đáp án {selected_option_index} "
                f"nằm ngoài phạm vi [0, {len(item.options)})"
            )

        return GradedAnswer(
            question_id=question_id,
            selected_option_index=selected_option_index,
            is_correct=selected_option_index == item.correct_option_index,
        )

    def grade_all(self, selections: Iterable[Tuple[str, int]]) -> List[GradedAnswer]:
        return [self.grade(question_id, index) for question_id, index in selections]
