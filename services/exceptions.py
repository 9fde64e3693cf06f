"""
Exceptions cho placement engine

Tất cả kế thừa ValueError để tầng API có thể map chung về HTTP 400.
"""


class PlacementError(ValueError):
    """Lỗi gốc của placement engine"""


class InvalidQuizSizeError(PlacementError):
    """Số câu hỏi yêu cầu không phải số nguyên dương"""


class EmptyAnswerSetError(PlacementError):
    """Không có câu trả lời nào để tính điểm"""


class UnknownQuestionError(PlacementError):
    """question_id không tồn tại trong ngân hàng câu hỏi"""

    def __init__(self, question_id: str):
        super().__init__(f"Không tìm thấy câu hỏi với ID: {question_id}")
        self.question_id = question_id


class InvalidOptionError(PlacementError):
    """Chỉ số đáp án nằm ngoài phạm vi options của câu hỏi"""
