"""
GradedAnswer Model
"""

from dataclasses import dataclass


@dataclass
class GradedAnswer:
    """
    Câu trả lời đã được chấm.

    is_correct do phía gọi cung cấp, bộ tính điểm tin vào cờ này
    chứ không tự so sánh selected_option_index với đáp án đúng.
    """
    question_id: str
    selected_option_index: int
    is_correct: bool
