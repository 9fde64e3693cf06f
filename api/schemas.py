"""
API Schemas - Request/Response models
"""

from typing import List, Optional, Dict
from pydantic import BaseModel, Field

from api.settings import settings
from models.cefr_level import CEFRLevel, Confidence, PlacementLevel, Skill


class PlacementQuestionResponse(BaseModel):
    """Schema cho câu hỏi xếp lớp gửi về client (không có đáp án đúng)"""
    question_id: str
    text: str
    options: List[str]
    difficulty: CEFRLevel
    skill: Skill
    
    class Config:
        json_schema_extra = {
            "example": {
                "question_id": "b1_1",
                "text": "If I _____ more money, I would buy a new car.",
                "options": ["had", "have", "has", "having"],
                "difficulty": "B1",
                "skill": "grammar"
            }
        }


class PlacementQuizRequest(BaseModel):
    """Request để tạo bộ câu hỏi xếp lớp"""
    num_questions: int = Field(
        default=settings.placement_quiz_size,
        ge=1,
        le=settings.max_quiz_size,
        description="Số lượng câu hỏi cần chọn"
    )
    
    class Config:
        json_schema_extra = {
            "example": {
                "num_questions": 20
            }
        }


class PlacementQuizResponse(BaseModel):
    """Response cho bộ câu hỏi xếp lớp"""
    questions: List[PlacementQuestionResponse]
    total_questions: int
    requested_questions: int
    target_distribution: Dict[CEFRLevel, int] = Field(
        ..., description="Số câu mục tiêu cho từng bậc (trước khi cắt theo tổng)"
    )
    message: str


class GradeAnswerRequest(BaseModel):
    """Một lựa chọn của người học, chưa chấm"""
    question_id: str
    selected_option_index: int
    
    class Config:
        json_schema_extra = {
            "example": {
                "question_id": "a2_3",
                "selected_option_index": 0
            }
        }


class GradeAnswerResponse(BaseModel):
    """Kết quả chấm một câu"""
    question_id: str
    selected_option_index: int
    is_correct: bool
    correct_option_index: int


class PlacementAnswer(BaseModel):
    """Một câu trả lời đã chấm"""
    question_id: str
    selected_option_index: int
    is_correct: bool


class PlacementResultRequest(BaseModel):
    """
    Toàn bộ câu trả lời đã chấm của một lượt làm bài.
    Backend không lưu session, client giữ list các câu đã làm.
    """
    answers: List[PlacementAnswer] = Field(default_factory=list)
    
    class Config:
        json_schema_extra = {
            "example": {
                "answers": [
                    {"question_id": "a1_1", "selected_option_index": 0, "is_correct": True},
                    {"question_id": "c2_3", "selected_option_index": 2, "is_correct": False}
                ]
            }
        }


class GradeAndScoreRequest(BaseModel):
    """Các lựa chọn chưa chấm; server chấm rồi tính kết quả"""
    answers: List[GradeAnswerRequest] = Field(default_factory=list)


class TierBreakdown(BaseModel):
    """Số câu đúng / tổng theo bậc, chỉ để báo cáo"""
    difficulty: CEFRLevel
    correct: int
    total: int


class PlacementResultResponse(BaseModel):
    """Kết quả xếp lớp"""
    level: PlacementLevel
    confidence: Confidence
    correct_count: int
    total_questions: int
    percentage: float = Field(..., description="Tỉ lệ trả lời đúng (0-100)")
    by_difficulty: List[TierBreakdown]
    message: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "level": "C2",
                "confidence": "high",
                "correct_count": 18,
                "total_questions": 20,
                "percentage": 90.0,
                "by_difficulty": [
                    {"difficulty": "A1", "correct": 3, "total": 3}
                ],
                "message": "Placement result calculated successfully"
            }
        }


class OptionStatistics(BaseModel):
    """Thống kê số đáp án mỗi câu"""
    min: int
    max: int
    mean: float


class BankStatistics(BaseModel):
    options: OptionStatistics


class BankDistributions(BaseModel):
    """Phân bố câu hỏi theo bậc và kỹ năng"""
    difficulty: Dict[str, int]
    skill: Dict[str, int]
    empty_tiers: List[str]


class QuestionBankSummaryResponse(BaseModel):
    """Response cho API thống kê ngân hàng câu hỏi"""
    total_questions: int
    statistics: BankStatistics
    distributions: BankDistributions
    questions: Optional[List[PlacementQuestionResponse]] = None
