"""
Shared utilities và dependency providers cho tất cả API routes
"""

from typing import Dict

from models.assessment_item import AssessmentItem
from services.question_bank_service import QuestionBankService
from services.quiz_sampler_service import QuizSamplerService
from services.level_scorer_service import LevelScorerService
from services.answer_grading_service import AnswerGradingService
from services.analysis_service import AnalysisService

# Cache variables
_question_bank_cache = None
_bank_summary_cache = None


def get_question_bank() -> QuestionBankService:
    """Load ngân hàng câu hỏi xếp lớp (có cache)"""
    global _question_bank_cache
    
    if _question_bank_cache is not None:
        return _question_bank_cache
    
    _question_bank_cache = QuestionBankService.default()
    return _question_bank_cache


def get_bank_summary() -> Dict:
    """Thống kê ngân hàng câu hỏi (có cache)"""
    global _bank_summary_cache
    
    if _bank_summary_cache is not None:
        return _bank_summary_cache
    
    _bank_summary_cache = AnalysisService.analyze_bank(get_question_bank().all_items())
    return _bank_summary_cache


def get_quiz_sampler() -> QuizSamplerService:
    """Dependency để tạo QuizSamplerService"""
    return QuizSamplerService(get_question_bank())


def get_level_scorer() -> LevelScorerService:
    """Dependency để tạo LevelScorerService"""
    return LevelScorerService(get_question_bank())


def get_answer_grader() -> AnswerGradingService:
    """Dependency để tạo AnswerGradingService"""
    return AnswerGradingService(get_question_bank())


def to_public_question(item: AssessmentItem) -> Dict:
    """Dữ liệu câu hỏi gửi cho client, không kèm đáp án đúng"""
    return {
        "question_id": item.id,
        "text": item.text,
        "options": list(item.options),
        "difficulty": item.difficulty,
        "skill": item.skill,
    }


def clear_cache():
    """Clear tất cả cache - dùng cho testing hoặc reload data"""
    global _question_bank_cache, _bank_summary_cache
    
    _question_bank_cache = None
    _bank_summary_cache = None
