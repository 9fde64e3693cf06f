"""
Services module - Business logic
"""

from .question_bank_service import QuestionBankService
from .quiz_sampler_service import QuizSamplerService, DEFAULT_TIER_WEIGHTS
from .level_scorer_service import LevelScorerService, ScoreBand, SCORE_BANDS
from .answer_grading_service import AnswerGradingService
from .analysis_service import AnalysisService
from .exceptions import (
    PlacementError,
    InvalidQuizSizeError,
    EmptyAnswerSetError,
    UnknownQuestionError,
    InvalidOptionError,
)

__all__ = [
    'QuestionBankService',
    'QuizSamplerService',
    'DEFAULT_TIER_WEIGHTS',
    'LevelScorerService',
    'ScoreBand',
    'SCORE_BANDS',
    'AnswerGradingService',
    'AnalysisService',
    'PlacementError',
    'InvalidQuizSizeError',
    'EmptyAnswerSetError',
    'UnknownQuestionError',
    'InvalidOptionError'
]
