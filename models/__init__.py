"""
Models module - Các class định nghĩa dữ liệu
"""

from .cefr_level import CEFRLevel, PlacementLevel, Confidence, Skill
from .assessment_item import AssessmentItem
from .graded_answer import GradedAnswer
from .placement_result import PlacementResult
from .placement_questions import PLACEMENT_QUESTIONS

__all__ = [
    'CEFRLevel',
    'PlacementLevel',
    'Confidence',
    'Skill',
    'AssessmentItem',
    'GradedAnswer',
    'PlacementResult',
    'PLACEMENT_QUESTIONS'
]
