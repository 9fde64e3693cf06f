"""
Analysis Service - Phân tích và thống kê ngân hàng câu hỏi xếp lớp
"""

from typing import Dict, List
from collections import defaultdict
import numpy as np
from models.assessment_item import AssessmentItem
from models.cefr_level import CEFRLevel, Skill

class AnalysisService:
    """
    Service để phân tích và thống kê câu hỏi
    """
    
    @staticmethod
    def analyze_bank(items: List[AssessmentItem]) -> Dict:
        """
        Phân tích và thống kê ngân hàng câu hỏi
        
        Args:
            items: Danh sách câu hỏi
        
        Returns:
            Dict chứa các thống kê và phân tích (không bao gồm đáp án đúng)
        """
        difficulty_count = {tier.value: 0 for tier in CEFRLevel}
        skill_count = defaultdict(int)
        for skill in Skill:
            skill_count[skill.value] = 0
        
        if not items:
            return {
                "total_questions": 0,
                "statistics": {
                    "options": {
                        "min": 0,
                        "max": 0,
                        "mean": 0.0
                    }
                },
                "distributions": {
                    "difficulty": difficulty_count,
                    "skill": dict(skill_count),
                    "empty_tiers": [tier.value for tier in CEFRLevel]
                }
            }
        
        for item in items:
            difficulty_count[item.difficulty.value] += 1
            skill_count[item.skill.value] += 1
        
        option_counts = np.array([len(item.options) for item in items])
        
        option_stats = {
            "min": int(np.min(option_counts)),
            "max": int(np.max(option_counts)),
            "mean": float(np.mean(option_counts))
        }
        
        empty_tiers = [tier for tier, count in difficulty_count.items() if count == 0]
        
        return {
            "total_questions": len(items),
            "statistics": {
                "options": option_stats
            },
            "distributions": {
                "difficulty": difficulty_count,
                "skill": dict(skill_count),
                "empty_tiers": empty_tiers
            }
        }
