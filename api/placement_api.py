"""
Placement Quiz API endpoints
API cho bài kiểm tra xếp lớp (tạo đề, chấm câu, tính kết quả, thống kê ngân hàng câu hỏi)
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Depends
from api.schemas import (
    PlacementQuizRequest,
    PlacementQuizResponse,
    PlacementQuestionResponse,
    GradeAnswerRequest,
    GradeAnswerResponse,
    GradeAndScoreRequest,
    PlacementResultRequest,
    PlacementResultResponse,
    TierBreakdown,
    QuestionBankSummaryResponse,
)
from api.shared import (
    get_question_bank,
    get_bank_summary,
    get_quiz_sampler,
    get_level_scorer,
    get_answer_grader,
    to_public_question,
)
from models.cefr_level import CEFRLevel
from models.graded_answer import GradedAnswer
from models.placement_result import PlacementResult
from services.answer_grading_service import AnswerGradingService
from services.exceptions import UnknownQuestionError
from services.level_scorer_service import LevelScorerService
from services.question_bank_service import QuestionBankService
from services.quiz_sampler_service import QuizSamplerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/placement", tags=["Placement Quiz"])


def _to_result_response(result: PlacementResult) -> PlacementResultResponse:
    return PlacementResultResponse(
        level=result.level,
        confidence=result.confidence,
        correct_count=result.correct_count,
        total_questions=result.total_questions,
        percentage=result.percentage,
        by_difficulty=[
            TierBreakdown(
                difficulty=tier,
                correct=result.correct_by_difficulty[tier],
                total=result.total_by_difficulty[tier],
            )
            for tier in CEFRLevel
        ],
        message="Placement result calculated successfully",
    )


@router.post("/quiz",
             response_model=PlacementQuizResponse,
             summary="Sinh ra bộ câu hỏi kiểm tra xếp lớp")
async def generate_placement_quiz(
    request: PlacementQuizRequest,
    sampler: QuizSamplerService = Depends(get_quiz_sampler)
):
    """
    Sinh ra bộ câu hỏi kiểm tra xếp lớp
    
    **Các câu hỏi được chọn sẽ:**
    - Phân tầng theo bậc CEFR (A1 15%, A2 15%, B1 20%, B2 20%, C1 15%, C2 15%)
    - Không trùng lặp, thứ tự đã được xáo trộn
    - Không kèm đáp án đúng
    
    Nếu ngân hàng câu hỏi không đủ, số câu trả về có thể ít hơn số câu yêu cầu.
    """
    try:
        selected = sampler.sample(request.num_questions)
        
        questions = [
            PlacementQuestionResponse(**to_public_question(item))
            for item in selected
        ]
        
        return PlacementQuizResponse(
            questions=questions,
            total_questions=len(questions),
            requested_questions=request.num_questions,
            target_distribution=sampler.target_counts(request.num_questions),
            message=f"Successfully generated {len(questions)} questions for placement quiz"
        )
    
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Failed to generate placement quiz")
        raise HTTPException(status_code=500, detail=f"Lỗi khi sinh câu hỏi: {str(e)}")


@router.post("/grade-answer",
             response_model=GradeAnswerResponse,
             summary="Chấm một câu trả lời")
async def grade_answer(
    request: GradeAnswerRequest,
    grader: AnswerGradingService = Depends(get_answer_grader),
    bank: QuestionBankService = Depends(get_question_bank)
):
    """
    So sánh đáp án người học chọn với đáp án đúng trong ngân hàng câu hỏi.
    """
    try:
        graded = grader.grade(request.question_id, request.selected_option_index)
        item = bank.find_by_id(request.question_id)
        
        return GradeAnswerResponse(
            question_id=graded.question_id,
            selected_option_index=graded.selected_option_index,
            is_correct=graded.is_correct,
            correct_option_index=item.correct_option_index
        )
    
    except UnknownQuestionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Failed to grade answer")
        raise HTTPException(status_code=500, detail=f"Lỗi khi chấm câu trả lời: {str(e)}")


@router.post("/result",
             response_model=PlacementResultResponse,
             summary="Tính kết quả xếp lớp từ các câu trả lời đã chấm")
async def calculate_placement_result(
    request: PlacementResultRequest,
    scorer: LevelScorerService = Depends(get_level_scorer)
):
    """
    Tính trình độ (A0-C2) và độ tin cậy từ tỉ lệ trả lời đúng.
    
    - Cờ is_correct được dùng trực tiếp, không chấm lại.
    - Câu hỏi không có trong ngân hàng vẫn được tính vào tổng,
      chỉ bị bỏ qua trong thống kê theo bậc.
    """
    try:
        answers: List[GradedAnswer] = [
            GradedAnswer(
                question_id=ans.question_id,
                selected_option_index=ans.selected_option_index,
                is_correct=ans.is_correct,
            )
            for ans in request.answers
        ]
        
        return _to_result_response(scorer.score(answers))
    
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Failed to calculate placement result")
        raise HTTPException(
            status_code=500, detail=f"Lỗi khi tính kết quả xếp lớp: {str(e)}"
        )


@router.post("/grade-and-score",
             response_model=PlacementResultResponse,
             summary="Chấm toàn bộ lựa chọn rồi tính kết quả xếp lớp")
async def grade_and_score(
    request: GradeAndScoreRequest,
    grader: AnswerGradingService = Depends(get_answer_grader),
    scorer: LevelScorerService = Depends(get_level_scorer)
):
    try:
        answers = grader.grade_all(
            (ans.question_id, ans.selected_option_index) for ans in request.answers
        )
        return _to_result_response(scorer.score(answers))
    
    except UnknownQuestionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Failed to grade and score placement answers")
        raise HTTPException(
            status_code=500, detail=f"Lỗi khi tính kết quả xếp lớp: {str(e)}"
        )


@router.get("/questions",
            response_model=QuestionBankSummaryResponse,
            summary="Thống kê ngân hàng câu hỏi xếp lớp")
async def get_question_bank_summary(include_questions: bool = False):
    """
    Thống kê ngân hàng câu hỏi: tổng số câu, phân bố theo bậc / kỹ năng,
    số đáp án mỗi câu. Không trả về đáp án đúng.
    
    Args:
        include_questions: Trả kèm danh sách câu hỏi
    """
    try:
        summary = get_bank_summary()
        questions = None
        if include_questions:
            questions = [
                PlacementQuestionResponse(**to_public_question(item))
                for item in get_question_bank().all_items()
            ]
        
        return QuestionBankSummaryResponse(**summary, questions=questions)
    
    except Exception as e:
        logger.exception("Failed to summarize question bank")
        raise HTTPException(status_code=500, detail=f"Lỗi: {str(e)}")


@router.get("/question/{question_id}",
            response_model=PlacementQuestionResponse,
            summary="Lấy một câu hỏi theo question_id")
async def get_question(
    question_id: str,
    bank: QuestionBankService = Depends(get_question_bank)
):
    item = bank.find_by_id(question_id)
    if item is None:
        raise HTTPException(
            status_code=404,
            detail=f"Không tìm thấy câu hỏi với ID: {question_id}"
        )
    return PlacementQuestionResponse(**to_public_question(item))
