"""
samvidhan/schemas/quiz.py
Pydantic schemas for quiz submission
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class QuizAnswer(BaseModel):
    """One answered question"""
    question_id: Optional[int] = Field(None, alias="questionId")
    selected_answer: Optional[str] = Field(None, alias="selectedAnswer", description="A | B | C | D")

    class Config:
        populate_by_name = True

    def as_payload(self) -> dict:
        return {"questionId": self.question_id, "selectedAnswer": self.selected_answer}


class QuizSubmission(BaseModel):
    """Quiz submission; userId enables attempt history"""
    answers: Optional[List[QuizAnswer]] = None
    user_id: Optional[str] = Field(None, alias="userId")
    time_spent: Optional[int] = Field(None, alias="timeSpent", ge=0, description="Seconds")
    category: Optional[str] = None

    class Config:
        populate_by_name = True
