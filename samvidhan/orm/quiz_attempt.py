"""
samvidhan/orm/quiz_attempt.py
QuizAttempt model - one graded quiz submission
"""
from sqlalchemy import Column, Integer, String
from samvidhan.orm.base import BaseModel


class QuizAttempt(BaseModel):
    __tablename__ = "quiz_attempts"

    user_id = Column(String(100), nullable=False, index=True)
    score = Column(Integer, nullable=False)
    total = Column(Integer, nullable=False)
    time_spent = Column(Integer, nullable=False, default=0, comment="Seconds")
    category = Column(String(50), nullable=False, default="general")

    def __repr__(self):
        return f"<QuizAttempt(user_id='{self.user_id}', score={self.score}/{self.total})>"
