"""
samvidhan/orm/mcq.py
MCQ model - quiz questions, optionally tied to an Article
"""
from enum import Enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from samvidhan.orm.base import BaseModel


class Difficulty(str, Enum):
    """
    Question difficulty level.

    - EASY: Basic recall
    - MEDIUM: Application
    - HARD: Analysis across articles and judgments
    """
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MCQ(BaseModel):
    """
    Multiple choice question with four options.

    Fields:
    - article_id: Article the question is about (NULL for general questions)
    - question: The question text
    - option_a, option_b, option_c, option_d: Options shown in this order
    - correct_answer: A/B/C/D
    - explanation: Shown after the answer is submitted
    - difficulty: easy/medium/hard
    - category: Exam family, e.g. UPSC, Judiciary, SSC
    """
    __tablename__ = "mcqs"

    article_id = Column(
        Integer,
        ForeignKey("articles.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    question = Column(Text, nullable=False)

    option_a = Column(Text, nullable=False)
    option_b = Column(Text, nullable=False)
    option_c = Column(Text, nullable=False)
    option_d = Column(Text, nullable=False)

    correct_answer = Column(String(1), nullable=False, comment="A/B/C/D")

    explanation = Column(Text, nullable=True)

    difficulty = Column(
        String(10),
        nullable=False,
        default=Difficulty.MEDIUM.value,
        index=True
    )

    category = Column(String(50), nullable=False, default="general", index=True)

    article = relationship("Article", back_populates="mcqs")

    __table_args__ = (
        Index("ix_mcq_difficulty_category", "difficulty", "category"),
    )

    @property
    def options(self):
        return [self.option_a, self.option_b, self.option_c, self.option_d]

    def __repr__(self):
        return (
            f"<MCQ("
            f"id={self.id}, "
            f"difficulty='{self.difficulty}', "
            f"category='{self.category}')>"
        )
