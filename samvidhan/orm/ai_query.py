"""
samvidhan/orm/ai_query.py
AIQuery model - question/answer history of the AI assistant

Append-only: rows are written after a successful answer and never updated
by the API.
"""
from sqlalchemy import Column, Integer, String, Text, Index
from samvidhan.orm.base import BaseModel


class AIQuery(BaseModel):
    __tablename__ = "ai_queries"

    user_id = Column(
        String(100),
        nullable=False,
        index=True,
        comment="Client-supplied user identifier (no accounts)"
    )

    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    context = Column(String(100), nullable=True)
    rating = Column(Integer, nullable=True)

    __table_args__ = (
        Index("ix_ai_query_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<AIQuery(id={self.id}, user_id='{self.user_id}')>"
