"""
samvidhan/schemas/ai_assistant.py
Request schema for the AI assistant

Fields are optional at the schema level; blank questions are rejected by
the route with the API's own 400 message.
"""
from typing import Optional
from pydantic import BaseModel, Field


class AIQuestionRequest(BaseModel):
    question: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
    language: str = "en"

    class Config:
        populate_by_name = True
