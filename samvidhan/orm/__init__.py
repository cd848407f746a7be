"""
samvidhan/orm/__init__.py
Importing this package registers every model on Base.metadata.
"""
from samvidhan.orm.base import Base, BaseModel
from samvidhan.orm.part import Part
from samvidhan.orm.article import Article, ArticleCategory, RIGHTS_CATEGORIES, article_amendments, article_case_laws
from samvidhan.orm.simplified_explanation import SimplifiedExplanation
from samvidhan.orm.amendment import Amendment
from samvidhan.orm.case_law import CaseLaw
from samvidhan.orm.mcq import MCQ, Difficulty
from samvidhan.orm.emergency_guide import EmergencyGuide
from samvidhan.orm.ai_query import AIQuery
from samvidhan.orm.quiz_attempt import QuizAttempt
from samvidhan.orm.app_settings import AppSettings

__all__ = [
    "Base",
    "BaseModel",
    "Part",
    "Article",
    "ArticleCategory",
    "RIGHTS_CATEGORIES",
    "article_amendments",
    "article_case_laws",
    "SimplifiedExplanation",
    "Amendment",
    "CaseLaw",
    "MCQ",
    "Difficulty",
    "EmergencyGuide",
    "AIQuery",
    "QuizAttempt",
    "AppSettings",
]
