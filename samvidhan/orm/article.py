"""
samvidhan/orm/article.py
Article model - a single Article of the Constitution

Relationships:
- Part (many-to-one, required)
- SimplifiedExplanation (one-to-many, at most one per language)
- Amendment (many-to-many via article_amendments)
- CaseLaw (many-to-many via article_case_laws)
- MCQ (one-to-many)
"""
from enum import Enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Table, Index
from sqlalchemy.orm import relationship
from samvidhan.orm.base import Base, BaseModel


class ArticleCategory(str, Enum):
    """Which part of the rights framework an article belongs to."""
    FUNDAMENTAL_RIGHT = "fundamental_right"
    DIRECTIVE_PRINCIPLE = "directive_principle"
    FUNDAMENTAL_DUTY = "fundamental_duty"
    OTHER = "other"


RIGHTS_CATEGORIES = (
    ArticleCategory.FUNDAMENTAL_RIGHT.value,
    ArticleCategory.DIRECTIVE_PRINCIPLE.value,
    ArticleCategory.FUNDAMENTAL_DUTY.value,
)


article_amendments = Table(
    "article_amendments",
    Base.metadata,
    Column("article_id", Integer, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True),
    Column("amendment_id", Integer, ForeignKey("amendments.id", ondelete="CASCADE"), primary_key=True),
)

article_case_laws = Table(
    "article_case_laws",
    Base.metadata,
    Column("article_id", Integer, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True),
    Column("case_law_id", Integer, ForeignKey("case_laws.id", ondelete="CASCADE"), primary_key=True),
)


class Article(BaseModel):
    """
    Article of the Constitution.

    `number` is a string ("14", "21A", "51A") and is globally unique.
    Titles and contents carry an English value and optional Hindi/Tamil
    translations; readers go through the localization resolver.
    """
    __tablename__ = "articles"

    number = Column(
        String(10),
        nullable=False,
        unique=True,
        index=True,
        comment="Article number, e.g. 14 or 21A"
    )

    part_id = Column(
        Integer,
        ForeignKey("parts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title_en = Column(String(500), nullable=False)
    title_hi = Column(String(500), nullable=True)
    title_ta = Column(String(500), nullable=True)

    content_en = Column(Text, nullable=False)
    content_hi = Column(Text, nullable=True)
    content_ta = Column(Text, nullable=True)

    category = Column(
        String(30),
        nullable=False,
        default=ArticleCategory.OTHER.value,
        index=True,
        comment="fundamental_right | directive_principle | fundamental_duty | other"
    )

    importance = Column(
        Integer,
        nullable=False,
        default=3,
        comment="1 (minor) to 5 (landmark)"
    )

    part = relationship("Part", back_populates="articles")

    simplified_explanations = relationship(
        "SimplifiedExplanation",
        back_populates="article",
        cascade="all, delete-orphan"
    )

    amendments = relationship(
        "Amendment",
        secondary=article_amendments,
        back_populates="articles"
    )

    case_laws = relationship(
        "CaseLaw",
        secondary=article_case_laws,
        back_populates="articles"
    )

    mcqs = relationship("MCQ", back_populates="article")

    __table_args__ = (
        Index("ix_article_category_importance", "category", "importance"),
    )

    def __repr__(self):
        return f"<Article(id={self.id}, number='{self.number}', category='{self.category}')>"
