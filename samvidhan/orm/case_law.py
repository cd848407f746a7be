"""
samvidhan/orm/case_law.py
CaseLaw model - judgments interpreting Articles
"""
from sqlalchemy import Column, Integer, String, Text, Boolean
from sqlalchemy.orm import relationship
from samvidhan.orm.base import BaseModel
from samvidhan.orm.article import article_case_laws


class CaseLaw(BaseModel):
    """
    A reported judgment.

    summary_hi / summary_ta fall back to summary_en when NULL.
    `landmark` marks judgments that are taught as turning points.
    """
    __tablename__ = "case_laws"

    title = Column(String(500), nullable=False)
    citation = Column(String(255), nullable=True, index=True)
    court = Column(String(255), nullable=False, default="Supreme Court of India")
    year = Column(Integer, nullable=True, index=True)

    summary_en = Column(Text, nullable=False)
    summary_hi = Column(Text, nullable=True)
    summary_ta = Column(Text, nullable=True)

    judgment_url = Column(String(500), nullable=True)

    landmark = Column(Boolean, nullable=False, default=False)

    articles = relationship(
        "Article",
        secondary=article_case_laws,
        back_populates="case_laws"
    )

    def __repr__(self):
        return f"<CaseLaw(id={self.id}, title='{self.title}', year={self.year})>"
