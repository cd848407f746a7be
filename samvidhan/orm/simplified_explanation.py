"""
samvidhan/orm/simplified_explanation.py
Plain-language explanation of an Article in one language
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from samvidhan.orm.base import BaseModel


class SimplifiedExplanation(BaseModel):
    """
    One explanation per (article, language).

    examples / dos / donts are free text; the seed data stores them as
    newline-separated bullet lists.
    """
    __tablename__ = "simplified_explanations"

    article_id = Column(
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    language = Column(String(5), nullable=False, default="en", index=True)

    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    examples = Column(Text, nullable=True)
    dos = Column(Text, nullable=True)
    donts = Column(Text, nullable=True)

    article = relationship("Article", back_populates="simplified_explanations")

    __table_args__ = (
        UniqueConstraint("article_id", "language", name="uq_explanation_article_language"),
    )

    def __repr__(self):
        return f"<SimplifiedExplanation(article_id={self.article_id}, language='{self.language}')>"

    def to_dict(self):
        return {
            "title": self.title,
            "content": self.content,
            "examples": self.examples,
            "dos": self.dos,
            "donts": self.donts,
        }
