"""
samvidhan/orm/amendment.py
Constitutional Amendment model
"""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from samvidhan.orm.base import BaseModel
from samvidhan.orm.article import article_amendments


class Amendment(BaseModel):
    __tablename__ = "amendments"

    number = Column(Integer, nullable=False, unique=True, index=True)
    year = Column(Integer, nullable=False, index=True)

    title_en = Column(String(500), nullable=False)
    title_hi = Column(String(500), nullable=True)
    title_ta = Column(String(500), nullable=True)

    description = Column(Text, nullable=True)
    act_name = Column(String(255), nullable=True)

    articles = relationship(
        "Article",
        secondary=article_amendments,
        back_populates="amendments",
        order_by="Article.number"
    )

    def __repr__(self):
        return f"<Amendment(number={self.number}, year={self.year})>"
