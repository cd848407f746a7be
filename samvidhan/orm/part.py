"""
samvidhan/orm/part.py
Part model - a Part of the Constitution (Part I, Part III, ...)

Structure: Part → Article items
"""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from samvidhan.orm.base import BaseModel


class Part(BaseModel):
    """
    Part groups Articles and fixes their display order in the tree.

    Fields:
    - number: Part number (III for Fundamental Rights is stored as 3)
    - order: Position of the part in the constitution tree
    - title_en, title_hi, title_ta: Localized titles (hi/ta may be NULL)
    - description: Short English summary
    """
    __tablename__ = "parts"

    number = Column(
        Integer,
        nullable=False,
        unique=True,
        index=True,
        comment="Part number"
    )

    order = Column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Display order in the constitution tree"
    )

    title_en = Column(String(255), nullable=False)
    title_hi = Column(String(255), nullable=True)
    title_ta = Column(String(255), nullable=True)

    description = Column(Text, nullable=True)

    articles = relationship(
        "Article",
        back_populates="part",
        order_by="Article.number",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Part(id={self.id}, number={self.number}, title='{self.title_en}')>"

    def to_dict(self):
        return {
            "id": self.id,
            "number": self.number,
            "order": self.order,
            "title_en": self.title_en,
            "title_hi": self.title_hi,
            "title_ta": self.title_ta,
            "description": self.description,
        }
