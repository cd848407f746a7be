"""
samvidhan/orm/emergency_guide.py
EmergencyGuide model - what to do on arrest, search, detention
"""
from sqlalchemy import Column, String, Text
from samvidhan.orm.base import BaseModel


class EmergencyGuide(BaseModel):
    __tablename__ = "emergency_guides"

    title = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, index=True, comment="arrest | search | detention | ...")

    content_en = Column(Text, nullable=False)
    content_hi = Column(Text, nullable=True)
    content_ta = Column(Text, nullable=True)

    helpline = Column(String(50), nullable=True)
    legal_aid = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<EmergencyGuide(id={self.id}, category='{self.category}')>"
