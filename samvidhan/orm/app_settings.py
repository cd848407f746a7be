"""
samvidhan/orm/app_settings.py
Key/value application metadata (version, helplines, languages)
"""
from sqlalchemy import Column, String, Text
from samvidhan.orm.base import BaseModel


class AppSettings(BaseModel):
    __tablename__ = "app_settings"

    key = Column(String(100), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=False)

    def __repr__(self):
        return f"<AppSettings(key='{self.key}')>"
