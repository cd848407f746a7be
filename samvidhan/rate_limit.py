"""
samvidhan/rate_limit.py
Shared slowapi limiter for the provider-backed routes (AI assistant, TTS)
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from samvidhan.config.settings import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
