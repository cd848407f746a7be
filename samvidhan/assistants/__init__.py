"""
Sector guidance assistants, keyed by URL segment (aliases included).
"""
from typing import Dict, Optional

from samvidhan.assistants.base import SectorAssistant
from samvidhan.assistants import (
    agriculture,
    banking,
    business,
    consumer,
    digital_rights,
    education,
    environmental,
    gov_services,
    healthcare,
    housing,
    journalism,
    legal_emergency,
    library,
    nri,
    womens_rights,
)

SECTOR_ASSISTANTS = [
    legal_emergency.assistant,
    banking.assistant,
    consumer.assistant,
    digital_rights.assistant,
    environmental.assistant,
    gov_services.assistant,
    womens_rights.assistant,
    agriculture.assistant,
    education.assistant,
    healthcare.assistant,
    housing.assistant,
    business.assistant,
    journalism.assistant,
    library.assistant,
    nri.assistant,
]


def _build_registry() -> Dict[str, SectorAssistant]:
    registry = {}
    for assistant in SECTOR_ASSISTANTS:
        for slug in (assistant.slug,) + tuple(assistant.aliases):
            if slug in registry:
                raise ValueError(f"Duplicate sector route: {slug}")
            registry[slug] = assistant
    return registry


REGISTRY = _build_registry()


def get_assistant(slug: str) -> Optional[SectorAssistant]:
    return REGISTRY.get(slug)
