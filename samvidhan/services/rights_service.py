"""
samvidhan/services/rights_service.py
Fundamental Rights dashboard: grouped articles, emergency guides, stats

Fundamental-right articles are split into the six classic groups by
article number. Two comparison modes are supported:

- lexicographic: plain string comparison against the bounds, so "2" falls
  inside "19".."22" and "35A" falls outside "32".."35"
- numeric: the leading integer of the number is compared, so letter
  suffixes stay with their base article ("21A" → 21)
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from samvidhan.config.settings import settings, ArticleRangeMode
from samvidhan.orm.article import Article, ArticleCategory, RIGHTS_CATEGORIES
from samvidhan.orm.emergency_guide import EmergencyGuide
from samvidhan.services.article_service import pick_explanation
from samvidhan.services.localization import resolve, localized_part

logger = logging.getLogger(__name__)

EMERGENCY_CATEGORIES = ("arrest", "search", "detention")

_LEADING_INT = re.compile(r"^(\d+)")


@dataclass(frozen=True)
class RightsGroup:
    key: str
    low: int
    high: int
    # matched by exact number instead of a string range in lexicographic mode
    exact: bool = False


FUNDAMENTAL_RIGHT_GROUPS = (
    RightsGroup("right_to_equality", 14, 18),
    RightsGroup("right_to_freedom", 19, 22),
    RightsGroup("right_against_exploitation", 23, 24),
    RightsGroup("right_to_religion", 25, 28),
    RightsGroup("cultural_educational_rights", 29, 30, exact=True),
    RightsGroup("constitutional_remedies", 32, 35),
)

CATEGORY_GROUPS = (
    ("directive_principles", ArticleCategory.DIRECTIVE_PRINCIPLE.value),
    ("fundamental_duties", ArticleCategory.FUNDAMENTAL_DUTY.value),
)


@dataclass
class RightsFilters:
    category: Optional[str] = None


def leading_number(number: str) -> Optional[int]:
    match = _LEADING_INT.match(number or "")
    return int(match.group(1)) if match else None


def in_group(number: str, group: RightsGroup, mode: str) -> bool:
    if mode == ArticleRangeMode.NUMERIC:
        value = leading_number(number)
        return value is not None and group.low <= value <= group.high
    if group.exact:
        return number in {str(n) for n in range(group.low, group.high + 1)}
    return str(group.low) <= number <= str(group.high)


def groups_for_number(number: str, mode: Optional[str] = None) -> List[str]:
    """Keys of every fundamental-right group whose bounds admit `number`."""
    mode = mode or settings.ARTICLE_RANGE_MODE
    return [group.key for group in FUNDAMENTAL_RIGHT_GROUPS if in_group(number, group, mode)]


def serialize_right(article: Article, lang: str) -> dict:
    return {
        "id": article.id,
        "number": article.number,
        "title": resolve(article, "title", lang),
        "content": resolve(article, "content", lang),
        "importance": article.importance,
        "part": localized_part(article.part, lang),
        "simplifiedExplanation": pick_explanation(article, lang),
    }


def group_rights(articles: List[Article], lang: str, mode: Optional[str] = None) -> dict:
    """Bucket pre-sorted articles into the dashboard groups, keeping order."""
    mode = mode or settings.ARTICLE_RANGE_MODE
    grouped = {group.key: [] for group in FUNDAMENTAL_RIGHT_GROUPS}
    grouped.update({key: [] for key, _ in CATEGORY_GROUPS})

    for article in articles:
        if article.category == ArticleCategory.FUNDAMENTAL_RIGHT.value:
            for key in groups_for_number(article.number, mode):
                grouped[key].append(serialize_right(article, lang))
        for key, category in CATEGORY_GROUPS:
            if article.category == category:
                grouped[key].append(serialize_right(article, lang))
    return grouped


def build_rights_stats(articles: List[Article]) -> dict:
    return {
        "totalRights": sum(1 for a in articles if a.category == ArticleCategory.FUNDAMENTAL_RIGHT.value),
        "totalPrinciples": sum(1 for a in articles if a.category == ArticleCategory.DIRECTIVE_PRINCIPLE.value),
        "totalDuties": sum(1 for a in articles if a.category == ArticleCategory.FUNDAMENTAL_DUTY.value),
        "importantRights": sum(1 for a in articles if a.importance >= 4),
    }


def serialize_guide(guide: EmergencyGuide, lang: str) -> dict:
    return {
        "id": guide.id,
        "title": guide.title,
        "category": guide.category,
        "content": resolve(guide, "content", lang),
        "helpline": guide.helpline,
        "legalAid": guide.legal_aid,
    }


async def get_rights_dashboard(db: AsyncSession, lang: str, filters: RightsFilters) -> dict:
    categories = [filters.category] if filters.category else list(RIGHTS_CATEGORIES)

    stmt = (
        select(Article)
        .where(Article.category.in_(categories))
        .options(
            selectinload(Article.part),
            selectinload(Article.simplified_explanations),
        )
        .order_by(Article.importance.desc(), Article.number.asc())
    )
    result = await db.execute(stmt)
    articles = list(result.scalars().all())

    guides_result = await db.execute(
        select(EmergencyGuide)
        .where(EmergencyGuide.category.in_(EMERGENCY_CATEGORIES))
        .order_by(EmergencyGuide.id.asc())
    )
    guides = guides_result.scalars().all()

    logger.info(f"Rights dashboard: {len(articles)} articles, {len(guides)} guides (lang={lang})")

    return {
        "rights": group_rights(articles, lang),
        "emergencyGuides": [serialize_guide(g, lang) for g in guides],
        "stats": build_rights_stats(articles),
    }
