"""
samvidhan/services/constitution_service.py
Constitution tree: Parts with their Articles
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from samvidhan.orm.part import Part
from samvidhan.orm.article import Article
from samvidhan.services.localization import resolve, localized_part

logger = logging.getLogger(__name__)


def serialize_article_summary(article: Article, part: Part, lang: str) -> dict:
    return {
        "id": article.id,
        "number": article.number,
        "title": resolve(article, "title", lang),
        "category": article.category,
        "importance": article.importance,
        "part": localized_part(part, lang),
    }


async def get_constitution_tree(db: AsyncSession, lang: str, part_number: Optional[int] = None) -> List[dict]:
    """
    All Parts ordered by `order`, each with its Articles ordered by number.

    Article numbers are strings, so "21A" sorts after "21" and "100" sorts
    before "14".
    """
    stmt = (
        select(Part)
        .options(selectinload(Part.articles))
        .order_by(Part.order.asc())
    )
    if part_number is not None:
        stmt = stmt.where(Part.number == part_number)

    result = await db.execute(stmt)
    parts = result.scalars().all()

    logger.info(f"Constitution tree: {len(parts)} parts (lang={lang})")

    tree = []
    for part in parts:
        articles = sorted(part.articles, key=lambda a: a.number)
        tree.append({
            "id": part.id,
            "number": part.number,
            "title": resolve(part, "title", lang),
            "description": part.description,
            "articles": [serialize_article_summary(a, part, lang) for a in articles],
        })
    return tree
