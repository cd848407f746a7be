"""
samvidhan/services/search_service.py
Full-text-ish search across articles, amendments and emergency guides

Matching is a case-insensitive substring test on every localized column.
Result caps: 20 articles, 10 amendments, 10 emergency guides.
"""
import logging
from typing import List

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from samvidhan.orm.article import Article
from samvidhan.orm.amendment import Amendment
from samvidhan.orm.emergency_guide import EmergencyGuide
from samvidhan.services.article_service import pick_explanation
from samvidhan.services.localization import resolve, localized_part

logger = logging.getLogger(__name__)

SEARCH_TYPES = ("all", "articles", "amendments", "emergency")

ARTICLE_LIMIT = 20
AMENDMENT_LIMIT = 10
EMERGENCY_LIMIT = 10


async def _search_articles(db: AsyncSession, q: str, lang: str) -> List[dict]:
    stmt = (
        select(Article)
        .where(
            or_(
                Article.title_en.icontains(q, autoescape=True),
                Article.title_hi.icontains(q, autoescape=True),
                Article.title_ta.icontains(q, autoescape=True),
                Article.content_en.icontains(q, autoescape=True),
                Article.content_hi.icontains(q, autoescape=True),
                Article.content_ta.icontains(q, autoescape=True),
                Article.number.contains(q, autoescape=True),
            )
        )
        .options(
            selectinload(Article.part),
            selectinload(Article.simplified_explanations),
        )
        .order_by(Article.id.asc())
        .limit(ARTICLE_LIMIT)
    )
    result = await db.execute(stmt)
    return [
        {
            "type": "article",
            "id": article.id,
            "number": article.number,
            "title": resolve(article, "title", lang),
            "content": resolve(article, "content", lang),
            "category": article.category,
            "importance": article.importance,
            "part": localized_part(article.part, lang),
            "simplifiedExplanation": pick_explanation(article, lang),
        }
        for article in result.scalars().all()
    ]


async def _search_amendments(db: AsyncSession, q: str, lang: str) -> List[dict]:
    stmt = (
        select(Amendment)
        .where(
            or_(
                Amendment.title_en.icontains(q, autoescape=True),
                Amendment.title_hi.icontains(q, autoescape=True),
                Amendment.title_ta.icontains(q, autoescape=True),
                Amendment.description.icontains(q, autoescape=True),
                Amendment.act_name.icontains(q, autoescape=True),
            )
        )
        .options(selectinload(Amendment.articles))
        .order_by(Amendment.id.asc())
        .limit(AMENDMENT_LIMIT)
    )
    result = await db.execute(stmt)
    return [
        {
            "type": "amendment",
            "id": amendment.id,
            "number": amendment.number,
            "year": amendment.year,
            "title": resolve(amendment, "title", lang),
            "description": amendment.description,
            "actName": amendment.act_name,
            # linked article titles stay English here
            "articles": [
                {"id": a.id, "number": a.number, "title": a.title_en}
                for a in amendment.articles
            ],
        }
        for amendment in result.scalars().all()
    ]


async def _search_emergency(db: AsyncSession, q: str, lang: str) -> List[dict]:
    stmt = (
        select(EmergencyGuide)
        .where(
            or_(
                EmergencyGuide.title.icontains(q, autoescape=True),
                EmergencyGuide.content_en.icontains(q, autoescape=True),
                EmergencyGuide.content_hi.icontains(q, autoescape=True),
                EmergencyGuide.content_ta.icontains(q, autoescape=True),
                EmergencyGuide.category.icontains(q, autoescape=True),
            )
        )
        .order_by(EmergencyGuide.id.asc())
        .limit(EMERGENCY_LIMIT)
    )
    result = await db.execute(stmt)
    return [
        {
            "type": "emergency",
            "id": guide.id,
            "title": guide.title,
            "category": guide.category,
            "content": resolve(guide, "content", lang),
            "helpline": guide.helpline,
            "legalAid": guide.legal_aid,
        }
        for guide in result.scalars().all()
    ]


async def search_content(db: AsyncSession, q: str, lang: str, search_type: str = "all") -> dict:
    """
    Run the search for an already-validated, non-blank query.

    Articles are listed first, most important first; amendments and guides
    follow in store order. An unknown `search_type` matches nothing.
    """
    results = []

    if search_type in ("all", "articles"):
        articles = await _search_articles(db, q, lang)
        articles.sort(key=lambda item: item["importance"] or 0, reverse=True)
        results.extend(articles)

    if search_type in ("all", "amendments"):
        results.extend(await _search_amendments(db, q, lang))

    if search_type in ("all", "emergency"):
        results.extend(await _search_emergency(db, q, lang))

    logger.info(f"Search '{q[:50]}' type={search_type}: {len(results)} results")

    return {
        "query": q,
        "count": len(results),
        "results": results,
    }
