"""
samvidhan/services/article_service.py
Article detail with explanation, case laws and amendments
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from samvidhan.errors import NotFoundError, ErrorCode
from samvidhan.orm.article import Article
from samvidhan.services.localization import resolve, localized_part, normalize_language

logger = logging.getLogger(__name__)


def pick_explanation(article: Article, lang: str) -> Optional[dict]:
    """First explanation written in `lang`, or None."""
    lang = normalize_language(lang)
    for explanation in article.simplified_explanations:
        if explanation.language == lang:
            return explanation.to_dict()
    return None


async def get_article_detail(db: AsyncSession, article_id: int, lang: str) -> dict:
    stmt = (
        select(Article)
        .where(Article.id == article_id)
        .options(
            selectinload(Article.part),
            selectinload(Article.simplified_explanations),
            selectinload(Article.case_laws),
            selectinload(Article.amendments),
        )
    )
    result = await db.execute(stmt)
    article = result.scalar_one_or_none()

    if article is None:
        logger.warning(f"Article {article_id} not found")
        raise NotFoundError("Article", code=ErrorCode.ARTICLE_NOT_FOUND)

    return {
        "id": article.id,
        "number": article.number,
        "title": resolve(article, "title", lang),
        "content": resolve(article, "content", lang),
        "category": article.category,
        "importance": article.importance,
        "part": localized_part(article.part, lang),
        "simplifiedExplanation": pick_explanation(article, lang),
        "relatedCases": [
            {
                "id": case.id,
                "title": case.title,
                "year": case.year,
                "court": case.court,
                "summary": resolve(case, "summary", lang),
                "landmark": case.landmark,
            }
            for case in sorted(article.case_laws, key=lambda c: (c.year or 0, c.id))
        ],
        "amendments": [
            {
                "id": amendment.id,
                "number": amendment.number,
                "year": amendment.year,
                "title": resolve(amendment, "title", lang),
                "description": amendment.description,
            }
            for amendment in sorted(article.amendments, key=lambda a: (a.year, a.number))
        ],
    }


async def find_articles_by_numbers(db: AsyncSession, numbers, lang: str) -> list:
    """Look up articles by number, keeping the order of `numbers`."""
    numbers = list(numbers)
    if not numbers:
        return []

    stmt = (
        select(Article)
        .where(Article.number.in_(numbers))
        .options(selectinload(Article.part))
    )
    result = await db.execute(stmt)
    by_number = {a.number: a for a in result.scalars().all()}

    found = []
    for number in numbers:
        article = by_number.get(number)
        if article is None:
            continue
        found.append({
            "id": article.id,
            "number": article.number,
            "title": resolve(article, "title", lang),
            "category": article.category,
            "part": localized_part(article.part, lang),
        })
    return found

