"""
samvidhan/services/amendment_service.py
Amendment listing, decade timeline and statistics
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from samvidhan.orm.amendment import Amendment
from samvidhan.services.localization import resolve

logger = logging.getLogger(__name__)


@dataclass
class AmendmentFilters:
    year: Optional[int] = None
    number: Optional[int] = None


def decade_of(year: int) -> int:
    return (year // 10) * 10


def serialize_amendment(amendment: Amendment, lang: str) -> dict:
    return {
        "id": amendment.id,
        "number": amendment.number,
        "year": amendment.year,
        "title": resolve(amendment, "title", lang),
        "description": amendment.description,
        "actName": amendment.act_name,
        "articles": [
            {
                "id": article.id,
                "number": article.number,
                "title": resolve(article, "title", lang),
            }
            for article in amendment.articles
        ],
    }


def build_timeline(amendments: List[dict]) -> List[dict]:
    """Group serialized amendments by decade, oldest decade first."""
    buckets = {}
    for item in amendments:
        buckets.setdefault(decade_of(item["year"]), []).append(item)
    return [
        {"decade": decade, "count": len(items), "amendments": items}
        for decade, items in sorted(buckets.items())
    ]


def build_stats(amendments: List[dict], today: Optional[datetime] = None) -> dict:
    """
    Totals over the filtered amendment list.

    thisDecade / lastDecade are relative to the current year, so in 2026
    they cover 2020-2029 and 2010-2019.
    """
    years = [item["year"] for item in amendments]
    current_decade = decade_of((today or datetime.now()).year)
    return {
        "total": len(amendments),
        "byDecade": len({decade_of(y) for y in years}),
        "latestYear": max(years) if years else None,
        "earliestYear": min(years) if years else None,
        "thisDecade": sum(1 for y in years if current_decade <= y < current_decade + 10),
        "lastDecade": sum(1 for y in years if current_decade - 10 <= y < current_decade),
    }


async def list_amendments(db: AsyncSession, lang: str, filters: AmendmentFilters) -> dict:
    stmt = (
        select(Amendment)
        .options(selectinload(Amendment.articles))
        .order_by(Amendment.year.asc(), Amendment.number.asc())
    )
    if filters.year is not None:
        stmt = stmt.where(Amendment.year == filters.year)
    if filters.number is not None:
        stmt = stmt.where(Amendment.number == filters.number)

    result = await db.execute(stmt)
    amendments = [serialize_amendment(a, lang) for a in result.scalars().all()]

    logger.info(f"Amendments: {len(amendments)} matched {filters}")

    return {
        "amendments": amendments,
        "timeline": build_timeline(amendments),
        "stats": build_stats(amendments),
    }
