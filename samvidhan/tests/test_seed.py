"""
Sample data seeding and referential integrity.
"""
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from samvidhan.orm.app_settings import AppSettings
from samvidhan.orm.article import Article
from samvidhan.orm.case_law import CaseLaw
from samvidhan.orm.mcq import MCQ
from samvidhan.orm.part import Part
from samvidhan.seed.seed_data import ARTICLES, seed_database


async def count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar()


async def test_counts_match_fixtures(db_session, seeded):
    assert seeded["skipped"] is False
    assert seeded["parts"] == await count(db_session, Part)
    assert seeded["articles"] == await count(db_session, Article) == len(ARTICLES)
    assert seeded["mcqs"] == await count(db_session, MCQ)
    assert seeded["settings"] == await count(db_session, AppSettings)


async def test_every_article_has_its_part(db_session):
    part_ids = set((await db_session.execute(select(Part.id))).scalars().all())
    article_parts = (await db_session.execute(select(Article.part_id))).scalars().all()
    assert article_parts
    assert set(article_parts) <= part_ids


async def test_every_mcq_article_resolves(db_session):
    article_ids = set((await db_session.execute(select(Article.id))).scalars().all())
    mcq_articles = (await db_session.execute(select(MCQ.article_id))).scalars().all()
    assert all(article_id is None or article_id in article_ids for article_id in mcq_articles)


async def test_article_numbers_are_unique(db_session):
    numbers = (await db_session.execute(select(Article.number))).scalars().all()
    assert len(numbers) == len(set(numbers))


async def test_case_laws_are_linked(db_session):
    result = await db_session.execute(select(CaseLaw).options(selectinload(CaseLaw.articles)))
    assert all(case.articles for case in result.scalars().all())


async def test_second_run_is_skipped(db_session):
    again = await seed_database(db_session)
    assert again["skipped"] is True
    assert await count(db_session, Article) == len(ARTICLES)


async def test_seed_endpoint_is_idempotent(client):
    response = await client.post("/api/seed")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["skipped"] is True
