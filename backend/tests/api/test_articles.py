"""Article routes - fetch by id, list with comment counts, vote patching."""

from datetime import datetime

from sqlalchemy import select

from ncnews.models.article import Article
from tests.seed_data import ARTICLE_COUNT


def _created(item: dict) -> datetime:
    return datetime.fromisoformat(item["created_at"])


# --- GET /api/articles/{article_id} ------------------------------------------

async def test_get_article_returns_full_article(client):
    res = await client.get("/api/articles/2")
    assert res.status_code == 200
    article = res.json()
    assert article["article_id"] == 2
    for key in ("title", "topic", "author", "body", "created_at", "article_img_url"):
        assert isinstance(article[key], str)
    assert isinstance(article["votes"], int)


async def test_get_article_with_non_integer_id_returns_400(client):
    res = await client.get("/api/articles/wrong")
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid id"


async def test_get_article_with_unknown_id_returns_404(client):
    res = await client.get("/api/articles/999")
    assert res.status_code == 404
    assert res.json()["msg"] == "Article not found"


async def test_get_article_with_misspelled_prefix_returns_404(client):
    res = await client.get("/api/articlesss/3")
    assert res.status_code == 404


async def test_get_article_is_repeatable(client):
    first = (await client.get("/api/articles/1")).json()
    second = (await client.get("/api/articles/1")).json()
    assert first == second


# --- GET /api/articles -------------------------------------------------------

async def test_list_articles_returns_every_article(client):
    res = await client.get("/api/articles")
    assert res.status_code == 200
    articles = res.json()["articles"]
    assert len(articles) == ARTICLE_COUNT
    for article in articles:
        for key in ("title", "topic", "author", "created_at", "article_img_url"):
            assert isinstance(article[key], str)
        assert "body" not in article


async def test_list_articles_sorted_newest_first(client):
    articles = (await client.get("/api/articles")).json()["articles"]
    created = [_created(a) for a in articles]
    assert created == sorted(created, reverse=True)
    assert len(set(created)) == len(created)


async def test_list_articles_counts_comments(client):
    articles = (await client.get("/api/articles")).json()["articles"]
    counts = {a["article_id"]: a["comment_count"] for a in articles}
    assert counts[1] == 5
    assert counts[5] == 2
    assert counts[10] == 0
    assert all(isinstance(c, int) and c >= 0 for c in counts.values())


# --- PATCH /api/articles/{article_id} ----------------------------------------

async def test_patch_increments_votes(client):
    res = await client.patch("/api/articles/1", json={"inc_votes": 5})
    assert res.status_code == 200
    article = res.json()["article"]
    assert article["votes"] == 105
    assert article["title"] == "Living in the shadow of a great man"
    assert isinstance(article["body"], str)


async def test_patch_allows_votes_to_go_negative(client):
    res = await client.patch("/api/articles/1", json={"inc_votes": -150})
    assert res.status_code == 200
    assert res.json()["article"]["votes"] == -50


async def test_patch_is_not_idempotent(client):
    await client.patch("/api/articles/1", json={"inc_votes": 5})
    res = await client.patch("/api/articles/1", json={"inc_votes": 5})
    assert res.json()["article"]["votes"] == 110


async def test_patch_persists_votes(client, test_db):
    await client.patch("/api/articles/2", json={"inc_votes": 3})
    result = await test_db.execute(
        select(Article.votes).where(Article.article_id == 2),
    )
    assert result.scalar_one() == 3


async def test_patch_with_unknown_key_returns_400(client):
    res = await client.patch("/api/articles/1", json={"inc_votessss": 5})
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid column value"


async def test_patch_with_non_integer_delta_returns_400(client):
    for bad in ("5", 5.5, True, None):
        res = await client.patch("/api/articles/1", json={"inc_votes": bad})
        assert res.status_code == 400, bad
        assert res.json()["msg"] == "Invalid column value"


async def test_patch_with_empty_body_returns_400(client):
    res = await client.patch("/api/articles/1")
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid column value"


async def test_patch_with_unknown_article_returns_404(client):
    res = await client.patch("/api/articles/999", json={"inc_votes": 1})
    assert res.status_code == 404


async def test_patch_with_non_integer_id_returns_400(client):
    res = await client.patch("/api/articles/one", json={"inc_votes": 1})
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid id"


async def test_patch_with_delta_outside_column_range_returns_400(client):
    for bad in (2**31, 2**63 - 1, 10**20, -(2**31) - 1):
        res = await client.patch("/api/articles/1", json={"inc_votes": bad})
        assert res.status_code == 400, bad
        assert res.json()["msg"] == "Invalid column value"

        after = await client.get("/api/articles/1")
        assert after.status_code == 200
        assert after.json()["article"]["votes"] == 100


async def test_patch_that_would_overflow_the_total_returns_400(client):
    res = await client.patch("/api/articles/1", json={"inc_votes": 2**31 - 1})
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid column value"

    assert (await client.get("/api/articles/1")).json()["article"]["votes"] == 100
    listing = await client.get("/api/articles")
    assert listing.status_code == 200
