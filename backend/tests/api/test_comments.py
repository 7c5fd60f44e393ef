"""Comment routes - listing under an article and posting new comments."""

from datetime import datetime

from sqlalchemy import func, select

from ncnews.models.comment import Comment


# --- GET /api/articles/{article_id}/comments ---------------------------------

async def test_list_comments_for_article(client):
    res = await client.get("/api/articles/5/comments")
    assert res.status_code == 200
    comments = res.json()["comments"]
    assert len(comments) == 2
    for comment in comments:
        assert isinstance(comment["comment_id"], int)
        assert isinstance(comment["votes"], int)
        assert isinstance(comment["created_at"], str)
        assert isinstance(comment["author"], str)
        assert isinstance(comment["body"], str)
        assert comment["article_id"] == 5


async def test_list_comments_sorted_newest_first(client):
    comments = (await client.get("/api/articles/1/comments")).json()["comments"]
    created = [datetime.fromisoformat(c["created_at"]) for c in comments]
    assert len(created) == 5
    assert created == sorted(created, reverse=True)


async def test_list_comments_for_article_without_comments_is_empty(client):
    res = await client.get("/api/articles/10/comments")
    assert res.status_code == 200
    assert res.json()["comments"] == []


async def test_list_comments_with_non_integer_id_returns_400(client):
    res = await client.get("/api/articles/wrong/comments")
    assert res.status_code == 400


async def test_list_comments_for_unknown_article_returns_404(client):
    res = await client.get("/api/articles/999/comments")
    assert res.status_code == 404


# --- POST /api/articles/{article_id}/comments --------------------------------

async def test_post_comment_returns_created_comment(client):
    res = await client.post(
        "/api/articles/5/comments",
        json={"author": "butter_bridge", "body": "master blaster"},
    )
    assert res.status_code == 201
    comment = res.json()["comment"]
    assert comment["author"] == "butter_bridge"
    assert comment["body"] == "master blaster"
    assert comment["article_id"] == 5
    assert comment["votes"] == 0
    assert isinstance(comment["comment_id"], int)


async def test_post_comment_is_listed_afterwards(client):
    await client.post(
        "/api/articles/10/comments",
        json={"author": "lurker", "body": "first!"},
    )
    comments = (await client.get("/api/articles/10/comments")).json()["comments"]
    assert [c["body"] for c in comments] == ["first!"]


async def test_post_comment_with_unknown_key_returns_400(client):
    res = await client.post(
        "/api/articles/5/comments",
        json={"authorrr": "butter_bridge", "body": "master blaster"},
    )
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid column value"


async def test_post_comment_with_missing_body_returns_400(client):
    res = await client.post(
        "/api/articles/5/comments", json={"author": "butter_bridge"},
    )
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid column value"


async def test_post_comment_with_unknown_author_returns_400(client, test_db):
    res = await client.post(
        "/api/articles/5/comments",
        json={"author": "butterrrr_bridge", "body": "master blaster"},
    )
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid key value insert"

    count = await test_db.execute(
        select(func.count(Comment.comment_id)).where(Comment.article_id == 5),
    )
    assert count.scalar_one() == 2


async def test_post_comment_on_unknown_article_returns_404(client):
    res = await client.post(
        "/api/articles/999/comments",
        json={"author": "butter_bridge", "body": "master blaster"},
    )
    assert res.status_code == 404


async def test_post_comment_with_non_integer_id_returns_400(client):
    res = await client.post(
        "/api/articles/five/comments",
        json={"author": "butter_bridge", "body": "master blaster"},
    )
    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid id"


async def test_error_body_never_contains_backend_text(client):
    res = await client.post(
        "/api/articles/5/comments",
        json={"author": "butterrrr_bridge", "body": "master blaster"},
    )
    text = res.text.lower()
    assert "foreign key" not in text
    assert "constraint" not in text
