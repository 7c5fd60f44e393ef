"""Endpoint Catalog - the static document served by GET /api."""

ENDPOINTS: dict[str, dict] = {
    "GET /api": {
        "description": "serves up a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": [
            {"slug": "football", "description": "Footie!"},
        ],
    },
    "GET /api/articles": {
        "description": "serves an array of all articles, newest first, each with its comment_count",
        "queries": [],
        "exampleResponse": {
            "articles": [
                {
                    "article_id": 3,
                    "title": "Seafood substitutions are increasing",
                    "topic": "cooking",
                    "author": "weegembump",
                    "created_at": "2018-05-30T15:59:13.341Z",
                    "votes": 0,
                    "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700",
                    "comment_count": 6,
                },
            ],
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves a single article by its id",
        "queries": [],
        "exampleResponse": {
            "article_id": 1,
            "title": "Living in the shadow of a great man",
            "topic": "mitch",
            "author": "butter_bridge",
            "body": "I find this existence challenging",
            "created_at": "2020-07-09T20:11:00.000Z",
            "votes": 100,
            "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700",
        },
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes to the article's votes and serves the updated article",
        "exampleRequest": {"inc_votes": 5},
        "exampleResponse": {
            "article": {"article_id": 1, "votes": 105},
        },
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves an array of comments for the given article, newest first",
        "queries": [],
        "exampleResponse": {
            "comments": [
                {
                    "comment_id": 15,
                    "votes": 1,
                    "created_at": "2020-11-24T00:08:00.000Z",
                    "author": "butter_bridge",
                    "body": "I am 100% sure that we're not completely sure.",
                    "article_id": 5,
                },
            ],
        },
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to the given article and serves the created comment",
        "exampleRequest": {"author": "butter_bridge", "body": "master blaster"},
        "exampleResponse": {
            "comment": {
                "comment_id": 19,
                "votes": 0,
                "created_at": "2024-01-01T00:00:00.000Z",
                "author": "butter_bridge",
                "body": "master blaster",
                "article_id": 5,
            },
        },
    },
}
