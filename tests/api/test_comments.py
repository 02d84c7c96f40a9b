"""POST /comments: create, validation, method allow-list, data-access failure.

Invariants:
    - 201 body is exactly {id, title, content, success: true}
    - Missing body fields → 400 naming the field, never 500
    - Any method but POST → 405 method-not-allowed envelope
"""

from sqlalchemy import select

from blog_api.models.comment import Comment


async def test_create_comment_returns_201_with_projection(
    client, seed_user, seed_post,
):
    res = await client.post("/comments", json={
        "title": "T", "content": "C",
        "userId": seed_user.id, "postId": seed_post.id,
    })
    assert res.status_code == 201
    body = res.json()
    assert set(body) == {"id", "title", "content", "success"}
    assert isinstance(body["id"], int)
    assert body["title"] == "T"
    assert body["content"] == "C"
    assert body["success"] is True


async def test_created_comment_is_persisted_with_relations(
    client, seed_user, seed_post, test_db,
):
    res = await client.post("/comments", json={
        "title": "Persisted", "content": "Stored",
        "userId": seed_user.id, "postId": seed_post.id,
    })
    result = await test_db.execute(
        select(Comment).where(Comment.id == res.json()["id"]),
    )
    comment = result.scalar_one()
    assert comment.author_id == seed_user.id
    assert comment.post_id == seed_post.id


async def test_created_comment_appears_on_its_post(client, seed_user, seed_post):
    await client.post("/comments", json={
        "title": "Round trip", "content": "<b>rich</b>",
        "userId": seed_user.id, "postId": seed_post.id,
    })
    res = await client.get(f"/posts/{seed_post.id}")
    comments = res.json()["comments"]
    assert [c["title"] for c in comments] == ["Round trip"]
    assert comments[0]["content"] == "<b>rich</b>"
    assert comments[0]["author"]["email"] == seed_user.email


async def test_missing_field_returns_400(client, seed_user):
    res = await client.post("/comments", json={
        "title": "T", "content": "C", "userId": seed_user.id,
    })
    assert res.status_code == 400
    assert res.json() == {"error": "postId parameter missing", "success": False}


async def test_missing_body_returns_400(client):
    res = await client.post("/comments")
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_non_integer_user_id_returns_400(client):
    res = await client.post("/comments", json={
        "title": "T", "content": "C", "userId": "abc", "postId": 1,
    })
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid userId parameter", "success": False}


async def test_get_is_not_allowed(client):
    res = await client.get("/comments")
    assert res.status_code == 405
    assert res.json() == {"message": "Method not allowed", "success": False}


async def test_put_is_not_allowed_regardless_of_body(client):
    res = await client.put("/comments", json={"title": "T"})
    assert res.status_code == 405
    assert res.json() == {"message": "Method not allowed", "success": False}


async def test_database_failure_returns_500(broken_client):
    res = await broken_client.post("/comments", json={
        "title": "T", "content": "C", "userId": 1, "postId": 1,
    })
    assert res.status_code == 500
    assert res.json() == {"error": "Error creating the comment", "success": False}


async def test_unknown_post_id_returns_500_and_stores_nothing(
    client, seed_user, test_db,
):
    res = await client.post("/comments", json={
        "title": "T", "content": "C", "userId": seed_user.id, "postId": 999,
    })
    assert res.status_code == 500
    assert res.json() == {"error": "Error creating the comment", "success": False}
    result = await test_db.execute(select(Comment))
    assert result.scalars().all() == []


async def test_unknown_user_id_returns_500(client, seed_post):
    res = await client.post("/comments", json={
        "title": "T", "content": "C", "userId": 999, "postId": seed_post.id,
    })
    assert res.status_code == 500
    assert res.json() == {"error": "Error creating the comment", "success": False}
