import pytest

from app.exceptions import (
    AuthenticationError,
    ConstraintViolation,
    NoRowsAffected,
    NotFound,
    ValidationError,
)
from app.schemas import (
    CreateFollower,
    CreateLike,
    CreateRetweet,
    CreateTweet,
    CreateUser,
    GetListRequest,
    UpdateTweet,
    UpdateUser,
    UpdateUserPassword,
    UserLogin,
)
from app.utils.auth import decode_access_token, verify_password


async def create_user(services, username="alice", password="secret123", **fields):
    return await services.user.create(
        CreateUser(username=username, password=password, **fields)
    )


# ===== Users =====


@pytest.mark.asyncio
async def test_create_user_hashes_password(services, storage):
    user = await create_user(services, name="Alice", bio="hi")

    fetched = await services.user.get(user.id)
    assert fetched.username == "alice"
    assert fetched.name == "Alice"
    assert fetched.bio == "hi"
    assert fetched.created_at is not None

    stored_hash = storage.user.rows[user.id].password_hash
    assert stored_hash != "secret123"
    assert verify_password("secret123", stored_hash)
    assert "password" not in fetched.model_dump()


@pytest.mark.asyncio
async def test_duplicate_username_is_rejected(services, storage):
    await create_user(services)

    with pytest.raises(ConstraintViolation):
        await create_user(services, password="another1")
    assert len(storage.user.rows) == 1


@pytest.mark.asyncio
async def test_deleted_user_is_gone_but_username_stays_taken(services):
    user = await create_user(services)
    await services.user.delete(user.id)

    with pytest.raises(NotFound):
        await services.user.get(user.id)
    with pytest.raises(NoRowsAffected):
        await services.user.delete(user.id)
    with pytest.raises(NoRowsAffected):
        await services.user.update(user.id, UpdateUser(name="ghost"))
    with pytest.raises(ConstraintViolation):
        await create_user(services)

    users = await services.user.get_list(GetListRequest())
    assert users.count == 0


@pytest.mark.asyncio
async def test_update_user_keeps_omitted_fields(services):
    user = await create_user(services, name="Alice", bio="original")

    updated = await services.user.update(user.id, UpdateUser(name="Alicia"))

    assert updated.name == "Alicia"
    assert updated.bio == "original"
    assert updated.updated_at > user.updated_at


@pytest.mark.asyncio
async def test_update_password(services, storage):
    user = await create_user(services)

    with pytest.raises(ValidationError, match="old password did not match"):
        await services.user.update_password(
            user.id, UpdateUserPassword(old_password="wrong!", new_password="newpass1")
        )

    await services.user.update_password(
        user.id, UpdateUserPassword(old_password="secret123", new_password="newpass1")
    )
    assert verify_password("newpass1", storage.user.rows[user.id].password_hash)


@pytest.mark.asyncio
async def test_update_password_of_missing_user(services):
    with pytest.raises(NotFound):
        await services.user.update_password(
            "missing", UpdateUserPassword(old_password="x", new_password="newpass1")
        )


@pytest.mark.asyncio
async def test_user_search_matches_username_or_name(services):
    await create_user(services, username="alice", name="Alice Smith")
    await create_user(services, username="bob", name="Robert")
    await create_user(services, username="carol", name="Bobby Tables")

    result = await services.user.get_list(GetListRequest(search="BOB"))

    assert result.count == 2
    assert {u.username for u in result.users} == {"bob", "carol"}


# ===== Auth =====


@pytest.mark.asyncio
async def test_login_returns_token(services):
    user = await create_user(services)

    token = await services.auth.login(
        UserLogin(username="alice", password="secret123")
    )

    payload = decode_access_token(token.access_token)
    assert token.token_type == "bearer"
    assert payload["sub"] == "alice"
    assert payload["user_id"] == user.id


@pytest.mark.asyncio
async def test_login_rejects_bad_credentials(services):
    user = await create_user(services)

    with pytest.raises(AuthenticationError):
        await services.auth.login(UserLogin(username="alice", password="nope"))
    with pytest.raises(AuthenticationError):
        await services.auth.login(UserLogin(username="nobody", password="secret123"))

    await services.user.delete(user.id)
    with pytest.raises(AuthenticationError):
        await services.auth.login(UserLogin(username="alice", password="secret123"))


# ===== Tweets =====


@pytest.mark.asyncio
async def test_create_tweet_defaults(services):
    tweet = await services.tweets.create(CreateTweet(user_id="u1", content="hello"))

    assert tweet.content == "hello"
    assert tweet.image_url is None
    assert tweet.video_url is None
    assert tweet.created_at == tweet.updated_at


@pytest.mark.asyncio
async def test_tweet_list_is_newest_first_and_paginated(services):
    for i in range(5):
        await services.tweets.create(CreateTweet(user_id="u1", content=f"tweet {i}"))
    await services.tweets.create(CreateTweet(user_id="u2", content="other"))

    page = await services.tweets.get_list(
        GetListRequest(page=1, limit=2, user_id="u1")
    )
    assert page.count == 5
    assert [t.content for t in page.tweets] == ["tweet 4", "tweet 3"]

    last = await services.tweets.get_list(GetListRequest(page=3, limit=2, user_id="u1"))
    assert [t.content for t in last.tweets] == ["tweet 0"]
    assert last.count == 5


@pytest.mark.asyncio
async def test_update_tweet_refreshes_updated_at(services):
    tweet = await services.tweets.create(CreateTweet(user_id="u1", content="hello"))

    updated = await services.tweets.update(
        tweet.id, UpdateTweet(image_url="https://img.example/1.png")
    )

    assert updated.content == "hello"
    assert updated.image_url == "https://img.example/1.png"
    assert updated.updated_at > updated.created_at


@pytest.mark.asyncio
async def test_deleted_tweet_is_not_found(services):
    tweet = await services.tweets.create(CreateTweet(user_id="u1", content="hello"))
    await services.tweets.delete(tweet.id)

    with pytest.raises(NotFound):
        await services.tweets.get(tweet.id)


# ===== Likes, followers, retweets =====


@pytest.mark.asyncio
async def test_like_twice_is_rejected(services):
    await services.likes.create(CreateLike(tweet_id="t1", user_id="u1"))

    with pytest.raises(ConstraintViolation):
        await services.likes.create(CreateLike(tweet_id="t1", user_id="u1"))

    likes = await services.likes.get_list(GetListRequest(tweet_id="t1"))
    assert likes.count == 1


@pytest.mark.asyncio
async def test_self_follow_is_rejected(services, storage):
    with pytest.raises(ConstraintViolation):
        await services.followers.create(
            CreateFollower(user_id="u1", follower_user_id="u1")
        )
    assert storage.followers.rows == {}


@pytest.mark.asyncio
async def test_followers_filtered_by_either_side(services):
    await services.followers.create(CreateFollower(user_id="u1", follower_user_id="u2"))
    await services.followers.create(CreateFollower(user_id="u1", follower_user_id="u3"))
    await services.followers.create(CreateFollower(user_id="u2", follower_user_id="u3"))

    followers_of_u1 = await services.followers.get_list(GetListRequest(user_id="u1"))
    followed_by_u3 = await services.followers.get_list(
        GetListRequest(follower_user_id="u3")
    )

    assert followers_of_u1.count == 2
    assert followed_by_u3.count == 2


@pytest.mark.asyncio
async def test_retweet_roundtrip(services):
    retweet = await services.retweets.create(
        CreateRetweet(original_tweet_id="t1", user_id="u1")
    )

    fetched = await services.retweets.get(retweet.retweet_id)
    assert fetched.original_tweet_id == "t1"

    await services.retweets.delete(retweet.retweet_id)
    with pytest.raises(NotFound):
        await services.retweets.get(retweet.retweet_id)
