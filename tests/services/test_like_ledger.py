"""Tests for the like ledger and its counter maintenance."""

import threading
from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker

from tests.factories import make_post, make_user
from vistagram.db.session import Base
from vistagram.models import Like
from vistagram.services.errors import AlreadyLikedError, NotLikedError, PostNotFoundError
from vistagram.services.likes import LikeLedger
from vistagram.services.status import get_post_status


def _like_rows(db_session, post_id: int) -> int:
    return db_session.execute(
        select(func.count()).select_from(Like).where(Like.post_id == post_id)
    ).scalar_one()


def test_like_increments_once(db_session, test_user, test_post) -> None:
    ledger = LikeLedger(db_session)
    assert ledger.like(test_user.id, test_post.id) == 1

    with pytest.raises(AlreadyLikedError):
        ledger.like(test_user.id, test_post.id)

    assert get_post_status(db_session, test_post.id).like_count == 1
    assert _like_rows(db_session, test_post.id) == 1


def test_unlike_without_like_fails(db_session, test_user, test_post) -> None:
    ledger = LikeLedger(db_session)
    with pytest.raises(NotLikedError):
        ledger.unlike(test_user.id, test_post.id)
    assert get_post_status(db_session, test_post.id).like_count == 0


def test_like_unlike_round_trip(db_session, test_user, other_user, test_post) -> None:
    ledger = LikeLedger(db_session)
    ledger.like(other_user.id, test_post.id)
    before = get_post_status(db_session, test_post.id, test_user.id)

    ledger.like(test_user.id, test_post.id)
    assert ledger.unlike(test_user.id, test_post.id) == before.like_count

    after = get_post_status(db_session, test_post.id, test_user.id)
    assert after.like_count == before.like_count
    assert after.is_liked is False


def test_unlike_twice(db_session, test_user, test_post) -> None:
    ledger = LikeLedger(db_session)
    ledger.like(test_user.id, test_post.id)

    assert ledger.unlike(test_user.id, test_post.id) == 0
    with pytest.raises(NotLikedError):
        ledger.unlike(test_user.id, test_post.id)
    assert get_post_status(db_session, test_post.id).like_count == 0


def test_unlike_floors_drifted_counter(db_session, test_user, test_post) -> None:
    """If the counter already reads zero, removing a like keeps it at zero."""
    db_session.add(Like(user_id=test_user.id, post_id=test_post.id))
    db_session.commit()

    assert LikeLedger(db_session).unlike(test_user.id, test_post.id) == 0
    assert _like_rows(db_session, test_post.id) == 0


def test_two_users_like_same_post(session_factory, db_session, test_user, other_user, test_post) -> None:
    """Likes from separate sessions on the same post both count."""
    with session_factory() as first, session_factory() as second:
        assert LikeLedger(first).like(test_user.id, test_post.id) == 1
        assert LikeLedger(second).like(other_user.id, test_post.id) == 2

    assert get_post_status(db_session, test_post.id).like_count == 2
    assert _like_rows(db_session, test_post.id) == 2


def test_duplicate_insert_race_reports_already_liked(
    mocker, session_factory, db_session, test_user, test_post
) -> None:
    """A request that misses the pre-check still loses on the unique constraint."""
    with session_factory() as first, session_factory() as second:
        LikeLedger(first).like(test_user.id, test_post.id)

        racing = LikeLedger(second)
        real_find = racing._find
        mocker.patch.object(racing, "_find", side_effect=[None, real_find(test_user.id, test_post.id)])
        with pytest.raises(AlreadyLikedError):
            racing.like(test_user.id, test_post.id)

    assert get_post_status(db_session, test_post.id).like_count == 1
    assert _like_rows(db_session, test_post.id) == 1


def test_likes_on_other_posts_are_independent(db_session, test_user, other_user) -> None:
    first_post = make_post(db_session, test_user)
    second_post = make_post(db_session, other_user)
    third_user = make_user(db_session, "Third User")

    ledger = LikeLedger(db_session)
    ledger.like(third_user.id, first_post.id)
    ledger.like(test_user.id, second_post.id)
    ledger.like(third_user.id, second_post.id)

    assert get_post_status(db_session, first_post.id).like_count == 1
    assert get_post_status(db_session, second_post.id).like_count == 2


def test_unknown_post(db_session, test_user) -> None:
    ledger = LikeLedger(db_session)
    with pytest.raises(PostNotFoundError):
        ledger.like(test_user.id, 99999)
    with pytest.raises(PostNotFoundError):
        ledger.unlike(test_user.id, 99999)


def test_counter_failure_rolls_back_like_row(mocker, db_session, test_user, test_post) -> None:
    ledger = LikeLedger(db_session)
    mocker.patch.object(ledger.counters, "increment_likes", side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        ledger.like(test_user.id, test_post.id)

    assert _like_rows(db_session, test_post.id) == 0
    assert get_post_status(db_session, test_post.id).like_count == 0


@pytest.fixture()
def file_session_factory(tmp_path) -> Iterator[sessionmaker[Session]]:
    """Sessions on a file-backed database, each with its own connection."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'likes.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    finally:
        engine.dispose()


def test_concurrent_likes_from_many_users(file_session_factory) -> None:
    workers = 8
    with file_session_factory() as setup:
        users = [make_user(setup, f"Liker {i}") for i in range(workers)]
        post = make_post(setup, users[0])
    barrier = threading.Barrier(workers)
    errors: list[BaseException] = []

    def like(user_id: int) -> None:
        with file_session_factory() as session:
            barrier.wait()
            try:
                LikeLedger(session).like(user_id, post.id)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

    threads = [threading.Thread(target=like, args=(user.id,)) for user in users]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    with file_session_factory() as check:
        assert get_post_status(check, post.id).like_count == workers
        assert _like_rows(check, post.id) == workers
