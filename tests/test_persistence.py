from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from codevoyage.models import Roadmap
from codevoyage.services.roadmap_service import (
    add_milestone_note,
    delete_roadmap,
    generate_milestones,
    get_roadmap_by_id,
    get_user_roadmaps,
    save_roadmap,
)

USER_ID = "user-1"
OTHER_USER_ID = "user-2"

pytestmark = pytest.mark.asyncio


def _content(language="Python"):
    return {
        "title": f"{language} Learning Roadmap",
        "overview": "overview",
        "milestones": generate_milestones(language, 1),
    }


async def test_save_and_fetch(db_session):
    roadmap_id = await save_roadmap(db_session, USER_ID, "My Path", "Python", _content(), topic="web")
    assert roadmap_id

    roadmap = await get_roadmap_by_id(db_session, roadmap_id, USER_ID)
    assert roadmap.title == "My Path"
    assert roadmap.topic == "web"
    assert roadmap.content["milestones"][0]["title"] == "Python Fundamentals"


async def test_save_without_user_returns_none(db_session):
    assert await save_roadmap(db_session, "", "t", "Python", _content()) is None
    assert db_session.query(Roadmap).count() == 0


async def test_save_database_error_returns_none():
    db = MagicMock()
    db.commit.side_effect = SQLAlchemyError("insert failed")

    assert await save_roadmap(db, USER_ID, "t", "Python", _content()) is None
    db.rollback.assert_called_once()


async def test_list_is_scoped_to_owner_and_newest_first(db_session):
    now = datetime.now()
    db_session.add_all([
        Roadmap(user_id=USER_ID, title="old", language="Go", content=_content("Go"),
                created_at=now - timedelta(days=1)),
        Roadmap(user_id=USER_ID, title="new", language="Go", content=_content("Go"), created_at=now),
        Roadmap(user_id=OTHER_USER_ID, title="theirs", language="Go", content=_content("Go")),
    ])
    db_session.commit()

    roadmaps = await get_user_roadmaps(db_session, USER_ID)
    assert [r.title for r in roadmaps] == ["new", "old"]


async def test_list_database_error_returns_empty():
    db = MagicMock()
    db.query.side_effect = SQLAlchemyError("select failed")
    assert await get_user_roadmaps(db, USER_ID) == []


async def test_other_users_cannot_read_or_delete(db_session):
    roadmap_id = await save_roadmap(db_session, USER_ID, "t", "Python", _content())

    assert await get_roadmap_by_id(db_session, roadmap_id, OTHER_USER_ID) is None
    assert await delete_roadmap(db_session, roadmap_id, OTHER_USER_ID) is False
    assert await get_roadmap_by_id(db_session, roadmap_id, USER_ID) is not None


async def test_delete(db_session):
    roadmap_id = await save_roadmap(db_session, USER_ID, "t", "Python", _content())

    assert await delete_roadmap(db_session, roadmap_id, USER_ID) is True
    assert await get_roadmap_by_id(db_session, roadmap_id, USER_ID) is None
    assert await delete_roadmap(db_session, roadmap_id, USER_ID) is False


async def test_add_milestone_note_persists(db_session):
    roadmap_id = await save_roadmap(db_session, USER_ID, "t", "Python", _content())

    note = await add_milestone_note(db_session, roadmap_id, USER_ID, 1, "Finished chapter 2")
    assert note["content"] == "Finished chapter 2"
    assert note["id"]

    db_session.expire_all()
    roadmap = await get_roadmap_by_id(db_session, roadmap_id, USER_ID)
    assert roadmap.content["milestones"][1]["notes"] == [note]
    assert roadmap.content["milestones"][0]["notes"] == []


async def test_add_milestone_note_out_of_range(db_session):
    roadmap_id = await save_roadmap(db_session, USER_ID, "t", "Python", _content())

    assert await add_milestone_note(db_session, roadmap_id, USER_ID, 4, "nope") is None
    assert await add_milestone_note(db_session, roadmap_id, USER_ID, -1, "nope") is None
    assert await add_milestone_note(db_session, "missing", USER_ID, 0, "nope") is None


async def test_get_database_error_returns_none():
    db = MagicMock()
    db.query.side_effect = SQLAlchemyError("select failed")
    assert await get_roadmap_by_id(db, "some-id", USER_ID) is None


async def test_delete_database_error_rolls_back():
    db = MagicMock()
    db.commit.side_effect = SQLAlchemyError("delete failed")

    assert await delete_roadmap(db, "some-id", USER_ID) is False
    db.rollback.assert_called_once()


async def test_add_milestone_note_commit_failure(db_session, monkeypatch):
    roadmap_id = await save_roadmap(db_session, USER_ID, "t", "Python", _content())

    def failing_commit():
        raise SQLAlchemyError("update failed")

    monkeypatch.setattr(db_session, "commit", failing_commit)
    assert await add_milestone_note(db_session, roadmap_id, USER_ID, 0, "lost note") is None
    monkeypatch.undo()

    roadmap = await get_roadmap_by_id(db_session, roadmap_id, USER_ID)
    assert roadmap.content["milestones"][0]["notes"] == []
