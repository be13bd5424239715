"""Unit tests for SQLTeamRepository: the same contract as for games, keyed by (id, owner)."""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.models import TeamModel
from src.db.sql_repository import SQLTeamRepository

OWNER_ID = uuid4()


def mock_team(**changes) -> TeamModel:
    team = TeamModel(
        id=uuid4(),
        owner_user_id=OWNER_ID,
        name="Map Readers",
        description="We never get lost",
        image_name="compass.png",
        last_updated=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        members=(OWNER_ID, uuid4()),
    )
    return replace(team, **changes)


def test_create_and_get_team(db_session_repo: Session) -> None:
    team = mock_team()
    repo = SQLTeamRepository(db_session_repo)
    repo.create(team)
    repo.save_changes()

    assert repo.get_by_id(team.id) == team
    assert repo.get_all() == [team]


def test_get_team_by_composite_key(db_session_repo: Session) -> None:
    """Fetched only if the second key component matches."""
    team = mock_team()
    repo = SQLTeamRepository(db_session_repo)
    repo.create(team)
    repo.save_changes()

    assert repo.get(team.id, OWNER_ID) == team
    assert repo.get(team.id, uuid4()) is None


def test_update_team(db_session_repo: Session) -> None:
    team = mock_team()
    repo = SQLTeamRepository(db_session_repo)
    repo.create(team)
    repo.save_changes()

    renamed = replace(team, name="Compass Crew", members=(OWNER_ID,))
    repo.update(renamed)
    repo.save_changes()

    assert repo.get_by_id(team.id) == renamed


def test_delete_team(db_session_repo: Session) -> None:
    team = mock_team()
    repo = SQLTeamRepository(db_session_repo)
    repo.create(team)
    repo.save_changes()

    repo.delete(team)
    repo.save_changes()

    assert repo.get_by_id(team.id) is None
    assert repo.get_all() == []
