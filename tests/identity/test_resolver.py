"""Unit tests for src/identity/resolver.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.models import RequestContext, UserModel
from src.identity.resolver import SQLIdentityResolver


def test_known_user(db_session_repo: Session, stored_user: UserModel) -> None:
    resolver = SQLIdentityResolver(db_session_repo)
    assert resolver.get_current_user(RequestContext(user_id=stored_user.id)) == stored_user


def test_unknown_user(db_session_repo: Session, stored_user: UserModel) -> None:
    resolver = SQLIdentityResolver(db_session_repo)
    assert resolver.get_current_user(RequestContext(user_id=uuid4())) is None
