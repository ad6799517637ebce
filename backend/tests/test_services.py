from datetime import date

import pytest
from pydantic import ValidationError

from models.handover import HandoverLog
from models.users import User
from schemas.handover import DashboardFilter, HandoverLogForm
from schemas.user import UserCreate
from services.auth import authenticate_user, register_user
from services.handover import create_handover_log, get_handover_log, list_handover_logs
from utils.errors import DuplicateUserError, InvalidCredentialsError, NotFoundError


def test_register_user_raises_on_duplicate(db_session):
    register_user(db_session, UserCreate(username="op1", password="pw"))
    with pytest.raises(DuplicateUserError):
        register_user(db_session, UserCreate(username="op1", password="other"))
    assert db_session.query(User).count() == 1


def test_authenticate_user_errors_do_not_reveal_cause(db_session, make_user):
    make_user("op1", password="right")

    with pytest.raises(InvalidCredentialsError) as unknown:
        authenticate_user(db_session, username="nobody", password="right")
    with pytest.raises(InvalidCredentialsError) as wrong:
        authenticate_user(db_session, username="op1", password="wrong")
    assert str(unknown.value) == str(wrong.value)

    assert authenticate_user(db_session, username="op1", password="right").username == "op1"


@pytest.mark.parametrize("role", ["operator", "Manager", "MANAGER", "", None])
def test_only_exact_manager_role_sees_everything(db_session, make_user, make_log, role):
    me = make_user("me")
    other = make_user("other")
    make_log(me, outgoing_shift="mine")
    make_log(other, outgoing_shift="theirs")

    logs = list_handover_logs(db_session, role=role, user_id=me.id)
    assert [log.submitted_by_user_id for log in logs] == [me.id]


def test_manager_role_is_unrestricted(db_session, make_user, make_log):
    me = make_user("me", role="manager")
    other = make_user("other")
    make_log(me)
    make_log(other)

    logs = list_handover_logs(db_session, role="manager", user_id=me.id)
    assert {log.submitted_by_user_id for log in logs} == {me.id, other.id}


def test_create_and_fetch_handover_log(db_session, make_user):
    user = make_user("op1")
    form = HandoverLogForm(date="2024-02-01", outgoing_shift=" Night ", permits_status="", hsse_incidents="   ")

    log = create_handover_log(db_session, form, user_id=user.id)
    fetched = get_handover_log(db_session, log.id)
    assert fetched.outgoing_shift == " Night "
    assert fetched.permits_status is None
    assert fetched.hsse_incidents is None
    assert fetched.date == date(2024, 2, 1)
    assert db_session.query(HandoverLog).count() == 1


def test_get_handover_log_missing(db_session):
    with pytest.raises(NotFoundError):
        get_handover_log(db_session, 42)


def test_dashboard_filter_normalizes_query_values():
    assert DashboardFilter(search="", date="").model_dump() == {"search": None, "date": None}
    with pytest.raises(ValidationError):
        DashboardFilter(date="2024-13-45")
    assert DashboardFilter(search="Alpha", date="2024-01-01").date == date(2024, 1, 1)
