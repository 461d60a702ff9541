from __future__ import annotations

import pytest

from edu_control.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from edu_control.messages.kv_message_repository import KVMessageRepository
from edu_control.messages.service import MessageService
from edu_control.users.kv_user_repository import KVUserRepository
from helpers import make_admin, make_student, make_teacher


@pytest.fixture
def service(gateway, seed_users) -> MessageService:
    seed_users(
        make_student("s1", name="Aibek Student"),
        make_student("s2", name="Nurlan Student"),
        make_teacher("t1", subjects=("Physics", "Astronomy"), name="Asel Teacher"),
        make_teacher("t2", subjects=("History",), name="Bakyt Teacher"),
        make_admin("a1"),
    )
    return MessageService(KVMessageRepository(gateway), KVUserRepository(gateway))


def _ids(users):
    return sorted(u.id for u in users)


def test_students_only_see_staff(service, gateway):
    me = KVUserRepository(gateway).get_by_id("s1")
    assert _ids(service.contacts(me)) == ["a1", "t1", "t2"]


def test_staff_see_everyone_else(service, gateway):
    me = KVUserRepository(gateway).get_by_id("t1")
    assert _ids(service.contacts(me)) == ["a1", "s1", "s2", "t2"]


def test_search_by_name_or_subject(service, gateway):
    me = KVUserRepository(gateway).get_by_id("s1")

    assert _ids(service.contacts(me, "asel")) == ["t1"]
    assert _ids(service.contacts(me, "astro")) == ["t1"]
    assert _ids(service.contacts(me, "history, physics")) == ["t1", "t2"]
    assert service.contacts(me, "chemistry") == []


def test_conversation_marks_incoming_read(service, gateway):
    users = KVUserRepository(gateway)
    student, teacher = users.get_by_id("s1"), users.get_by_id("t1")

    service.send(student, "t1", "Hello")
    service.send(teacher, "s1", "Hi there")

    seen_by_teacher = service.conversation(teacher, "s1")
    assert [m.text for m in seen_by_teacher] == ["Hello", "Hi there"]

    # teacher opened the chat: the student's message is read, the reply is not
    read = {m.text: m.read for m in service.conversation(student, "t1")}
    assert read["Hello"] is True


def test_student_cannot_write_to_student(service, gateway):
    me = KVUserRepository(gateway).get_by_id("s1")
    with pytest.raises(AuthorizationError):
        service.send(me, "s2", "psst")


def test_send_validation(service, gateway):
    me = KVUserRepository(gateway).get_by_id("t1")
    with pytest.raises(ValidationError):
        service.send(me, "s1", "   ")
    with pytest.raises(NotFoundError):
        service.send(me, "ghost", "hello")
    with pytest.raises(NotFoundError):
        service.send(me, "t1", "note to self")
