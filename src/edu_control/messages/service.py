from __future__ import annotations

from typing import List

from ..common.datetime_utils import now_ms
from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.enums import STAFF_ROLES, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.model import Teacher, User
from ..users.repository import UserRepository
from .model import ChatMessage
from .repository import MessageRepository

log = get_logger(__name__)


class MessageService:
    """Use case: direct messages between users."""

    def __init__(self, messages: MessageRepository, users: UserRepository):
        self._messages = messages
        self._users = users

    def contacts(self, current_user: User, search: str = "") -> List[User]:
        """People ``current_user`` may write to.

        Students only see staff. ``search`` matches name or email as a whole,
        or any comma-separated term against a teacher's subjects.
        """
        contacts = [u for u in self._users.list_all() if u.id != current_user.id]
        if current_user.role == Role.STUDENT:
            contacts = [u for u in contacts if u.role in STAFF_ROLES]

        query = (search or "").strip().lower()
        if not query:
            return contacts

        terms = [t.strip() for t in query.split(",") if t.strip()]

        def matches(u: User) -> bool:
            if query in u.full_name.lower() or query in u.email.lower():
                return True
            return isinstance(u, Teacher) and any(term in s.lower() for s in u.subjects for term in terms)

        return [u for u in contacts if matches(u)]

    def _check_contact(self, current_user: User, contact_id: str) -> User:
        contact = self._users.get_by_id(contact_id)
        if not contact or contact.id == current_user.id:
            raise NotFoundError("Contact not found")
        if current_user.role == Role.STUDENT and contact.role not in STAFF_ROLES:
            raise AuthorizationError("Students can only write to staff")
        return contact

    def conversation(self, current_user: User, contact_id: str) -> List[ChatMessage]:
        contact = self._check_contact(current_user, contact_id)
        self._messages.mark_read(receiver_id=current_user.id, sender_id=contact.id)
        return list(self._messages.list_between(current_user.id, contact.id))

    def send(self, current_user: User, contact_id: str, text: str) -> ChatMessage:
        contact = self._check_contact(current_user, contact_id)
        message = ChatMessage(
            id=new_id(),
            sender_id=current_user.id,
            receiver_id=contact.id,
            text=require_non_empty(text, "Message"),
            timestamp=now_ms(),
        )
        self._messages.add(message)
        log.info("direct message sent", extra={"message_id": message.id})
        return message
