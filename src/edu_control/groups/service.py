from __future__ import annotations

from typing import List, Optional

from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_course, require_non_empty
from ..core.enums import MANAGEMENT_ROLES, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Group
from .repository import GroupRepository

log = get_logger(__name__)


class GroupService:
    """Use case: maintain the list of study groups (admin/director)."""

    def __init__(self, groups: GroupRepository):
        self._groups = groups

    def list_groups(self, *, course: Optional[int] = None) -> List[Group]:
        groups = list(self._groups.list_all())
        if course is None:
            return groups
        return [g for g in groups if g.course == course]

    def create(self, *, current_role: Role, name: str, department: str, course) -> Group:
        if current_role not in MANAGEMENT_ROLES:
            raise AuthorizationError("Only administration can manage groups")

        group = Group(
            id=new_id(),
            name=require_non_empty(name, "Group name"),
            department=require_non_empty(department, "Department"),
            course=require_course(course),
        )
        self._groups.add(group)
        log.info("group created", extra={"group_id": group.id, "group_name": group.name})
        return group

    def delete(self, *, current_role: Role, group_id: str) -> None:
        """Remove the group only; its schedule entries and students are kept."""
        if current_role not in MANAGEMENT_ROLES:
            raise AuthorizationError("Only administration can manage groups")
        if not self._groups.delete_by_id(group_id):
            raise NotFoundError("Group not found")
        log.info("group deleted", extra={"group_id": group_id})
