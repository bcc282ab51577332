"""Role checks used to gate organizer features."""

from collections.abc import Iterable

from events.domain.models import Role

EVENT_MANAGER_ROLES = frozenset({Role.ORGANIZER, Role.ADMIN})


def has_role(roles: Iterable[Role], role: Role) -> bool:
    return role in frozenset(roles)


def can_manage_events(roles: Iterable[Role]) -> bool:
    return not EVENT_MANAGER_ROLES.isdisjoint(roles)
