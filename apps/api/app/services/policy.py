"""
Role-hierarchy authorization for employee mutations.

A caller may create, change a record to, or act upon any role at or below
their own rank (employee < leader < director). Every check here is a pure
function of roles; none of them touch storage.
"""

from app.core.errors import ForbiddenError
from app.models.employee import Role


def can_act(caller_role: Role, target_role: Role) -> bool:
    return caller_role.rank >= target_role.rank


def authorize_create(target_role: Role, caller_role: Role) -> None:
    if not can_act(caller_role, target_role):
        raise ForbiddenError(
            f"A {caller_role.value} cannot create an employee with role {target_role.value}."
        )


def authorize_update(existing_role: Role, requested_role: Role, caller_role: Role) -> None:
    # Both checks are independent: a leader may not touch a director's record
    # even when the role itself stays unchanged.
    if not can_act(caller_role, existing_role):
        raise ForbiddenError(
            f"A {caller_role.value} cannot edit an employee with role {existing_role.value}."
        )
    if not can_act(caller_role, requested_role):
        raise ForbiddenError(
            f"A {caller_role.value} cannot assign role {requested_role.value}."
        )


def authorize_delete(existing_role: Role, caller_role: Role) -> None:
    if not can_act(caller_role, existing_role):
        raise ForbiddenError(
            f"A {caller_role.value} cannot delete an employee with role {existing_role.value}."
        )
