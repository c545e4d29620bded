# backend/queries/user_queries.py
from typing import Any, Dict

from sqlalchemy import delete, insert, select, update

from models.user_model import Role, User, UserRole
from queries.sql_template import now, sql_templates

users = User.__table__
roles = Role.__table__
user_roles = UserRole.__table__

PUBLIC_USER_COLUMNS = (
    users.c.userId, users.c.email, users.c.firstName, users.c.lastName,
    users.c.phoneNumber, users.c.isActive, users.c.createdAt, users.c.modifiedAt,
)


@sql_templates.template("InsertUser")
def insert_user(v: Dict[str, Any]):
    ts = now()
    return (
        insert(users)
        .values(
            email=v["email"],
            passwordHash=v["passwordHash"],
            firstName=v["firstName"],
            lastName=v["lastName"],
            phoneNumber=v.get("phoneNumber"),
            isActive=True,
            createdAt=ts,
            modifiedAt=ts,
        )
        .returning(users.c.userId)
    )


@sql_templates.template("GetUserByEmail")
def get_user_by_email(v: Dict[str, Any]):
    return select(users).where(users.c.email == v["email"])


@sql_templates.template("GetUserById")
def get_user_by_id(v: Dict[str, Any]):
    return select(*PUBLIC_USER_COLUMNS).where(users.c.userId == v["userId"])


@sql_templates.template("SelectUsers")
def select_users(v: Dict[str, Any]):
    return select(*PUBLIC_USER_COLUMNS).order_by(users.c.userId)


@sql_templates.template("UpdateUser")
def update_user(v: Dict[str, Any]):
    return (
        update(users)
        .where(users.c.userId == v["userId"])
        .values(**v["fields"], modifiedAt=now())
    )


@sql_templates.template("DeleteUser")
def delete_user(v: Dict[str, Any]):
    return delete(users).where(users.c.userId == v["userId"])


@sql_templates.template("DeleteUserRoles")
def delete_user_roles(v: Dict[str, Any]):
    return delete(user_roles).where(user_roles.c.userId == v["userId"])


@sql_templates.template("GetUserRoles")
def get_user_roles(v: Dict[str, Any]):
    return (
        select(roles.c.roleId, roles.c.roleName, user_roles.c.assignedAt)
        .select_from(user_roles.join(roles, roles.c.roleId == user_roles.c.roleId))
        .where(user_roles.c.userId == v["userId"])
        .order_by(roles.c.roleId)
    )


@sql_templates.template("GetRoleByName")
def get_role_by_name(v: Dict[str, Any]):
    return select(roles).where(roles.c.roleName == v["roleName"])


@sql_templates.template("AssignUserRole")
def assign_user_role(v: Dict[str, Any]):
    return (
        insert(user_roles)
        .values(userId=v["userId"], roleId=v["roleId"], assignedAt=now())
        .returning(user_roles.c.userRoleId)
    )
