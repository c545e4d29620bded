# backend/routers/auth_router.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from database.executor import QueryExecutor, get_executor
from gateway.error_handlers import server_error
from queries.sql_template import build_update_values
from schemas.common import success_response
from schemas.users import LoginPayload, RegisterPayload, RoleAssignment, UserUpdate
from services.auth_service import CurrentUser, get_current_user, get_password_hash, token_for_user, verify_password
from services.dependencies import get_user_repository
from services.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

USER_UPDATE_COLUMNS = ("firstName", "lastName", "phoneNumber", "passwordHash")


def _public(user: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in user.items() if k != "passwordHash"}


def _require_admin(users: UserRepository, current: CurrentUser) -> None:
    if "Admin" not in users.get_role_names(current.userId):
        raise HTTPException(status_code=403, detail="Access denied. Admin role required")


@router.post("/register", status_code=201)
def register(body: RegisterPayload,
             users: UserRepository = Depends(get_user_repository),
             executor: QueryExecutor = Depends(get_executor)):
    email = body.email.lower()
    try:
        if users.get_user_by_email(email):
            raise HTTPException(status_code=409, detail="User with this email already exists")
        role = users.get_role_by_name(body.roleName)
        if not role:
            raise HTTPException(status_code=400, detail=f"Role '{body.roleName}' not found")

        with executor.transaction() as tx:
            repo = UserRepository(tx)
            user_id = repo.insert_user(email, get_password_hash(body.password),
                                       body.firstName, body.lastName, body.phoneNumber)
            repo.assign_user_role(user_id, role["roleId"])

        user = users.get_user_by_id(user_id)
        roles = [body.roleName]
        logger.info("User %s registered with role %s", user_id, body.roleName)
        return success_response("User registered successfully", data={
            "user": user, "roles": roles, "token": token_for_user(user, roles),
        })
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Registration failed")
        raise server_error("Failed to register user", e)


@router.post("/login")
def login(body: LoginPayload, users: UserRepository = Depends(get_user_repository)):
    user = users.get_user_by_email(body.email.lower())
    if not user or not verify_password(body.password, user["passwordHash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    if not user.get("isActive", True):
        raise HTTPException(status_code=403, detail="Account is disabled")

    roles = users.get_role_names(user["userId"])
    public = _public(user)
    return success_response("Login successful", data={
        "user": public, "roles": roles, "token": token_for_user(public, roles),
    })


@router.get("/profile")
def get_profile(current: CurrentUser = Depends(get_current_user),
                users: UserRepository = Depends(get_user_repository)):
    user = users.get_user_by_id(current.userId)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return success_response("Profile retrieved successfully",
                            data=dict(user, roles=users.get_role_names(current.userId)))


@router.put("/profile")
def update_profile(body: UserUpdate,
                   current: CurrentUser = Depends(get_current_user),
                   users: UserRepository = Depends(get_user_repository)):
    fields = body.model_dump(exclude_unset=True)
    password = fields.pop("password", None)
    if password:
        fields["passwordHash"] = get_password_hash(password)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields provided to update")

    result = users.update_user(current.userId, build_update_values(fields, USER_UPDATE_COLUMNS))
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="User not found")
    return success_response("Profile updated successfully", data=users.get_user_by_id(current.userId))


@router.get("/users")
def list_users(current: CurrentUser = Depends(get_current_user),
               users: UserRepository = Depends(get_user_repository)):
    rows = users.select_users()
    return success_response("Users retrieved successfully", data=rows, count=len(rows))


@router.get("/users/{user_id}/roles")
def get_user_roles(user_id: int,
                   current: CurrentUser = Depends(get_current_user),
                   users: UserRepository = Depends(get_user_repository)):
    roles = users.get_user_roles(user_id)
    return success_response("User roles retrieved successfully", data=roles, count=len(roles))


@router.post("/users/{user_id}/roles", status_code=201)
def assign_role(user_id: int, body: RoleAssignment,
                current: CurrentUser = Depends(get_current_user),
                users: UserRepository = Depends(get_user_repository)):
    _require_admin(users, current)
    if not users.get_user_by_id(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    role = users.get_role_by_name(body.roleName)
    if not role:
        raise HTTPException(status_code=404, detail=f"Role '{body.roleName}' not found")
    if body.roleName in users.get_role_names(user_id):
        raise HTTPException(status_code=409, detail="Role already assigned to user")

    user_role_id = users.assign_user_role(user_id, role["roleId"])
    return success_response("Role assigned successfully",
                            data={"userRoleId": user_role_id, "userId": user_id, "roleName": role["roleName"]})


@router.delete("/users/{user_id}")
def delete_user(user_id: int,
                current: CurrentUser = Depends(get_current_user),
                users: UserRepository = Depends(get_user_repository),
                executor: QueryExecutor = Depends(get_executor)):
    if user_id != current.userId:
        _require_admin(users, current)
    with executor.transaction() as tx:
        result = UserRepository(tx).delete_user(user_id)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="User not found")
    return success_response("User deleted successfully")
