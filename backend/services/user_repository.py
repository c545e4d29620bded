# backend/services/user_repository.py
from typing import Any, Dict, List, Optional

from database.executor import QueryResult
from services.base_repository import BaseRepository


class UserRepository(BaseRepository):
    def insert_user(self, email: str, password_hash: str, first_name: str, last_name: str,
                    phone_number: Optional[str] = None) -> int:
        return self.insert("InsertUser", {
            "email": email,
            "passwordHash": password_hash,
            "firstName": first_name,
            "lastName": last_name,
            "phoneNumber": phone_number,
        })

    def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self.first("GetUserByEmail", {"email": email})

    def get_user_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetUserById", {"userId": user_id})

    def select_users(self) -> List[Dict[str, Any]]:
        return self.all("SelectUsers")

    def update_user(self, user_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateUser", {"userId": user_id, "fields": fields})

    def delete_user(self, user_id: int) -> QueryResult:
        self.run("DeleteUserRoles", {"userId": user_id})
        return self.run("DeleteUser", {"userId": user_id})

    def get_user_roles(self, user_id: int) -> List[Dict[str, Any]]:
        return self.all("GetUserRoles", {"userId": user_id})

    def get_role_names(self, user_id: int) -> List[str]:
        return [r["roleName"] for r in self.get_user_roles(user_id)]

    def get_role_by_name(self, role_name: str) -> Optional[Dict[str, Any]]:
        return self.first("GetRoleByName", {"roleName": role_name})

    def assign_user_role(self, user_id: int, role_id: int) -> int:
        return self.insert("AssignUserRole", {"userId": user_id, "roleId": role_id})
