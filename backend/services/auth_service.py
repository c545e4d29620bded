# backend/services/auth_service.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from pydantic import BaseModel

from config.settings import settings

pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    userId: int
    email: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    roles: List[str] = []


def get_password_hash(password: str) -> str:
    return pwd_ctx.hash(password)


def verify_password(password: str, hash_: str) -> bool:
    return pwd_ctx.verify(password, hash_)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_EXPIRE_MIN))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")


def token_for_user(user: Dict[str, Any], roles: List[str]) -> str:
    return create_access_token({
        "userId": user["userId"],
        "email": user["email"],
        "firstName": user.get("firstName"),
        "lastName": user.get("lastName"),
        "roles": roles,
    })


def get_current_user(cred: Optional[HTTPAuthorizationCredentials] = Depends(bearer)) -> CurrentUser:
    if cred is None or not cred.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required")
    payload = decode_token(cred.credentials)
    if "userId" not in payload:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")
    return CurrentUser(
        userId=int(payload["userId"]),
        email=payload.get("email", ""),
        firstName=payload.get("firstName"),
        lastName=payload.get("lastName"),
        roles=payload.get("roles") or [],
    )
