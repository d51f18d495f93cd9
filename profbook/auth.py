# profbook/auth.py

import logging
from datetime import datetime, timedelta

from fastapi import Depends, HTTPException
from fastapi.security import APIKeyHeader
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlmodel import Session

from .config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from .db import get_session
from .models import Professor, User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Header names match what the web clients send
user_token = APIKeyHeader(name="token", auto_error=False)
professor_token = APIKeyHeader(name="dToken", auto_error=False)
admin_token = APIKeyHeader(name="aToken", auto_error=False)

NOT_AUTHORIZED = "Not Authorized Login Again"


def create_access_token(data: dict, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(minutes=expires_minutes)
    to_encode["exp"] = expire
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def decode_token(token: str) -> dict:
    """Return the claims of a session token, or raise 401."""
    if not token:
        raise HTTPException(status_code=401, detail=NOT_AUTHORIZED)
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        logger.warning("Rejected invalid session token")
        raise HTTPException(status_code=401, detail=NOT_AUTHORIZED)
    if payload.get("sub") is None or payload.get("role") is None:
        raise HTTPException(status_code=401, detail=NOT_AUTHORIZED)
    return payload


def get_current_user(
    token: str = Depends(user_token),
    session: Session = Depends(get_session),
) -> dict:
    payload = decode_token(token)
    if payload["role"] != "user":
        raise HTTPException(status_code=401, detail=NOT_AUTHORIZED)

    try:
        user_id = int(payload["sub"])
    except ValueError:
        raise HTTPException(status_code=401, detail=NOT_AUTHORIZED)

    user = session.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found")

    return {"id": user.id, "email": user.email, "role": "user"}


def get_current_professor(
    token: str = Depends(professor_token),
    session: Session = Depends(get_session),
) -> dict:
    payload = decode_token(token)
    if payload["role"] != "professor":
        raise HTTPException(status_code=401, detail=NOT_AUTHORIZED)

    professor = session.get(Professor, payload["sub"])
    if professor is None:
        raise HTTPException(status_code=401, detail="Professor not found")

    return {"id": professor.id, "email": professor.email, "role": "professor"}


def get_current_admin(token: str = Depends(admin_token)) -> dict:
    payload = decode_token(token)
    return {"email": payload["sub"], "role": payload["role"]}
