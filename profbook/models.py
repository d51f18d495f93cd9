# profbook/models.py

import time
from typing import Dict, List, Optional
from uuid import uuid4

from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


def _now_ms() -> int:
    return int(time.time() * 1000)


class Professor(SQLModel, table=True):
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password: str  # bcrypt hash
    image: str
    department: str = Field(index=True)
    about: str
    available: bool = True
    # date_key -> ["09:00 AM", ...]; an empty map is stored as {}
    slots_booked: Dict[str, List[str]] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )
    date: int = Field(default_factory=_now_ms)


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str
