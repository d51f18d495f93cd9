# profbook/schemas.py

from pydantic import BaseModel, Field
from datetime import datetime as DateTime
from typing import Dict, List, Optional


class Login(BaseModel):
    email: str
    password: str


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=8, max_length=72)


class TokenResponse(BaseModel):
    success: bool = True
    message: str
    token: str


class Message(BaseModel):
    success: bool
    message: str


class ProfessorCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=8, max_length=72)
    image: str
    department: str
    about: str


class ProfessorPublic(BaseModel):
    id: str
    name: str
    email: str
    image: str
    department: str
    about: str
    available: bool
    slots_booked: Dict[str, List[str]]
    date: int


class ProfessorList(BaseModel):
    success: bool = True
    professors: List[ProfessorPublic]


class ProfileResponse(BaseModel):
    success: bool = True
    profileData: ProfessorPublic


class ProfileUpdate(BaseModel):
    about: str
    available: bool


class AvailabilityChange(BaseModel):
    profId: str


class BookingCreate(BaseModel):
    profId: str
    slotDate: str = Field(min_length=1)
    slotTime: str = Field(min_length=1)


class SlotPublic(BaseModel):
    datetime: DateTime
    time: str


class SlotsResponse(BaseModel):
    success: bool = True
    profId: str
    days: List[List[SlotPublic]]
    message: Optional[str] = None
