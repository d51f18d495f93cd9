# profbook/routers/users_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from profbook.db import get_session
from profbook.models import User
from profbook.schemas import BookingCreate, Login, Message, TokenResponse, UserCreate
from profbook.auth import get_current_user, hash_password, verify_password, create_access_token
from profbook.deps import get_professor_or_404, require_role
from profbook.slots import is_booked

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/user",
    tags=["users"],
)


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    # 1) Check if email already exists
    existing = session.exec(
        select(User).where(User.email == user.email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 2) Create user in DB
    db_user = User(
        name=user.name,
        email=user.email,
        password_hash=hash_password(user.password),
    )

    session.add(db_user)
    session.commit()
    session.refresh(db_user)  # fills db_user.id
    logger.info("Registered user %s", db_user.id)

    token = create_access_token({"sub": str(db_user.id), "role": "user"})
    return {"success": True, "message": "Account created", "token": token}


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: Login,
    session: Session = Depends(get_session),
):
    user = session.exec(
        select(User).where(User.email == credentials.email)
    ).first()

    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.warning("Failed user login for %s", credentials.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": str(user.id), "role": "user"})
    return {"success": True, "message": "Logged in", "token": token}


@router.post("/book-appointment", response_model=Message)
def book_appointment(
    booking: BookingCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "user")

    # 1) Find the professor
    professor = get_professor_or_404(session, booking.profId)

    # 2) Professor must be taking appointments
    if not professor.available:
        raise HTTPException(status_code=409, detail="Professor not available")

    # 3) Reject a time that is already in the booked-slots map
    slots_booked = dict(professor.slots_booked or {})
    if is_booked(slots_booked, booking.slotDate, booking.slotTime):
        logger.warning(
            "Slot %s %s already booked for professor %s",
            booking.slotDate, booking.slotTime, professor.id,
        )
        raise HTTPException(status_code=409, detail="Slot not available")

    # 4) Append and persist; the JSON column only notices a new object
    slots_booked[booking.slotDate] = [*slots_booked.get(booking.slotDate, []), booking.slotTime]
    professor.slots_booked = slots_booked
    session.add(professor)
    session.commit()

    logger.info(
        "User %s booked professor %s at %s %s",
        current_user["id"], professor.id, booking.slotDate, booking.slotTime,
    )
    return {"success": True, "message": "Appointment Booked"}
