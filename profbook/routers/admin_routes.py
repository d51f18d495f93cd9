# profbook/routers/admin_routes.py

import logging
import secrets

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from profbook.config import ADMIN_EMAIL, ADMIN_PASSWORD, DEPARTMENTS
from profbook.db import get_session
from profbook.models import Professor
from profbook.schemas import AvailabilityChange, Login, Message, ProfessorCreate, ProfessorList, TokenResponse
from profbook.auth import get_current_admin, hash_password, create_access_token
from profbook.deps import get_professor_or_404, require_role
from profbook.routers.professors_routes import professor_public

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
)


@router.post("/login", response_model=TokenResponse)
def login(credentials: Login):
    email_ok = secrets.compare_digest(credentials.email, ADMIN_EMAIL)
    password_ok = secrets.compare_digest(credentials.password, ADMIN_PASSWORD)
    if not (email_ok and password_ok):
        logger.warning("Failed admin login for %s", credentials.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": credentials.email, "role": "admin"})
    return {"success": True, "message": "Logged in", "token": token}


@router.post("/add-professor", status_code=201, response_model=Message)
def add_professor(
    prof: ProfessorCreate,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    require_role(current_admin, "admin")

    # 1) Validate department
    if prof.department not in DEPARTMENTS:
        raise HTTPException(status_code=422, detail="Unknown department")

    # 2) Check if email already exists
    existing = session.exec(
        select(Professor).where(Professor.email == prof.email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 3) Create professor with an empty booked-slots map
    db_prof = Professor(
        name=prof.name,
        email=prof.email,
        password=hash_password(prof.password),
        image=prof.image,
        department=prof.department,
        about=prof.about,
    )
    session.add(db_prof)
    session.commit()
    session.refresh(db_prof)

    logger.info("Admin added professor %s (%s)", db_prof.id, db_prof.department)
    return {"success": True, "message": "Professor Added"}


@router.get("/all-professors", response_model=ProfessorList)
def all_professors(
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    require_role(current_admin, "admin")
    professors = session.exec(select(Professor)).all()
    return {"success": True, "professors": [professor_public(p) for p in professors]}


@router.post("/change-availability", response_model=Message)
def change_availability(
    change: AvailabilityChange,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    require_role(current_admin, "admin")

    professor = get_professor_or_404(session, change.profId)

    professor.available = not professor.available
    session.add(professor)
    session.commit()

    logger.info("Admin set professor %s available=%s", professor.id, professor.available)
    return {"success": True, "message": "Availability Changed"}
