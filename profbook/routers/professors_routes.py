# profbook/routers/professors_routes.py

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from profbook.db import get_session
from profbook.models import Professor
from profbook.schemas import (
    Login,
    Message,
    ProfessorList,
    ProfileResponse,
    ProfileUpdate,
    SlotsResponse,
    TokenResponse,
)
from profbook.auth import get_current_professor, verify_password, create_access_token
from profbook.deps import get_professor_or_404, require_role
from profbook.slots import count_open, generate_slots, to_payload

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/professor",
    tags=["professors"],
)


def professor_public(professor: Professor) -> dict:
    # Everything but the password hash
    return professor.model_dump(exclude={"password"})


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: Login,
    session: Session = Depends(get_session),
):
    professor = session.exec(
        select(Professor).where(Professor.email == credentials.email)
    ).first()

    if professor is None or not verify_password(credentials.password, professor.password):
        logger.warning("Failed professor login for %s", credentials.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": professor.id, "role": "professor"})
    return {"success": True, "message": "Logged in", "token": token}


@router.get("/list", response_model=ProfessorList)
def list_professors(session: Session = Depends(get_session)):
    professors = session.exec(select(Professor)).all()
    return {"success": True, "professors": [professor_public(p) for p in professors]}


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    session: Session = Depends(get_session),
    current_professor: dict = Depends(get_current_professor),
):
    require_role(current_professor, "professor")

    professor = get_professor_or_404(session, current_professor["id"])
    return {"success": True, "profileData": professor_public(professor)}


@router.post("/update-profile", response_model=Message)
def update_profile(
    update: ProfileUpdate,
    session: Session = Depends(get_session),
    current_professor: dict = Depends(get_current_professor),
):
    require_role(current_professor, "professor")

    # Only the self-service fields are writable here
    professor = get_professor_or_404(session, current_professor["id"])
    professor.about = update.about
    professor.available = update.available
    session.add(professor)
    session.commit()

    logger.info("Professor %s updated profile (available=%s)", professor.id, update.available)
    return {"success": True, "message": "Profile Updated"}


@router.get("/{prof_id}/slots", response_model=SlotsResponse)
def professor_slots(
    prof_id: str,
    session: Session = Depends(get_session),
):
    professor = get_professor_or_404(session, prof_id)

    if not professor.available:
        return {"success": True, "profId": prof_id, "days": [], "message": "Professor not available"}

    buckets = generate_slots(datetime.now(), professor.slots_booked)
    logger.debug("Professor %s has %d open slots", prof_id, count_open(buckets))
    return {"success": True, "profId": prof_id, "days": to_payload(buckets)}
