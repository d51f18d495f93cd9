# profbook/deps.py

import logging

from fastapi import HTTPException
from sqlmodel import Session

from .models import Professor

logger = logging.getLogger(__name__)


def require_role(principal: dict, *roles: str):
    if principal["role"] not in roles:
        logger.warning("Role %s refused, needs one of %s", principal["role"], roles)
        raise HTTPException(status_code=403, detail="Forbidden")


def get_professor_or_404(session: Session, prof_id: str) -> Professor:
    professor = session.get(Professor, prof_id)
    if professor is None:
        raise HTTPException(status_code=404, detail="Professor not found")
    return professor
