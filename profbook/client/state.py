# profbook/client/state.py
"""
Client-side state containers.

Each container owns one slice of what the web clients kept in global
context: the user's session token, the cached professor list, the logged-in
professor's profile, the admin session. Components receive the containers
they need explicitly and call ``refresh()`` after a mutation instead of
patching cached data in place.
"""

import logging
from typing import Any, Dict, List, Optional

from .api import ApiClient

logger = logging.getLogger(__name__)


class UserSession:
    def __init__(self, api: ApiClient, token: Optional[str] = None):
        self.api = api
        self.token = token

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    @property
    def headers(self) -> Dict[str, str]:
        return {"token": self.token} if self.token else {}

    def register(self, name: str, email: str, password: str) -> str:
        data = self.api.post("/api/user/register", {"name": name, "email": email, "password": password})
        self.token = data["token"]
        return data["message"]

    def login(self, email: str, password: str) -> str:
        data = self.api.post("/api/user/login", {"email": email, "password": password})
        self.token = data["token"]
        logger.info("User session started for %s", email)
        return data["message"]

    def logout(self):
        self.token = None


class ProfessorStore:
    """Cached professor list, refetched wholesale."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.professors: List[Dict[str, Any]] = []

    def refresh(self) -> List[Dict[str, Any]]:
        data = self.api.get("/api/professor/list")
        self.professors = data["professors"]
        logger.info("Loaded %d professors", len(self.professors))
        return self.professors

    def find(self, prof_id: str) -> Optional[Dict[str, Any]]:
        for prof in self.professors:
            if prof["id"] == prof_id:
                return prof
        return None


class ProfessorSession:
    """The logged-in professor's token and profile."""

    def __init__(self, api: ApiClient, token: Optional[str] = None):
        self.api = api
        self.token = token
        self.profile_data: Optional[Dict[str, Any]] = None

    @property
    def headers(self) -> Dict[str, str]:
        return {"dToken": self.token} if self.token else {}

    def login(self, email: str, password: str) -> str:
        data = self.api.post("/api/professor/login", {"email": email, "password": password})
        self.token = data["token"]
        return data["message"]

    def logout(self):
        self.token = None
        self.profile_data = None

    def refresh(self) -> Dict[str, Any]:
        data = self.api.get("/api/professor/profile", headers=self.headers)
        self.profile_data = data["profileData"]
        return self.profile_data


class AdminSession:
    def __init__(self, api: ApiClient, token: Optional[str] = None):
        self.api = api
        self.token = token
        self.professors: List[Dict[str, Any]] = []

    @property
    def headers(self) -> Dict[str, str]:
        return {"aToken": self.token} if self.token else {}

    def login(self, email: str, password: str) -> str:
        data = self.api.post("/api/admin/login", {"email": email, "password": password})
        self.token = data["token"]
        return data["message"]

    def add_professor(self, **fields) -> str:
        data = self.api.post("/api/admin/add-professor", fields, headers=self.headers)
        self.refresh()
        return data["message"]

    def change_availability(self, prof_id: str) -> str:
        data = self.api.post("/api/admin/change-availability", {"profId": prof_id}, headers=self.headers)
        self.refresh()
        return data["message"]

    def refresh(self) -> List[Dict[str, Any]]:
        data = self.api.get("/api/admin/all-professors", headers=self.headers)
        self.professors = data["professors"]
        return self.professors
