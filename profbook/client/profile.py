# profbook/client/profile.py

import enum
import logging
from typing import Any, Dict, Optional

from .api import ApiClient
from .errors import ClientError
from .notify import Notifier
from .state import ProfessorSession

logger = logging.getLogger(__name__)

UPDATE_PATH = "/api/professor/update-profile"


class EditorState(str, enum.Enum):
    VIEW = "view"
    EDIT = "edit"


class ProfileEditor:
    """
    View/Edit toggle for a professor's ``about`` text and ``available`` flag.

    Edits go to a draft; the cached profile in the ``ProfessorSession`` is
    only replaced by the refetch that follows a successful save. ``save()``
    returns to View whatever the outcome, unless ``keep_editing_on_failure``
    is set, in which case a failed save leaves the draft open for another try.
    """

    def __init__(
        self,
        api: ApiClient,
        session: ProfessorSession,
        notifier: Notifier,
        keep_editing_on_failure: bool = False,
    ):
        self.api = api
        self.session = session
        self.notifier = notifier
        self.keep_editing_on_failure = keep_editing_on_failure
        self.state = EditorState.VIEW
        self.draft: Optional[Dict[str, Any]] = None

    @property
    def is_edit(self) -> bool:
        return self.state is EditorState.EDIT

    @property
    def shown(self) -> Optional[Dict[str, Any]]:
        """What the page displays: the draft while editing, else the profile."""
        if self.is_edit:
            return self.draft
        return self.session.profile_data

    def edit(self):
        profile = self.session.profile_data or {}
        self.draft = {
            "about": profile.get("about", ""),
            "available": bool(profile.get("available", True)),
        }
        self.state = EditorState.EDIT

    def set_about(self, text: str):
        if self.is_edit:
            self.draft["about"] = text

    def toggle_available(self):
        # The checkbox is inert outside edit mode
        if self.is_edit:
            self.draft["available"] = not self.draft["available"]

    def save(self) -> bool:
        if not self.is_edit:
            return False

        update = {"about": self.draft["about"], "available": self.draft["available"]}
        try:
            data = self.api.post(UPDATE_PATH, update, headers=self.session.headers)
        except ClientError as e:
            self.notifier.error(e.message)
            if not self.keep_editing_on_failure:
                self._close()
            return False

        self.notifier.success(data["message"])
        self._close()
        try:
            self.session.refresh()
        except ClientError as e:
            self.notifier.error(e.message)
        logger.info("Profile saved (available=%s)", update["available"])
        return True

    def _close(self):
        self.state = EditorState.VIEW
        self.draft = None
