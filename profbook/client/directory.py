# profbook/client/directory.py

from typing import Any, Dict, List, Optional, Sequence

from profbook.config import DEPARTMENTS

__all__ = ["DEPARTMENTS", "filter_by_department", "toggle_department"]


def filter_by_department(
    professors: Sequence[Dict[str, Any]],
    department: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Professors in ``department`` (exact match), or all of them when no
    department is given. Order is preserved."""
    if not department:
        return list(professors)
    return [prof for prof in professors if prof.get("department") == department]


def toggle_department(current: Optional[str], clicked: str) -> Optional[str]:
    # Clicking the active department clears the filter
    return None if current == clicked else clicked
