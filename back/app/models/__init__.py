"""
Domain models package.

Complaint records are plain pydantic models kept by the complaint store.
"""

# Local application imports
from app.models.complaints import Complaint, ComplaintStatus, IssueType

__all__ = [
    "Complaint",
    "ComplaintStatus",
    "IssueType",
]
