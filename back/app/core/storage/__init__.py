# Local application imports
from app.core.storage.complaint_store import ComplaintIdCollisionError, ComplaintStore

__all__ = ["ComplaintIdCollisionError", "ComplaintStore"]
