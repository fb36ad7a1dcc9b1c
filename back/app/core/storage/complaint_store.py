# Standard library imports
from collections.abc import Callable
import json
import os
from pathlib import Path
import tempfile
import threading
from typing import Any

# Third-party imports
from pydantic import TypeAdapter, ValidationError

# Local application imports
from app.core.monitoring.logging import get_contextual_logger
from app.models.complaints import Complaint, ComplaintStatus, IssueType, generate_complaint_id, utc_now

ComplaintList = TypeAdapter(list[Complaint])

MAX_ID_ATTEMPTS = 10


class ComplaintIdCollisionError(RuntimeError):
    """Raised when no unused complaint id could be generated."""


class ComplaintStore:
    """
    Authoritative holder of all complaint records.

    Records live in memory and are mirrored to a single JSON file that is
    rewritten in full after every mutation. Mutations are serialized with
    a lock; a failed write is logged and the in-memory state stays the
    source of truth.
    """

    def __init__(self, data_file: Path | str, id_factory: Callable[[], str] = generate_complaint_id):
        self.data_file = Path(data_file)
        self._id_factory = id_factory
        self._complaints: list[Complaint] = []
        self._lock = threading.Lock()
        self.logger = get_contextual_logger(__name__, data_file=str(self.data_file))

    def __len__(self) -> int:
        return len(self._complaints)

    def load_all(self) -> int:
        """
        Load records from the data file. Never raises: a missing, unreadable
        or malformed file leaves the store empty.

        Returns:
            Number of records loaded
        """
        with self._lock:
            self._complaints = self._read_file()
            return len(self._complaints)

    def _read_file(self) -> list[Complaint]:
        if not self.data_file.exists():
            self.logger.info("Data file not found, starting with an empty store")
            return []

        try:
            raw = self.data_file.read_text(encoding="utf-8")
            complaints = ComplaintList.validate_python(json.loads(raw or "[]"))
        except (OSError, ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            self.logger.error(f"Error loading complaints: {e}")
            return []

        self.logger.info(f"Loaded {len(complaints)} complaints")
        return complaints

    def persist(self) -> bool:
        """Write all records to disk. Returns False (and logs) on failure."""
        with self._lock:
            return self._persist_locked()

    def _persist_locked(self) -> bool:
        payload: list[dict[str, Any]] = ComplaintList.dump_python(self._complaints, mode="json", by_alias=True)
        tmp_path: str | None = None
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.data_file.parent, prefix=".complaints-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.data_file)
            tmp_path = None
        except OSError as e:
            self.logger.error(f"Error saving complaints: {e}")
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
        return True

    def list_all(self) -> list[Complaint]:
        """All records, newest first. Ties keep insertion order."""
        with self._lock:
            snapshot = [c.model_copy(deep=True) for c in self._complaints]
        return sorted(snapshot, key=lambda c: c.created_at, reverse=True)

    def find_by_id(self, complaint_id: str) -> Complaint | None:
        with self._lock:
            complaint = self._find_locked(complaint_id)
            return complaint.model_copy(deep=True) if complaint else None

    def _find_locked(self, complaint_id: str) -> Complaint | None:
        for complaint in self._complaints:
            if complaint.id == complaint_id:
                return complaint
        return None

    def _new_id_locked(self) -> str:
        taken = {c.id for c in self._complaints}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate
        raise ComplaintIdCollisionError("Could not generate a unique complaint id")

    def append(self, complaint: Complaint) -> Complaint:
        """Store a new record under a freshly assigned id and persist."""
        with self._lock:
            stored = complaint.model_copy(update={"id": self._new_id_locked()}, deep=True)
            self._complaints.append(stored)
            self._persist_locked()
            return stored.model_copy(deep=True)

    def create(
        self,
        *,
        issue_type: IssueType,
        title: str,
        description: str,
        location: str,
        name: str | None = None,
        photo_data: str | None = None,
    ) -> Complaint:
        now = utc_now()
        complaint = Complaint(
            id="",
            name=name or "",
            issue_type=issue_type,
            title=title,
            description=description,
            location=location,
            status=ComplaintStatus.PENDING,
            upvoters=[],
            photo_data=photo_data or None,
            created_at=now,
            updated_at=now,
        )
        return self.append(complaint)

    def upvote(self, complaint_id: str, address: str) -> Complaint | None:
        """
        Count an upvote from `address`. Repeated votes from the same
        address leave the record untouched.

        Returns:
            The updated record, or None for an unknown id
        """
        with self._lock:
            complaint = self._find_locked(complaint_id)
            if complaint is None:
                return None
            if complaint.add_upvoter(address):
                self._persist_locked()
            return complaint.model_copy(deep=True)

    def update_status(self, complaint_id: str, status: ComplaintStatus) -> Complaint | None:
        with self._lock:
            complaint = self._find_locked(complaint_id)
            if complaint is None:
                return None
            complaint.set_status(status)
            self._persist_locked()
            return complaint.model_copy(deep=True)
