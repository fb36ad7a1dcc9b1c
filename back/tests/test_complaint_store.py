# Standard library imports
from datetime import UTC, datetime, timedelta
import json
from pathlib import Path

# Third-party imports
import pytest

# Local application imports
from app.core.storage import ComplaintIdCollisionError, ComplaintStore
from app.models.complaints import Complaint, ComplaintStatus, IssueType, generate_complaint_id


def make_store(path: Path) -> ComplaintStore:
    store = ComplaintStore(path)
    store.load_all()
    return store


def create_sample(store: ComplaintStore, title: str = "Broken street light") -> Complaint:
    return store.create(
        issue_type=IssueType.STREET_LIGHT,
        title=title,
        description="The light has been off for a week",
        location="Park Avenue",
    )


def test_load_missing_file_starts_empty(data_file: Path):
    store = ComplaintStore(data_file)
    assert store.load_all() == 0
    assert store.list_all() == []


def test_load_corrupt_file_starts_empty(data_file: Path):
    data_file.write_text("{not json", encoding="utf-8")
    store = ComplaintStore(data_file)
    assert store.load_all() == 0


def test_load_wrong_shape_starts_empty(data_file: Path):
    data_file.write_text(json.dumps({"complaints": []}), encoding="utf-8")
    assert ComplaintStore(data_file).load_all() == 0


def test_load_empty_file_starts_empty(data_file: Path):
    data_file.write_text("", encoding="utf-8")
    assert ComplaintStore(data_file).load_all() == 0


def test_create_sets_defaults_and_persists(data_file: Path):
    store = make_store(data_file)
    complaint = create_sample(store)

    assert complaint.id.startswith("c_")
    assert complaint.status == ComplaintStatus.PENDING
    assert complaint.upvotes == 0
    assert complaint.upvoters == []
    assert complaint.name == ""
    assert complaint.photo_data is None
    assert complaint.created_at == complaint.updated_at

    saved = json.loads(data_file.read_text(encoding="utf-8"))
    assert len(saved) == 1
    assert saved[0]["id"] == complaint.id
    assert saved[0]["issueType"] == "Street Light"
    assert saved[0]["createdAt"].endswith("Z")


def test_records_survive_reload(data_file: Path):
    store = make_store(data_file)
    created = create_sample(store)
    store.upvote(created.id, "10.0.0.1")
    store.update_status(created.id, ComplaintStatus.RESOLVED)

    reloaded = make_store(data_file)
    complaint = reloaded.find_by_id(created.id)
    assert complaint is not None
    assert complaint.status == ComplaintStatus.RESOLVED
    assert complaint.upvoters == ["10.0.0.1"]
    assert complaint.upvotes == 1
    assert complaint.created_at == created.created_at


def test_loads_legacy_records_and_rederives_upvotes(data_file: Path):
    legacy = [
        {
            "_id": "c_lx1abcd123456",
            "name": "",
            "issueType": "Water",
            "title": "Leaking pipe",
            "description": "Water leaking onto the pavement",
            "location": "Elm Street",
            "status": "In Progress",
            "upvotes": 7,
            "photoData": None,
            "upvoters": ["1.1.1.1", "2.2.2.2", "1.1.1.1"],
            "createdAt": "2024-05-01T10:00:00.000Z",
            "updatedAt": "2024-05-02T10:00:00.000Z",
        }
    ]
    data_file.write_text(json.dumps(legacy), encoding="utf-8")

    store = make_store(data_file)
    complaint = store.find_by_id("c_lx1abcd123456")
    assert complaint is not None
    assert complaint.upvoters == ["1.1.1.1", "2.2.2.2"]
    assert complaint.upvotes == 2
    assert complaint.status == ComplaintStatus.IN_PROGRESS


def test_naive_timestamps_load_as_utc(data_file: Path):
    records = [
        {
            "id": "c_naive",
            "issueType": "Road",
            "title": "Cracked kerb",
            "description": "Kerb stone cracked in two places",
            "location": "Hill Road",
            "createdAt": "2024-01-01T00:00:00",
            "updatedAt": "2024-01-01T00:00:00",
        },
        {
            "id": "c_aware",
            "issueType": "Water",
            "title": "Burst main",
            "description": "Water main burst under the road",
            "location": "Low Road",
            "createdAt": "2024-02-01T00:00:00.000Z",
            "updatedAt": "2024-02-01T00:00:00.000Z",
        },
    ]
    data_file.write_text(json.dumps(records), encoding="utf-8")

    store = make_store(data_file)
    complaints = store.list_all()

    assert [c.id for c in complaints] == ["c_aware", "c_naive"]
    dumped = complaints[1].model_dump(mode="json", by_alias=True)
    assert dumped["createdAt"] == "2024-01-01T00:00:00.000Z"
    assert store.upvote("c_naive", "10.0.0.1").updated_at > complaints[1].created_at


def test_upvote_is_deduplicated_per_address(data_file: Path):
    store = make_store(data_file)
    complaint = create_sample(store)

    first = store.upvote(complaint.id, "10.0.0.1")
    second = store.upvote(complaint.id, "10.0.0.1")
    third = store.upvote(complaint.id, "10.0.0.2")

    assert first.upvotes == 1
    assert second.upvotes == 1
    assert second.updated_at == first.updated_at
    assert third.upvotes == 2
    assert third.upvotes == len(third.upvoters)


def test_mutations_on_unknown_id_return_none(data_file: Path):
    store = make_store(data_file)
    assert store.find_by_id("c_missing") is None
    assert store.upvote("c_missing", "10.0.0.1") is None
    assert store.update_status("c_missing", ComplaintStatus.RESOLVED) is None
    assert not data_file.exists()


def test_list_all_sorts_newest_first_with_stable_ties(data_file: Path):
    store = make_store(data_file)
    base = datetime(2024, 1, 1, tzinfo=UTC)

    def record(title: str, offset_minutes: int) -> Complaint:
        at = base + timedelta(minutes=offset_minutes)
        return Complaint(
            id="",
            issue_type=IssueType.OTHER,
            title=title,
            description="Something needs fixing here",
            location="Town hall",
            created_at=at,
            updated_at=at,
        )

    oldest = store.append(record("Oldest one", 0))
    tie_a = store.append(record("Tied first", 10))
    newest = store.append(record("Newest one", 20))
    tie_b = store.append(record("Tied second", 10))

    assert [c.id for c in store.list_all()] == [newest.id, tie_a.id, tie_b.id, oldest.id]


def test_returned_records_are_copies(data_file: Path):
    store = make_store(data_file)
    complaint = create_sample(store)

    listed = store.list_all()[0]
    listed.upvoters.append("6.6.6.6")
    listed.status = ComplaintStatus.RESOLVED

    stored = store.find_by_id(complaint.id)
    assert stored.upvoters == []
    assert stored.status == ComplaintStatus.PENDING


def test_append_regenerates_colliding_ids(data_file: Path):
    ids = iter(["c_same", "c_same", "c_other"])
    store = ComplaintStore(data_file, id_factory=lambda: next(ids))
    store.load_all()

    first = create_sample(store)
    second = create_sample(store)
    assert first.id == "c_same"
    assert second.id == "c_other"


def test_append_gives_up_after_repeated_collisions(data_file: Path):
    store = ComplaintStore(data_file, id_factory=lambda: "c_fixed")
    store.load_all()
    create_sample(store)

    with pytest.raises(ComplaintIdCollisionError):
        create_sample(store)
    assert len(store) == 1


def test_persist_failure_keeps_memory_state(tmp_path: Path):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    store = make_store(blocker / "data.json")

    complaint = create_sample(store)

    assert store.persist() is False
    assert store.find_by_id(complaint.id) is not None


def test_generated_ids_are_distinct():
    ids = {generate_complaint_id() for _ in range(200)}
    assert len(ids) == 200
    assert all(i.startswith("c_") for i in ids)
