# Standard library imports
from typing import Any

# Third-party imports
from fastapi import APIRouter, Depends, HTTPException, Request, status

# Local application imports
from app.api.internal.utils.permissions import admin_only
from app.core.monitoring.logging import get_request_logger
from app.core.storage import ComplaintStore
from app.dependancies.common import get_client_address, get_complaint_store, rate_limit
from app.models.complaints import Complaint
from app.schemas.complaints import ComplaintCreate, ComplaintStatusUpdate

router = APIRouter(prefix="/complaints", tags=["Complaints"])

create_rate_limit = rate_limit(
    "create",
    "Too many complaints created from this IP, please try again later.",
)
upvote_rate_limit = rate_limit(
    "upvote",
    "Too many upvotes from this IP, please slow down.",
)

COMPLAINT_NOT_FOUND = "Complaint not found"


@router.get("", response_model=list[Complaint])
async def list_complaints(store: ComplaintStore = Depends(get_complaint_store)):
    """List all complaints, newest first"""
    return store.list_all()


@router.post(
    "",
    response_model=Complaint,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(create_rate_limit)],
)
async def create_complaint(
    request: Request,
    complaint_data: ComplaintCreate,
    store: ComplaintStore = Depends(get_complaint_store),
):
    """File a new complaint. Starts as Pending with no upvotes."""
    complaint = store.create(
        name=complaint_data.name,
        issue_type=complaint_data.issue_type,
        title=complaint_data.title,
        description=complaint_data.description,
        location=complaint_data.location,
        photo_data=complaint_data.photo_data,
    )
    get_request_logger(__name__, request, complaint_id=complaint.id).info("Complaint created")
    return complaint


@router.post(
    "/{complaint_id}/upvote",
    response_model=Complaint,
    dependencies=[Depends(upvote_rate_limit)],
)
async def upvote_complaint(
    complaint_id: str,
    client_address: str = Depends(get_client_address),
    store: ComplaintStore = Depends(get_complaint_store),
):
    """Upvote a complaint; counted at most once per client address"""
    complaint = store.upvote(complaint_id, client_address)
    if complaint is None:
        raise HTTPException(status_code=404, detail=COMPLAINT_NOT_FOUND)
    return complaint


@router.patch("/{complaint_id}/status", response_model=Complaint)
async def update_complaint_status(
    request: Request,
    complaint_id: str,
    status_data: ComplaintStatusUpdate,
    admin: dict[str, Any] = Depends(admin_only),
    store: ComplaintStore = Depends(get_complaint_store),
):
    """Change the status of a complaint (admin only)"""
    complaint = store.update_status(complaint_id, status_data.status)
    if complaint is None:
        raise HTTPException(status_code=404, detail=COMPLAINT_NOT_FOUND)

    logger = get_request_logger(__name__, request, complaint_id=complaint_id, jti=admin.get("jti"))
    logger.info(f"Status set to {complaint.status.value}")
    return complaint
