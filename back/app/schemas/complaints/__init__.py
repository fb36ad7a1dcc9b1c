from .complaint_schemas import ComplaintCreate, ComplaintStatusUpdate

__all__ = [
    "ComplaintCreate",
    "ComplaintStatusUpdate",
]
