from .complaint import Complaint, ComplaintStatus, IssueType, generate_complaint_id, utc_now

__all__ = ["Complaint", "ComplaintStatus", "IssueType", "generate_complaint_id", "utc_now"]
