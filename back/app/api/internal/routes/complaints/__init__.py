from .complaint_routes import router as complaint_router

__all__ = ["complaint_router"]
