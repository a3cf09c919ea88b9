"""
API routes for the Sarkari Job Eligibility Matcher
"""

from .jobs import router as jobs_router
from .eligibility import router as eligibility_router
from .alerts import router as alerts_router
from .saved import router as saved_router

__all__ = [
    "jobs_router",
    "eligibility_router",
    "alerts_router",
    "saved_router"
]
