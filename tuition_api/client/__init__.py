from .api import APIError, TuitionAPIClient
from .cache import DataCache, RecordNotFound, ScopeViolation, generate_receipt_number
from .session import AdminSession

__all__ = [
    "APIError",
    "TuitionAPIClient",
    "DataCache",
    "RecordNotFound",
    "ScopeViolation",
    "generate_receipt_number",
    "AdminSession",
]
