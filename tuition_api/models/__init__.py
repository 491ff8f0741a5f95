# tuition_api/models/__init__.py
"""Import all models here, if needed for Alembic migration."""
from .base import Base

from .student import Student
from .teacher import Teacher
from .branch import Branch
from .admin import SuperAdmin, BranchAdmin
from .receipt import Receipt
from .activity_log import ActivityLog

# This ensures all models are loaded when importing models
