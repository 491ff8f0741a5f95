from .base_service import BaseService
from .student_service import StudentService
from .teacher_service import TeacherService
from .branch_service import BranchService
from .admin_service import SuperAdminService, BranchAdminService
from .receipt_service import ReceiptService
from .activity_log_service import ActivityLogService

__all__ = [
    "BaseService",
    "StudentService",
    "TeacherService",
    "BranchService",
    "SuperAdminService",
    "BranchAdminService",
    "ReceiptService",
    "ActivityLogService",
]
