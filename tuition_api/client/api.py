# tuition_api/client/api.py
"""Async HTTP client for the back-office API."""
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar
from uuid import UUID

import httpx
from pydantic import BaseModel

from ..schemas.activity_log_schemas import ActivityLogCreate, ActivityLogOut
from ..schemas.auth_schemas import BranchAdminOut, LoginRequest, SuperAdminOut
from ..schemas.branch_schemas import BranchCreate, BranchOut, BranchUpdate
from ..schemas.receipt_schemas import ReceiptCreate, ReceiptOut
from ..schemas.student_schemas import FeePayment, StudentCreate, StudentOut, StudentUpdate
from ..schemas.teacher_schemas import TeacherCreate, TeacherOut, TeacherUpdate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class APIError(Exception):
    """Non-2xx response from the API"""
    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


def _payload(model: BaseModel, partial: bool = False) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_unset=partial)


class TuitionAPIClient:
    def __init__(self, base_url: str = "http://localhost:8000", transport: Optional[httpx.AsyncBaseTransport] = None):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._http.request(method, path, **kwargs)
        if response.is_error:
            try:
                body = response.json()
                detail = body.get("detail") or body.get("error") or body
            except ValueError:
                detail = response.text
            logger.debug(f"{method} {path} failed: {response.status_code} {detail}")
            raise APIError(response.status_code, detail)
        return response.json()

    async def _one(self, model: Type[M], method: str, path: str, **kwargs) -> M:
        return model.model_validate(await self._request(method, path, **kwargs))

    async def _many(self, model: Type[M], path: str, params: Optional[Dict[str, Any]] = None) -> List[M]:
        return [model.model_validate(item) for item in await self._request("GET", path, params=params)]

    # Authentication

    async def login_super_admin(self, email: str, password: str) -> SuperAdminOut:
        body = _payload(LoginRequest(email=email, password=password))
        return await self._one(SuperAdminOut, "POST", "/api/superadmins/login", json=body)

    async def login_branch_admin(self, email: str, password: str) -> BranchAdminOut:
        body = _payload(LoginRequest(email=email, password=password))
        return await self._one(BranchAdminOut, "POST", "/api/branchadmins/login", json=body)

    # Students

    async def list_students(self) -> List[StudentOut]:
        return await self._many(StudentOut, "/api/students")

    async def create_student(self, student: StudentCreate) -> StudentOut:
        return await self._one(StudentOut, "POST", "/api/students", json=_payload(student))

    async def update_student(self, student_id: UUID, updates: StudentUpdate) -> StudentOut:
        return await self._one(StudentOut, "PUT", f"/api/students/{student_id}", json=_payload(updates, partial=True))

    async def record_fee_payment(self, student_id: UUID, amount: float) -> StudentOut:
        body = _payload(FeePayment(amount=amount))
        return await self._one(StudentOut, "POST", f"/api/students/{student_id}/fees", json=body)

    # Teachers

    async def list_teachers(self) -> List[TeacherOut]:
        return await self._many(TeacherOut, "/api/teachers")

    async def create_teacher(self, teacher: TeacherCreate) -> TeacherOut:
        return await self._one(TeacherOut, "POST", "/api/teachers", json=_payload(teacher))

    async def update_teacher(self, teacher_id: UUID, updates: TeacherUpdate) -> TeacherOut:
        return await self._one(TeacherOut, "PUT", f"/api/teachers/{teacher_id}", json=_payload(updates, partial=True))

    # Branches

    async def list_branches(self) -> List[BranchOut]:
        return await self._many(BranchOut, "/api/branches")

    async def create_branch(self, branch: BranchCreate) -> BranchOut:
        body = branch.model_dump(mode="json", by_alias=True, exclude_none=True)
        return await self._one(BranchOut, "POST", "/api/branches", json=body)

    async def update_branch(self, branch_id: UUID, updates: BranchUpdate) -> BranchOut:
        data = await self._request("PUT", f"/api/branches/{branch_id}", json=_payload(updates, partial=True))
        return BranchOut.model_validate(data["branch"])

    # Receipts

    async def list_receipts(self, student_id: Optional[str] = None) -> List[ReceiptOut]:
        params = {"studentId": student_id} if student_id else None
        return await self._many(ReceiptOut, "/api/receipts", params=params)

    async def create_receipt(self, receipt: ReceiptCreate) -> ReceiptOut:
        return await self._one(ReceiptOut, "POST", "/api/receipts", json=_payload(receipt))

    # Activity log

    async def list_logs(self) -> List[ActivityLogOut]:
        return await self._many(ActivityLogOut, "/api/logs")

    async def create_log(self, entry: ActivityLogCreate) -> ActivityLogOut:
        return await self._one(ActivityLogOut, "POST", "/api/logs", json=_payload(entry))
