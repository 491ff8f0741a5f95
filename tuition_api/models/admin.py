# tuition_api/models/admin.py
from sqlalchemy import Column, String
from .base import Base


class SuperAdmin(Base):
    __tablename__ = "super_admins"

    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    # Stored in clear text; compared in constant time on login
    password = Column(String(255), nullable=False)
    role = Column(String(20), default="super_admin", nullable=False)


class BranchAdmin(Base):
    __tablename__ = "branch_admins"

    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    phone = Column(String(20))

    password_hash = Column(String(255), nullable=False)
    password_encrypted = Column(String(512), nullable=False)

    role = Column(String(20), default="branch_admin", nullable=False)
    branch_id = Column(String(36), nullable=False, unique=True, index=True)
    branch_name = Column(String(100), nullable=False)
