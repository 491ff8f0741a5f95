"""initial back-office tables

Revision ID: 0001_initial_tables
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns():
    return [
        sa.Column('id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def _base_indexes(table: str):
    op.create_index(f'ix_{table}_id', table, ['id'])
    op.create_index(f'ix_{table}_created_at', table, ['created_at'])


def upgrade() -> None:
    op.create_table('students',
        *_base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('grade', sa.String(length=20), nullable=True),
        sa.Column('subjects', sa.JSON(), nullable=False),
        sa.Column('branch', sa.String(length=100), nullable=False),
        sa.Column('branch_id', sa.String(length=36), nullable=True),
        sa.Column('monthly_fee', sa.Float(), nullable=False),
        sa.Column('fees_paid', sa.Float(), nullable=False),
        sa.Column('fees_remaining', sa.Float(), nullable=False),
        sa.Column('initial_payment', sa.Float(), nullable=False),
        sa.Column('additional_payment', sa.Float(), nullable=False),
        sa.Column('registration_date', sa.DateTime(), nullable=False),
        sa.Column('onboarded_by', sa.String(length=100), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('class_type', sa.String(length=20), nullable=False),
        sa.CheckConstraint('fees_remaining >= 0', name='ck_student_fees_remaining_positive'),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('students')
    op.create_index('ix_students_name', 'students', ['name'])
    op.create_index('ix_students_email', 'students', ['email'])
    op.create_index('ix_students_branch', 'students', ['branch'])
    op.create_index('idx_student_branch_status', 'students', ['branch', 'status'])

    op.create_table('teachers',
        *_base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('subjects', sa.JSON(), nullable=False),
        sa.Column('branches', sa.JSON(), nullable=False),
        sa.Column('qualifications', sa.JSON(), nullable=False),
        sa.Column('experience', sa.Integer(), nullable=True),
        sa.Column('salary', sa.Float(), nullable=True),
        sa.Column('join_date', sa.DateTime(), nullable=False),
        sa.Column('onboarded_by', sa.String(length=100), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('class_type', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('teachers')
    op.create_index('ix_teachers_name', 'teachers', ['name'])
    op.create_index('ix_teachers_email', 'teachers', ['email'])

    op.create_table('branches',
        *_base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('manager', sa.String(length=100), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('current_students', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('established_date', sa.DateTime(), nullable=True),
        sa.Column('admin', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('branches')
    op.create_index('ix_branches_name', 'branches', ['name'])

    op.create_table('super_admins',
        *_base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('super_admins')
    op.create_index('ix_super_admins_email', 'super_admins', ['email'], unique=True)

    op.create_table('branch_admins',
        *_base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('password_encrypted', sa.String(length=512), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('branch_id', sa.String(length=36), nullable=False),
        sa.Column('branch_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('branch_admins')
    op.create_index('ix_branch_admins_email', 'branch_admins', ['email'], unique=True)
    op.create_index('ix_branch_admins_branch_id', 'branch_admins', ['branch_id'], unique=True)

    op.create_table('receipts',
        *_base_columns(),
        sa.Column('student_id', sa.String(length=36), nullable=False),
        sa.Column('receipt_number', sa.String(length=50), nullable=False),
        sa.Column('issue_date', sa.DateTime(), nullable=False),
        sa.Column('total_amount', sa.Float(), nullable=False),
        sa.Column('payment_method', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('receipts')
    op.create_index('ix_receipts_student_id', 'receipts', ['student_id'])
    op.create_index('ix_receipts_receipt_number', 'receipts', ['receipt_number'], unique=True)

    op.create_table('activity_logs',
        *_base_columns(),
        sa.Column('action', sa.String(length=100), nullable=False),
        sa.Column('admin_name', sa.String(length=100), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    _base_indexes('activity_logs')
    op.create_index('ix_activity_logs_timestamp', 'activity_logs', ['timestamp'])


def downgrade() -> None:
    for table in ('activity_logs', 'receipts', 'branch_admins', 'super_admins', 'branches', 'teachers', 'students'):
        op.drop_table(table)
