"""Initial batch schema: masters, employees, attendances, grant table, batch history

Revision ID: 001_initial_batch_schema
Revises:
Create Date: 2026-10-01

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_batch_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(10), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_departments_id'), 'departments', ['id'], unique=False)
    op.create_index(op.f('ix_departments_code'), 'departments', ['code'], unique=True)

    op.create_table(
        'place_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(10), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_place_categories_id'), 'place_categories', ['id'], unique=False)
    op.create_index(op.f('ix_place_categories_code'), 'place_categories', ['code'], unique=True)

    op.create_table(
        'vacation_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(10), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_paid', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('paid_days', sa.Numeric(3, 1), nullable=False, server_default=sa.text("'0'")),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_vacation_categories_id'), 'vacation_categories', ['id'], unique=False)
    op.create_index(op.f('ix_vacation_categories_code'), 'vacation_categories', ['code'], unique=True)

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('emp_code', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('department_code', sa.String(10), nullable=False),
        sa.Column('employee_type', sa.String(10), nullable=False),
        sa.Column('hire_date', sa.Date(), nullable=False),
        sa.Column('paid_leave_remaining', sa.Numeric(5, 1), nullable=False, server_default=sa.text("'0'")),
        sa.Column('paid_leave_granted', sa.Integer(), nullable=False, server_default=sa.text("'0'")),
        sa.Column('paid_grant_date', sa.Date(), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_employees_id'), 'employees', ['id'], unique=False)
    op.create_index(op.f('ix_employees_emp_code'), 'employees', ['emp_code'], unique=True)
    op.create_index(op.f('ix_employees_department_code'), 'employees', ['department_code'], unique=False)

    op.create_table(
        'public_holidays',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('month', 'day', name='uq_public_holiday_month_day'),
    )
    op.create_index(op.f('ix_public_holidays_id'), 'public_holidays', ['id'], unique=False)

    op.create_table(
        'attendances',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.Integer(), nullable=False),
        sa.Column('work_date', sa.Date(), nullable=False),
        sa.Column('holiday', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('place_category', sa.String(10), nullable=True),
        sa.Column('vacation_category', sa.String(10), nullable=True),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('employee_id', 'work_date', name='uq_attendance_employee_date'),
    )
    op.create_index(op.f('ix_attendances_id'), 'attendances', ['id'], unique=False)
    op.create_index(op.f('ix_attendances_employee_id'), 'attendances', ['employee_id'], unique=False)
    op.create_index(op.f('ix_attendances_work_date'), 'attendances', ['work_date'], unique=False)

    op.create_table(
        'paid_leave_grant_days',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_type', sa.String(10), nullable=False),
        sa.Column('elapsed_months', sa.Integer(), nullable=False),
        sa.Column('grant_days', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('employee_type', 'elapsed_months', name='uq_grant_days_type_months'),
    )
    op.create_index(op.f('ix_paid_leave_grant_days_id'), 'paid_leave_grant_days', ['id'], unique=False)
    op.create_index(
        op.f('ix_paid_leave_grant_days_employee_type'), 'paid_leave_grant_days', ['employee_type'], unique=False
    )

    op.create_table(
        'batch_execution_history',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('batch_name', sa.String(50), nullable=False),
        sa.Column('target_month', sa.String(7), nullable=True),
        sa.Column('result', sa.Boolean(), nullable=False),
        sa.Column('processed', sa.Integer(), nullable=False, server_default=sa.text("'0'")),
        sa.Column('succeeded', sa.Integer(), nullable=False, server_default=sa.text("'0'")),
        sa.Column('failed', sa.Integer(), nullable=False, server_default=sa.text("'0'")),
        sa.Column('skipped', sa.Integer(), nullable=False, server_default=sa.text("'0'")),
        sa.Column('executed_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_batch_execution_history_id'), 'batch_execution_history', ['id'], unique=False)
    op.create_index('ix_batch_history_name_month', 'batch_execution_history', ['batch_name', 'target_month'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_batch_history_name_month', table_name='batch_execution_history')
    op.drop_index(op.f('ix_batch_execution_history_id'), table_name='batch_execution_history')
    op.drop_table('batch_execution_history')
    op.drop_index(op.f('ix_paid_leave_grant_days_employee_type'), table_name='paid_leave_grant_days')
    op.drop_index(op.f('ix_paid_leave_grant_days_id'), table_name='paid_leave_grant_days')
    op.drop_table('paid_leave_grant_days')
    op.drop_index(op.f('ix_attendances_work_date'), table_name='attendances')
    op.drop_index(op.f('ix_attendances_employee_id'), table_name='attendances')
    op.drop_index(op.f('ix_attendances_id'), table_name='attendances')
    op.drop_table('attendances')
    op.drop_index(op.f('ix_public_holidays_id'), table_name='public_holidays')
    op.drop_table('public_holidays')
    op.drop_index(op.f('ix_employees_department_code'), table_name='employees')
    op.drop_index(op.f('ix_employees_emp_code'), table_name='employees')
    op.drop_index(op.f('ix_employees_id'), table_name='employees')
    op.drop_table('employees')
    op.drop_index(op.f('ix_vacation_categories_code'), table_name='vacation_categories')
    op.drop_index(op.f('ix_vacation_categories_id'), table_name='vacation_categories')
    op.drop_table('vacation_categories')
    op.drop_index(op.f('ix_place_categories_code'), table_name='place_categories')
    op.drop_index(op.f('ix_place_categories_id'), table_name='place_categories')
    op.drop_table('place_categories')
    op.drop_index(op.f('ix_departments_code'), table_name='departments')
    op.drop_index(op.f('ix_departments_id'), table_name='departments')
    op.drop_table('departments')
