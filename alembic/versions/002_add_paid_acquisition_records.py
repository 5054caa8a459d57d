"""Add paid_acquisition_records: one row per employee per reconciled month

Revision ID: 002_add_paid_acquisition_records
Revises: 001_initial_batch_schema
Create Date: 2026-10-18

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002_add_paid_acquisition_records'
down_revision: Union[str, None] = '001_initial_batch_schema'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'paid_acquisition_records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.Integer(), nullable=False),
        sa.Column('target_month', sa.String(7), nullable=False),
        sa.Column('consumed_days', sa.Numeric(5, 1), nullable=False),
        sa.Column('processed_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('employee_id', 'target_month', name='uq_paid_acquisition_employee_month'),
    )
    op.create_index(op.f('ix_paid_acquisition_records_id'), 'paid_acquisition_records', ['id'], unique=False)
    op.create_index(
        op.f('ix_paid_acquisition_records_employee_id'), 'paid_acquisition_records', ['employee_id'], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_paid_acquisition_records_employee_id'), table_name='paid_acquisition_records')
    op.drop_index(op.f('ix_paid_acquisition_records_id'), table_name='paid_acquisition_records')
    op.drop_table('paid_acquisition_records')
