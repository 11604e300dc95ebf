"""create employees and phones tables

Revision ID: create_employees_phones
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_employees_phones'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

employee_role = sa.Enum('employee', 'leader', 'director', name='employee_role')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'employees',
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=200), nullable=False),
        sa.Column('doc_number', sa.String(length=50), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('role', employee_role, nullable=False),
        sa.Column('manager_id', sa.Uuid(), nullable=True),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['manager_id'], ['employees.employee_id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('employee_id'),
    )
    op.create_index(op.f('ix_employees_doc_number'), 'employees', ['doc_number'], unique=True)
    op.create_index(op.f('ix_employees_email'), 'employees', ['email'], unique=False)
    op.create_index(op.f('ix_employees_manager_id'), 'employees', ['manager_id'], unique=False)

    op.create_table(
        'phones',
        sa.Column('phone_id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('number', sa.String(length=30), nullable=False),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.employee_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('phone_id'),
    )
    op.create_index(op.f('ix_phones_employee_id'), 'phones', ['employee_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_phones_employee_id'), table_name='phones')
    op.drop_table('phones')
    op.drop_index(op.f('ix_employees_manager_id'), table_name='employees')
    op.drop_index(op.f('ix_employees_email'), table_name='employees')
    op.drop_index(op.f('ix_employees_doc_number'), table_name='employees')
    op.drop_table('employees')
    employee_role.drop(op.get_bind(), checkfirst=True)
