"""Create users, handover_logs and sessions tables

Revision ID: 3f1c9a2b7d41
Revises: 
Create Date: 2026-10-18 09:12:44.301552

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Revision identifiers used by Alembic
revision: str = '3f1c9a2b7d41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Yes/no answers on the handover checklist
SIGNOFF_COLUMNS = (
    'log_complete', 'briefing_leaders', 'briefing_workers', 'adequate_time',
    'distraction_free_location', 'work_area_inspections', 'reappraisal_performed',
    'leader_discussed_info', 'leader_signed_log',
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'handover_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('time', sa.String(length=20), nullable=True),
        sa.Column('outgoing_shift', sa.String(length=100), nullable=True),
        sa.Column('outgoing_leader_first_name', sa.String(length=100), nullable=True),
        sa.Column('outgoing_leader_last_name', sa.String(length=100), nullable=True),
        sa.Column('emergency_equipment_status', sa.Text(), nullable=True),
        sa.Column('hsse_incidents', sa.Text(), nullable=True),
        sa.Column('permits_status', sa.Text(), nullable=True),
        sa.Column('isolations_overrides_suppressions', sa.Text(), nullable=True),
        sa.Column('reappraisal_needed', sa.String(length=50), nullable=True),
        sa.Column('simops_issues', sa.Text(), nullable=True),
        sa.Column('mocs_implemented', sa.Text(), nullable=True),
        sa.Column('abnormal_operation_modes', sa.Text(), nullable=True),
        sa.Column('changes_during_shift', sa.Text(), nullable=True),
        sa.Column('changes_next_shift', sa.Text(), nullable=True),
        sa.Column('equipment_availability_issues', sa.Text(), nullable=True),
        sa.Column('personal_issues', sa.Text(), nullable=True),
        sa.Column('general_communications', sa.Text(), nullable=True),
        *[sa.Column(name, sa.String(length=50), nullable=True) for name in SIGNOFF_COLUMNS],
        sa.Column('suggestions_for_improvement', sa.Text(), nullable=True),
        sa.Column('incoming_shift', sa.String(length=100), nullable=True),
        sa.Column('incoming_leader_first_name', sa.String(length=100), nullable=True),
        sa.Column('incoming_leader_last_name', sa.String(length=100), nullable=True),
        sa.Column('submitted_by_user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('ix_handover_logs_id', 'handover_logs', ['id'])
    op.create_index('ix_handover_logs_date', 'handover_logs', ['date'])
    op.create_index('ix_handover_logs_submitted_by_user_id', 'handover_logs', ['submitted_by_user_id'])
    op.create_index('ix_handover_logs_created_at', 'handover_logs', ['created_at'])

    op.create_table(
        'sessions',
        sa.Column('session_id', sa.String(length=128), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_sessions_user_id', 'sessions', ['user_id'])
    op.create_index('ix_sessions_expires_at', 'sessions', ['expires_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('sessions')
    op.drop_table('handover_logs')
    op.drop_table('users')
