"""create civic reports schema

Revision ID: a1c4e2b7d913
Revises:
Create Date: 2026-10-18 10:12:41.218305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = 'a1c4e2b7d913'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Shared by users.department and reports.category, so created once up front
issue_category = postgresql.ENUM(
    'drainage', 'pothole', 'wire', 'garbage', 'street_light',
    name='issue_category', create_type=False,
)
issue_status = postgresql.ENUM(
    'pending', 'in_progress', 'resolved', 'rejected',
    name='issue_status', create_type=False,
)
employee_role = postgresql.ENUM(
    'admin', 'supervisor', 'field_worker',
    name='employee_role', create_type=False,
)


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    for enum_type in (issue_category, issue_status, employee_role):
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('profile_image_url', sa.String(500), nullable=True),
        sa.Column('user_type', sa.String(20), nullable=False, comment="citizen|authority"),
        # authority only
        sa.Column('employee_id', sa.String(50), nullable=True),
        sa.Column('role', employee_role, nullable=True),
        sa.Column('department', issue_category, nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_employee_id', 'users', ['employee_id'], unique=True)
    op.create_index('ix_users_user_type', 'users', ['user_type'])
    op.create_index('ix_users_is_active', 'users', ['is_active'])

    op.create_table(
        'reports',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('report_id', sa.String(20), nullable=False, comment="Public id, e.g. SW2024004821"),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('assigned_to', sa.String(36), sa.ForeignKey('users.id', ondelete='RESTRICT'), nullable=True),
        sa.Column('category', issue_category, nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('photo_url', sa.String(500), nullable=True),
        sa.Column('latitude', sa.Float(precision=53), nullable=False),
        sa.Column('longitude', sa.Float(precision=53), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('status', issue_status, nullable=False, server_default='pending'),
        sa.Column('priority', sa.String(20), nullable=True, server_default='medium'),
        sa.Column('estimated_completion', sa.DateTime(), nullable=True),
        sa.Column('assigned_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_reports_report_id', 'reports', ['report_id'], unique=True)
    op.create_index('ix_reports_user_id', 'reports', ['user_id'])
    op.create_index('ix_reports_assigned_to', 'reports', ['assigned_to'])
    op.create_index('ix_reports_category', 'reports', ['category'])
    op.create_index('ix_reports_status', 'reports', ['status'])
    op.create_index('ix_reports_created_at', 'reports', ['created_at'])

    op.create_table(
        'report_feedback',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('report_id', sa.String(36), sa.ForeignKey('reports.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('satisfaction_level', sa.String(20), nullable=True),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('service_quality', sa.Integer(), nullable=True),
        sa.Column('response_time', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='check_feedback_rating'),
        sa.CheckConstraint('service_quality IS NULL OR service_quality BETWEEN 1 AND 5', name='check_feedback_service_quality'),
        sa.CheckConstraint('response_time IS NULL OR response_time BETWEEN 1 AND 5', name='check_feedback_response_time'),
    )
    op.create_index('ix_report_feedback_report_id', 'report_feedback', ['report_id'])
    op.create_index('ix_report_feedback_user_id', 'report_feedback', ['user_id'])

    op.create_table(
        'employee_performance',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('employee_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('total_assigned', sa.Integer(), nullable=True),
        sa.Column('total_resolved', sa.Integer(), nullable=True),
        sa.Column('total_pending', sa.Integer(), nullable=True),
        sa.Column('average_rating', sa.Float(), nullable=True),
        sa.Column('satisfaction_rate', sa.Float(), nullable=True),
        sa.Column('average_response_time', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index(
        'idx_employee_performance_period',
        'employee_performance',
        ['employee_id', 'year', 'month'],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_employee_performance_period', table_name='employee_performance')
    op.drop_table('employee_performance')
    op.drop_table('report_feedback')
    op.drop_table('reports')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (employee_role, issue_status, issue_category):
        enum_type.drop(bind, checkfirst=True)
