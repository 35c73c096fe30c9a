"""Initial tables - v1.0

Revision ID: 001_initial_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the five HR Pulse tables."""

    # ===== 1. USERS =====
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('department', sa.String(100), nullable=False),
        sa.Column('position', sa.String(100), nullable=False),
        sa.Column('manager_id', sa.String(36), nullable=True),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    # ===== 2. QUESTIONS =====
    op.create_table(
        'questions',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('text', sa.String(500), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
    )

    # ===== 3. SURVEYS =====
    op.create_table(
        'surveys',
        sa.Column('id', sa.String(80), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('survey_date', sa.Date(), nullable=False),
        sa.Column('total_score', sa.Float(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(), nullable=False),
        sa.Column('responses', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.UniqueConstraint('user_id', 'survey_date', name='uq_surveys_user_date'),
    )

    # ===== 4. DAILY_SCORES =====
    op.create_table(
        'daily_scores',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('score_date', sa.Date(), nullable=False),
        sa.Column('total_score', sa.Float(), nullable=False),
        sa.Column('calculated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
    )

    # ===== 5. ALERTS =====
    op.execute("CREATE SEQUENCE IF NOT EXISTS alerts_seq")
    op.create_table(
        'alerts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('seq', sa.Integer(),
                  server_default=sa.text('alerts_seq.nextval'), nullable=False),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('target_user_id', sa.String(36), nullable=True),
        sa.Column('alert_type', sa.String(30), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
    )

    # ===== INDEXES =====
    op.create_index('idx_users_manager', 'users', ['manager_id'])
    op.create_index('idx_surveys_user_date', 'surveys', ['user_id', 'survey_date'])
    op.create_index('idx_daily_scores_user_date', 'daily_scores', ['user_id', 'score_date'])
    op.create_index('idx_alerts_user_read', 'alerts', ['user_id', 'is_read'])


def downgrade() -> None:
    """Drop all HR Pulse tables."""
    op.drop_index('idx_alerts_user_read', table_name='alerts')
    op.drop_index('idx_daily_scores_user_date', table_name='daily_scores')
    op.drop_index('idx_surveys_user_date', table_name='surveys')
    op.drop_index('idx_users_manager', table_name='users')
    op.drop_table('alerts')
    op.execute("DROP SEQUENCE IF EXISTS alerts_seq")
    op.drop_table('daily_scores')
    op.drop_table('surveys')
    op.drop_table('questions')
    op.drop_table('users')
