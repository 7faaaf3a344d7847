"""initial_schema

Revision ID: 4f1a2b9c7d30
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1a2b9c7d30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all application tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'auth_sessions',
        sa.Column('token', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('expires_at', sa.DateTime, nullable=False),
    )
    op.create_index('ix_auth_sessions_user_id', 'auth_sessions', ['user_id'])

    op.create_table(
        'password_resets',
        sa.Column('token', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('expires_at', sa.DateTime, nullable=False),
        sa.Column('used', sa.Boolean, nullable=False),
    )

    op.create_table(
        'user_profiles',
        sa.Column('id', sa.String(36), sa.ForeignKey('users.id'), primary_key=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('preferred_job_type', sa.String(50), nullable=True),
        sa.Column('preferred_shift', sa.String(50), nullable=True),
        sa.Column('years_experience', sa.Integer, nullable=False),
        sa.Column('bio', sa.Text, nullable=True),
        sa.Column('resume_url', sa.Text, nullable=True),
        sa.Column('profile_completion', sa.Integer, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'employers',
        sa.Column('id', sa.String(36), sa.ForeignKey('users.id'), primary_key=True),
        sa.Column('company_name', sa.String(255), nullable=False),
        sa.Column('company_logo', sa.Text, nullable=True),
        sa.Column('company_size', sa.String(50), nullable=True),
        sa.Column('industry_type', sa.String(100), nullable=True),
        sa.Column('website', sa.Text, nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('contact_phone', sa.String(50), nullable=True),
        sa.Column('verified', sa.Boolean, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('employer_id', sa.String(36), sa.ForeignKey('employers.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('industry_category', sa.String(100), nullable=False),
        sa.Column('job_role', sa.String(100), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('job_type', sa.String(20), nullable=False),
        sa.Column('shift_type', sa.String(20), nullable=True),
        sa.Column('experience_min', sa.Integer, nullable=False),
        sa.Column('experience_max', sa.Integer, nullable=True),
        sa.Column('salary_min', sa.Float, nullable=True),
        sa.Column('salary_max', sa.Float, nullable=True),
        sa.Column('salary_currency', sa.String(10), nullable=False),
        sa.Column('is_urgent', sa.Boolean, nullable=False),
        sa.Column('is_featured', sa.Boolean, nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )
    op.create_index('ix_jobs_employer_id', 'jobs', ['employer_id'])

    op.create_table(
        'skills',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('category', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'job_skills',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('job_id', sa.String(36), sa.ForeignKey('jobs.id'), nullable=False),
        sa.Column('skill_id', sa.String(36), sa.ForeignKey('skills.id'), nullable=False),
        sa.Column('required', sa.Boolean, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.UniqueConstraint('job_id', 'skill_id'),
    )
    op.create_index('ix_job_skills_job_id', 'job_skills', ['job_id'])

    op.create_table(
        'user_skills',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('user_profiles.id'), nullable=False),
        sa.Column('skill_id', sa.String(36), sa.ForeignKey('skills.id'), nullable=False),
        sa.Column('proficiency', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.UniqueConstraint('user_id', 'skill_id'),
    )
    op.create_index('ix_user_skills_user_id', 'user_skills', ['user_id'])

    op.create_table(
        'education',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('user_profiles.id'), nullable=False),
        sa.Column('degree', sa.String(255), nullable=False),
        sa.Column('field', sa.String(255), nullable=False),
        sa.Column('institution', sa.String(255), nullable=False),
        sa.Column('year_completed', sa.Integer, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )
    op.create_index('ix_education_user_id', 'education', ['user_id'])

    op.create_table(
        'certifications',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('user_profiles.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('issuing_organization', sa.String(255), nullable=False),
        sa.Column('issue_date', sa.String(20), nullable=True),
        sa.Column('expiry_date', sa.String(20), nullable=True),
        sa.Column('credential_id', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )
    op.create_index('ix_certifications_user_id', 'certifications', ['user_id'])

    op.create_table(
        'job_applications',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('job_id', sa.String(36), sa.ForeignKey('jobs.id'), nullable=False),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('user_profiles.id'), nullable=False),
        sa.Column('resume_url', sa.Text, nullable=True),
        sa.Column('cover_letter', sa.Text, nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('match_score', sa.Float, nullable=True),
        sa.Column('employer_notes', sa.Text, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
        sa.UniqueConstraint('job_id', 'user_id'),
    )
    op.create_index('ix_job_applications_job_id', 'job_applications', ['job_id'])
    op.create_index('ix_job_applications_user_id', 'job_applications', ['user_id'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text, nullable=False),
        sa.Column('read', sa.Boolean, nullable=False),
        sa.Column('link', sa.Text, nullable=True),
        sa.Column('extra_data', sa.JSON, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])


def downgrade() -> None:
    """Drop all application tables."""
    op.drop_table('notifications')
    op.drop_table('job_applications')
    op.drop_table('certifications')
    op.drop_table('education')
    op.drop_table('user_skills')
    op.drop_table('job_skills')
    op.drop_table('skills')
    op.drop_table('jobs')
    op.drop_table('employers')
    op.drop_table('user_profiles')
    op.drop_table('password_resets')
    op.drop_table('auth_sessions')
    op.drop_table('users')
