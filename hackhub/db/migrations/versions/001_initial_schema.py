"""Initial HackHub schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-03-01

Creates:
- users: signed-in accounts with role flags
- events, event_photos, event_teams: events and what belongs to them
- event_participants, event_judges, event_organisers: user links per event
- sponsors, event_sponsors: sponsor catalogue and event links
- team_details, team_members: team proposals and their members
- app_logs: persisted application log entries
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

ID = sa.String(length=32)


def upgrade() -> None:
    """
    Create all tables.

    Link tables use composite primary keys so a user or sponsor can be
    attached to an event only once. Team names are unique per event
    regardless of case.
    """
    op.create_table(
        'users',
        sa.Column('id', ID, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_judge', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_organiser', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('email_verified', sa.DateTime(), nullable=True),
        sa.Column('oauth_subject', sa.String(length=255), nullable=True),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'events',
        sa.Column('id', ID, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('poster', sa.String(length=1024), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_start_date', 'events', ['start_date'])

    op.create_table(
        'event_photos',
        sa.Column('id', ID, nullable=False),
        sa.Column('event_id', ID, nullable=False),
        sa.Column('url', sa.String(length=1024), nullable=False),
        sa.Column('caption', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_event_photos_event_id', 'event_photos', ['event_id'])

    op.create_table(
        'event_teams',
        sa.Column('id', ID, nullable=False),
        sa.Column('event_id', ID, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_event_teams_event_id', 'event_teams', ['event_id'])
    op.create_index(
        'uq_event_teams_event_lower_name',
        'event_teams',
        ['event_id', sa.text('lower(name)')],
        unique=True,
    )

    op.create_table(
        'event_participants',
        sa.Column('event_id', ID, nullable=False),
        sa.Column('user_id', ID, nullable=False),
        sa.Column('team_id', ID, nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['team_id'], ['event_teams.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('event_id', 'user_id'),
    )
    op.create_index('ix_event_participants_user_id', 'event_participants', ['user_id'])
    op.create_index('ix_event_participants_team_id', 'event_participants', ['team_id'])

    for table in ('event_judges', 'event_organisers'):
        op.create_table(
            table,
            sa.Column('event_id', ID, nullable=False),
            sa.Column('user_id', ID, nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('event_id', 'user_id'),
        )
        op.create_index(f'ix_{table}_user_id', table, ['user_id'])

    op.create_table(
        'sponsors',
        sa.Column('id', ID, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('logo', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'event_sponsors',
        sa.Column('event_id', ID, nullable=False),
        sa.Column('sponsor_id', ID, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['sponsor_id'], ['sponsors.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('event_id', 'sponsor_id'),
    )
    op.create_index('ix_event_sponsors_sponsor_id', 'event_sponsors', ['sponsor_id'])

    op.create_table(
        'team_details',
        sa.Column('id', ID, nullable=False),
        sa.Column('team_name', sa.String(length=255), nullable=False),
        sa.Column('project_file', sa.String(length=2048), nullable=True),
        sa.Column('project_file_name', sa.String(length=255), nullable=True),
        sa.Column('approval_status', sa.String(length=20), nullable=False,
                  server_default='pending'),
        sa.Column('user_id', ID, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_team_details_approval_status', 'team_details', ['approval_status'])

    op.create_table(
        'team_members',
        sa.Column('id', ID, nullable=False),
        sa.Column('team_id', ID, nullable=False),
        sa.Column('user_id', ID, nullable=True),
        sa.Column('role', sa.String(length=50), nullable=False, server_default='member'),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('contact_number', sa.String(length=50), nullable=True),
        sa.Column('food_preference', sa.String(length=50), nullable=True),
        sa.Column('tshirt_size', sa.String(length=10), nullable=True),
        sa.Column('allergies', sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(['team_id'], ['team_details.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_team_members_team_id', 'team_members', ['team_id'])

    op.create_table(
        'app_logs',
        sa.Column('id', ID, nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('level', sa.String(length=10), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('correlation_id', sa.String(length=64), nullable=True),
        sa.Column('context', sa.String(length=255), nullable=True),
        sa.Column('meta', sa.Text(), nullable=True),
        sa.Column('user_id', ID, nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_app_logs_timestamp', 'app_logs', ['timestamp'])
    op.create_index('ix_app_logs_correlation_id', 'app_logs', ['correlation_id'])
    op.create_index('ix_app_logs_user_timestamp', 'app_logs', ['user_id', 'timestamp'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('app_logs')
    op.drop_table('team_members')
    op.drop_table('team_details')
    op.drop_table('event_sponsors')
    op.drop_table('sponsors')
    op.drop_table('event_organisers')
    op.drop_table('event_judges')
    op.drop_table('event_participants')
    op.drop_table('event_teams')
    op.drop_table('event_photos')
    op.drop_table('events')
    op.drop_table('users')
