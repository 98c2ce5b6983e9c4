"""Initial schema: users, subscriptions, videos, comments, watch history

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create catalog tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('username', sa.String(100), unique=True, nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('avatar_url', sa.String(2048), nullable=False),
        sa.Column('banner_url', sa.String(2048), nullable=True),
        sa.Column('is_admin', sa.Boolean, default=False, nullable=False),
        sa.Column('subscribers', sa.Integer, default=0, nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column('last_login_at', sa.DateTime, nullable=True),
    )

    op.create_table(
        'subscriptions',
        sa.Column('subscriber_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('channel_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'videos',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('channel_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.JSON, nullable=False),
        sa.Column('description', sa.JSON, nullable=False),
        sa.Column('thumbnail_url', sa.String(2048), nullable=False),
        sa.Column('video_url', sa.String(2048), nullable=False),
        sa.Column('media_type', sa.String(10), default='video', nullable=False),
        sa.Column('duration', sa.String(16), nullable=False),
        sa.Column('tags', sa.JSON, nullable=False),
        sa.Column('is_shorts', sa.Boolean, default=False, nullable=False),
        sa.Column('views', sa.Integer, default=0, nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'comments',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('video_id', sa.String(64), sa.ForeignKey('videos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('text', sa.Text, nullable=False),
        sa.Column('likes', sa.Integer, default=0, nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'watch_history',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('video_id', sa.String(64), sa.ForeignKey('videos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('watched_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'video_id', name='uq_watch_history_user_video'),
    )

    # Create indexes
    op.create_index('ix_users_username', 'users', ['username'])
    op.create_index('ix_videos_channel_id', 'videos', ['channel_id'])
    op.create_index('ix_videos_is_shorts', 'videos', ['is_shorts'])
    op.create_index('ix_videos_created_at', 'videos', ['created_at'])
    op.create_index('ix_comments_video_id', 'comments', ['video_id'])
    op.create_index('ix_comments_author_id', 'comments', ['author_id'])
    op.create_index('ix_comments_created_at', 'comments', ['created_at'])
    op.create_index('ix_watch_history_user_id', 'watch_history', ['user_id'])
    op.create_index('ix_watch_history_watched_at', 'watch_history', ['watched_at'])


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_index('ix_watch_history_watched_at')
    op.drop_index('ix_watch_history_user_id')
    op.drop_index('ix_comments_created_at')
    op.drop_index('ix_comments_author_id')
    op.drop_index('ix_comments_video_id')
    op.drop_index('ix_videos_created_at')
    op.drop_index('ix_videos_is_shorts')
    op.drop_index('ix_videos_channel_id')
    op.drop_index('ix_users_username')
    op.drop_table('watch_history')
    op.drop_table('comments')
    op.drop_table('videos')
    op.drop_table('subscriptions')
    op.drop_table('users')
