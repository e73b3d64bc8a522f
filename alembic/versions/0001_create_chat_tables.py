"""create chat tables

Revision ID: 0001_create_chat_tables
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001_create_chat_tables'
down_revision = None
branch_labels = None
depends_on = None

USER_STATUS = ('online', 'offline', 'away')
ROOM_ROLE = ('admin', 'moderator', 'member')
MESSAGE_TYPE = ('text', 'image', 'file', 'system')
NOTIFICATION_TYPE = ('new_message', 'new_upload', 'new_comment', 'status_update', 'room_invite')


def _enum(values, name):
    return sa.Enum(*values, name=name, native_enum=False)


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('status', _enum(USER_STATUS, 'user_status'), server_default='offline', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'])
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_status'), 'users', ['status'])
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'])

    op.create_table('chat_rooms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_private', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_chat_rooms_id'), 'chat_rooms', ['id'])
    op.create_index(op.f('ix_chat_rooms_created_by'), 'chat_rooms', ['created_by'])
    op.create_index(op.f('ix_chat_rooms_created_at'), 'chat_rooms', ['created_at'])

    op.create_table('room_members',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('role', _enum(ROOM_ROLE, 'room_role'), server_default='member', nullable=False),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['room_id'], ['chat_rooms.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('room_id', 'user_id', name='uq_room_members_room_user')
    )
    op.create_index(op.f('ix_room_members_id'), 'room_members', ['id'])
    op.create_index(op.f('ix_room_members_room_id'), 'room_members', ['room_id'])
    op.create_index(op.f('ix_room_members_user_id'), 'room_members', ['user_id'])

    op.create_table('messages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('message_type', _enum(MESSAGE_TYPE, 'message_type'), server_default='text', nullable=False),
        sa.Column('file_url', sa.Text(), nullable=True),
        sa.Column('reply_to_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['room_id'], ['chat_rooms.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['reply_to_id'], ['messages.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_messages_id'), 'messages', ['id'])
    op.create_index(op.f('ix_messages_room_id'), 'messages', ['room_id'])
    op.create_index(op.f('ix_messages_user_id'), 'messages', ['user_id'])
    op.create_index(op.f('ix_messages_created_at'), 'messages', ['created_at'])
    op.create_index('idx_messages_room_time', 'messages', ['room_id', 'created_at'])

    op.create_table('uploads',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('file_url', sa.Text(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('file_type', sa.String(length=100), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('file_size > 0', name='ck_uploads_file_size_positive'),
        sa.ForeignKeyConstraint(['room_id'], ['chat_rooms.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_uploads_id'), 'uploads', ['id'])
    op.create_index(op.f('ix_uploads_user_id'), 'uploads', ['user_id'])
    op.create_index(op.f('ix_uploads_room_id'), 'uploads', ['room_id'])
    op.create_index(op.f('ix_uploads_created_at'), 'uploads', ['created_at'])

    op.create_table('comments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('upload_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['upload_id'], ['uploads.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_comments_id'), 'comments', ['id'])
    op.create_index(op.f('ix_comments_upload_id'), 'comments', ['upload_id'])
    op.create_index(op.f('ix_comments_user_id'), 'comments', ['user_id'])
    op.create_index(op.f('ix_comments_created_at'), 'comments', ['created_at'])

    op.create_table('push_notifications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('type', _enum(NOTIFICATION_TYPE, 'notification_type'), nullable=False),
        sa.Column('data', sa.Text(), nullable=True),
        sa.Column('is_read', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_push_notifications_id'), 'push_notifications', ['id'])
    op.create_index(op.f('ix_push_notifications_user_id'), 'push_notifications', ['user_id'])
    op.create_index(op.f('ix_push_notifications_created_at'), 'push_notifications', ['created_at'])
    op.create_index('idx_push_notifications_user_time', 'push_notifications', ['user_id', 'created_at'])
    op.create_index('idx_push_notifications_unread', 'push_notifications', ['user_id', 'is_read'])


def downgrade() -> None:
    op.drop_table('push_notifications')
    op.drop_table('comments')
    op.drop_table('uploads')
    op.drop_table('messages')
    op.drop_table('room_members')
    op.drop_table('chat_rooms')
    op.drop_table('users')
