"""initial schema: users, auth attempts, courses, articles, accounts, files

Revision ID: 001
Revises: 
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(soft_delete: bool = True) -> list:
    columns = [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]
    if soft_delete:
        columns.append(sa.Column('deleted_at', sa.DateTime(), nullable=True))
    return columns


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('telegram_username', sa.String(64), nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('role', sa.Enum('admin', 'student', name='userrole'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_telegram_username', 'users', ['telegram_username'])
    op.create_index('ix_users_username', 'users', ['username'])
    op.create_index('ix_users_deleted_at', 'users', ['deleted_at'])

    op.create_table(
        'auth_attempts',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('identifier_used', sa.String(255), nullable=False),
        sa.Column('type', sa.Enum('telegram', 'email', name='authtype'), nullable=False),
        sa.Column('code', sa.String(16), nullable=False),
        sa.Column('success', sa.Boolean(), nullable=False),
        sa.Column('attempt_left', sa.Integer(), nullable=False),
        sa.Column('ttl', sa.Interval(), nullable=False),
        *_timestamps(soft_delete=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_auth_attempts_id', 'auth_attempts', ['id'])
    op.create_index('ix_auth_attempts_identifier_used', 'auth_attempts', ['identifier_used'])

    op.create_table(
        'courses',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('author_id', sa.String(36), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_courses_id', 'courses', ['id'])
    op.create_index('ix_courses_title', 'courses', ['title'])
    op.create_index('ix_courses_author_id', 'courses', ['author_id'])
    op.create_index('ix_courses_deleted_at', 'courses', ['deleted_at'])

    op.create_table(
        'course_tags',
        sa.Column('course_id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('course_id', 'name'),
    )
    op.create_index('ix_course_tags_name', 'course_tags', ['name'])

    op.create_table(
        'articles',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('course_id', sa.String(36), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content_md', sa.Text(), nullable=False),
        sa.Column('content_txt', sa.Text(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('is_draft', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_articles_id', 'articles', ['id'])
    op.create_index('ix_articles_course_id', 'articles', ['course_id'])
    op.create_index('ix_articles_title', 'articles', ['title'])
    op.create_index('ix_articles_deleted_at', 'articles', ['deleted_at'])

    op.create_table(
        'article_tags',
        sa.Column('article_id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(['article_id'], ['articles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('article_id', 'name'),
    )
    op.create_index('ix_article_tags_name', 'article_tags', ['name'])

    op.create_table(
        'accounts',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('role', sa.Enum('student', 'teacher', 'admin', name='accountrole'), nullable=False),
        sa.Column('status', sa.Enum('active', 'blocked', name='accountstatus'), nullable=False),
        sa.Column('photo', sa.String(36), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_accounts_id', 'accounts', ['id'])
    op.create_index('ix_accounts_first_name', 'accounts', ['first_name'])
    op.create_index('ix_accounts_last_name', 'accounts', ['last_name'])
    op.create_index('ix_accounts_deleted_at', 'accounts', ['deleted_at'])

    op.create_table(
        'files',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('filename', sa.String(255), nullable=False),
        sa.Column('content_type', sa.String(255), nullable=False),
        sa.Column('size', sa.BigInteger(), nullable=False),
        sa.Column('storage_key', sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('storage_key'),
    )
    op.create_index('ix_files_id', 'files', ['id'])
    op.create_index('ix_files_filename', 'files', ['filename'])
    op.create_index('ix_files_deleted_at', 'files', ['deleted_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('files')
    op.drop_table('accounts')
    op.drop_table('article_tags')
    op.drop_table('articles')
    op.drop_table('course_tags')
    op.drop_table('courses')
    op.drop_table('auth_attempts')
    op.drop_table('users')
    for enum_name in ('accountstatus', 'accountrole', 'authtype', 'userrole'):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
