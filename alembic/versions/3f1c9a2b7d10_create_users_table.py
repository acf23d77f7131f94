"""create users table

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19 09:12:40.518233

"""
from alembic import op
from sqlalchemy.dialects import mysql
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c9a2b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 创建users表，用户名唯一
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=50).with_variant(mysql.VARCHAR(50, collation='utf8mb4_bin'), 'mysql'), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)


def downgrade():
    # 删除users表
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_table('users')
