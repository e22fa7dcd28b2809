"""create goats

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2025-08-10 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'goats',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('breed', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('gender', sa.Text(), nullable=False),
        sa.Column('offspring', sa.Integer(), server_default='0', nullable=True),
        sa.Column('cost', sa.Float(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('current_price', sa.Float(), nullable=True),
        sa.Column('diet', sa.Text(), nullable=True),
        sa.Column('last_bred', sa.Date(), nullable=True),
        sa.Column('health_status', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("gender IN ('Male', 'Female')", name=op.f('ck_goats_gender')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_goats')),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('goats')
