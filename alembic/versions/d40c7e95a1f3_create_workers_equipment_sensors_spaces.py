"""create workers, equipment, sensors and spaces

Revision ID: d40c7e95a1f3
Revises: 8b61e4a0c2d9
Create Date: 2025-08-20 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'd40c7e95a1f3'
down_revision: Union[str, Sequence[str], None] = '8b61e4a0c2d9'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'workers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('hours_worked', sa.Integer(), server_default='0', nullable=True),
        sa.Column('leaves', sa.Integer(), server_default='0', nullable=True),
        sa.Column('role', sa.Text(), nullable=True),
        sa.Column('contact', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_workers')),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'equipment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('purchase_date', sa.Date(), nullable=True),
        sa.Column('condition', sa.Text(), nullable=True),
        sa.Column('last_maintenance', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_equipment')),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'sensors',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('sensor_type', sa.Text(), nullable=False),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('last_reading', sa.Float(), nullable=True),
        sa.Column('last_reading_time', sa.DateTime(), nullable=True),
        sa.Column('status', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_sensors')),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'spaces',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('type', sa.Text(), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('grass_condition', sa.Text(), nullable=True),
        sa.Column('health', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint(
            "type IN ('enclosure', 'grazing_field', 'other')", name=op.f('ck_spaces_type')
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_spaces')),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('spaces')
    op.drop_table('sensors')
    op.drop_table('equipment')
    op.drop_table('workers')
