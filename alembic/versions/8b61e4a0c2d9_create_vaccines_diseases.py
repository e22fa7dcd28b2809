"""create vaccines, diseases and goat association tables

Revision ID: 8b61e4a0c2d9
Revises: 3f2a9c1d7b40
Create Date: 2025-08-12 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b61e4a0c2d9'
down_revision: Union[str, Sequence[str], None] = '3f2a9c1d7b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'vaccines',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_vaccines')),
        sa.UniqueConstraint('name', name=op.f('uq_vaccines_name')),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'diseases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_diseases')),
        sa.UniqueConstraint('name', name=op.f('uq_diseases_name')),
        sqlite_autoincrement=True,
    )

    # Both sides cascade so removing a goat, vaccine or disease never leaves dangling links
    op.create_table(
        'goat_vaccines',
        sa.Column('goat_id', sa.Integer(), nullable=False),
        sa.Column('vaccine_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['goat_id'], ['goats.id'],
            name=op.f('fk_goat_vaccines_goat_id_goats'), ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['vaccine_id'], ['vaccines.id'],
            name=op.f('fk_goat_vaccines_vaccine_id_vaccines'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('goat_id', 'vaccine_id', name=op.f('pk_goat_vaccines')),
    )
    op.create_table(
        'goat_diseases',
        sa.Column('goat_id', sa.Integer(), nullable=False),
        sa.Column('disease_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['goat_id'], ['goats.id'],
            name=op.f('fk_goat_diseases_goat_id_goats'), ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['disease_id'], ['diseases.id'],
            name=op.f('fk_goat_diseases_disease_id_diseases'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('goat_id', 'disease_id', name=op.f('pk_goat_diseases')),
    )


def downgrade() -> None:
    op.drop_table('goat_diseases')
    op.drop_table('goat_vaccines')
    op.drop_table('diseases')
    op.drop_table('vaccines')
