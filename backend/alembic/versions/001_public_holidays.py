"""public holidays

Revision ID: 001
Revises:
Create Date: 2024-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'public_holidays',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('jurisdiction', sa.String(), nullable=False),
        sa.Column('holiday_date', sa.Date(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('jurisdiction', 'holiday_date', name='uq_public_holidays_jurisdiction_date')
    )
    op.create_index(op.f('ix_public_holidays_jurisdiction'), 'public_holidays', ['jurisdiction'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_public_holidays_jurisdiction'), table_name='public_holidays')
    op.drop_table('public_holidays')
