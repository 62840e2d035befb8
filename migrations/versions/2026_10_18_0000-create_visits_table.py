"""Create visits table

Revision ID: 001_visits
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import context, op
import sqlalchemy as sa
from sqlalchemy import inspect
from sqlalchemy.dialects import mysql

# revision identifiers, used by Alembic.
revision: str = '001_visits'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the visits table:
    - id: auto-incrementing primary key
    - timestamp: time of the visit (indexed for newest-first reads)
    - userIp: hashed visitor address

    Deployments that already created the table by hand are left untouched.
    """
    # Offline (--sql) runs have no connection to inspect
    if not context.is_offline_mode():
        existing_tables = inspect(op.get_bind()).get_table_names()
        if 'visits' in existing_tables:
            return

    op.create_table(
        'visits',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column(
            'timestamp',
            sa.DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), 'mysql'),
            nullable=False
        ),
        sa.Column('userIp', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index(
        'ix_visits_timestamp',
        'visits',
        ['timestamp']
    )


def downgrade() -> None:
    """Drop the visits table."""
    op.drop_index('ix_visits_timestamp', table_name='visits')
    op.drop_table('visits')
