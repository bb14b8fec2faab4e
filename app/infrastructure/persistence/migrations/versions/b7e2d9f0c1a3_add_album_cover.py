"""add_album_cover

Revision ID: b7e2d9f0c1a3
Revises: a3f1c2d4e5b6
Create Date: 2026-10-02 14:37:09.902117

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7e2d9f0c1a3"
down_revision: Union[str, Sequence[str], None] = "a3f1c2d4e5b6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("albums", sa.Column("cover", sa.String(256), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("albums", "cover")
