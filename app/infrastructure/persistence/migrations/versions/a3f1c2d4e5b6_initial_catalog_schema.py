"""initial_catalog_schema

Revision ID: a3f1c2d4e5b6
Revises:
Create Date: 2026-09-28 10:12:41.518204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a3f1c2d4e5b6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("fullname", sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_table(
        "albums",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "songs",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("genre", sa.String(), nullable=False),
        sa.Column("performer", sa.String(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("album_id", sa.String(64), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["album_id"], ["albums.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_songs_album_id", "songs", ["album_id"])
    op.create_table(
        "playlists",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("owner", sa.String(64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_playlists_owner", "playlists", ["owner"])
    op.create_table(
        "playlist_songs",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("playlist_id", sa.String(64), nullable=False),
        sa.Column("song_id", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["playlist_id"], ["playlists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["song_id"], ["songs.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("playlist_id", "song_id", name="uq_playlist_song"),
    )
    op.create_index("ix_playlist_songs_playlist_id", "playlist_songs", ["playlist_id"])
    op.create_index("ix_playlist_songs_song_id", "playlist_songs", ["song_id"])
    op.create_table(
        "collaborations",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("playlist_id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["playlist_id"], ["playlists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("playlist_id", "user_id", name="uq_collaboration"),
    )
    op.create_index("ix_collaborations_playlist_id", "collaborations", ["playlist_id"])
    op.create_index("ix_collaborations_user_id", "collaborations", ["user_id"])
    op.create_table(
        "user_album_likes",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("album_id", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["album_id"], ["albums.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "album_id", name="uq_user_album_like"),
    )
    op.create_index("ix_user_album_likes_user_id", "user_album_likes", ["user_id"])
    op.create_index("ix_user_album_likes_album_id", "user_album_likes", ["album_id"])
    op.create_table(
        "playlist_song_activities",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("playlist_id", sa.String(64), nullable=False),
        sa.Column("song_id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("action", sa.String(16), nullable=False),
        sa.Column("time", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["playlist_id"], ["playlists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["song_id"], ["songs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "action IN ('add', 'delete')", name="ck_playlist_song_activity_action"
        ),
    )
    op.create_index(
        "ix_playlist_song_activities_playlist_id",
        "playlist_song_activities",
        ["playlist_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "ix_playlist_song_activities_playlist_id", table_name="playlist_song_activities"
    )
    op.drop_table("playlist_song_activities")
    op.drop_index("ix_user_album_likes_album_id", table_name="user_album_likes")
    op.drop_index("ix_user_album_likes_user_id", table_name="user_album_likes")
    op.drop_table("user_album_likes")
    op.drop_index("ix_collaborations_user_id", table_name="collaborations")
    op.drop_index("ix_collaborations_playlist_id", table_name="collaborations")
    op.drop_table("collaborations")
    op.drop_index("ix_playlist_songs_song_id", table_name="playlist_songs")
    op.drop_index("ix_playlist_songs_playlist_id", table_name="playlist_songs")
    op.drop_table("playlist_songs")
    op.drop_index("ix_playlists_owner", table_name="playlists")
    op.drop_table("playlists")
    op.drop_index("ix_songs_album_id", table_name="songs")
    op.drop_table("songs")
    op.drop_table("albums")
    op.drop_table("users")
