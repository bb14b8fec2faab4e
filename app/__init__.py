"""Catalog service: songs, albums, playlists and likes behind a read-through cache."""
