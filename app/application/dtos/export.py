"""DTOs for export jobs handed to the message broker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaylistExportJob:
    """Payload of a playlist export request."""

    playlist_id: str
    target_email: str

    def to_message(self) -> dict[str, str]:
        """Wire shape consumed by the export worker."""
        return {"playlistId": self.playlist_id, "targetEmail": self.target_email}
