"""Query for retrieving the current queue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from local_music_player.domain.music.entities import Track
from local_music_player.domain.shared.types import QueueIndexInt

if TYPE_CHECKING:
    from ..services.playback_controller import PlaybackController


class GetQueueQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    liked_only: bool = False


class QueueInfo(BaseModel):

    tracks: list[Track] = Field(default_factory=list)
    current_track: Track | None = None
    current_index: QueueIndexInt | None = None
    total_duration: float | None = None
    total_duration_formatted: str = "Unknown"

    @property
    def length(self) -> int:
        return len(self.tracks)

    @property
    def is_empty(self) -> bool:
        return len(self.tracks) == 0


class GetQueueHandler:

    def __init__(self, *, controller: PlaybackController) -> None:
        self._controller = controller

    async def handle(self, query: GetQueueQuery) -> QueueInfo:
        info = self._controller.get_queue_info()
        if not query.liked_only:
            return info

        state = self._controller.state
        liked = [track for track in info.tracks if state.is_liked(track.id)]
        return info.model_copy(update={"tracks": liked})
