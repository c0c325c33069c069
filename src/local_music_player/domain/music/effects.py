"""Audio output instructions produced by session transitions.

Transitions never touch the output device directly. They describe the calls
to make, in order, and the controller carries them out.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from local_music_player.domain.shared.types import NonEmptyStr, PlaybackSeconds, VolumeLevel


class PortEffect(BaseModel):
    """Base class for all output instructions."""

    model_config = ConfigDict(frozen=True)


class LoadSource(PortEffect):
    kind: Literal["load"] = "load"
    source: NonEmptyStr


class StartPlayback(PortEffect):
    kind: Literal["play"] = "play"


class PausePlayback(PortEffect):
    kind: Literal["pause"] = "pause"


class SeekTo(PortEffect):
    kind: Literal["seek"] = "seek"
    seconds: PlaybackSeconds


class ApplyVolume(PortEffect):
    kind: Literal["volume"] = "volume"
    level: VolumeLevel


AnyPortEffect = Annotated[
    LoadSource | StartPlayback | PausePlayback | SeekTo | ApplyVolume,
    Field(discriminator="kind"),
]
