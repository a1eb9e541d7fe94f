# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MovieMetadata(BaseModel):
    """Movie details as reported by Helioviewer's ``getMovieStatus``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")
    num_frames: int = Field(..., alias="numFrames")
    frame_rate: float = Field(..., alias="frameRate")
    layers: str = Field(
        ..., description="Encoded layer list, e.g. [SDO,AIA,AIA,171,1,100]"
    )


@dataclass(frozen=True, slots=True)
class TimeWindow:
    start: datetime
    end: datetime


@dataclass(frozen=True, slots=True)
class ResolvedSource:
    """A catalog source activated for an imported movie."""

    source_id: Any
    window: TimeWindow
    cadence: float
    resolution: Any
