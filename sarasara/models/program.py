"""
Pydantic models for the RaiPlay Sound program payload.

The upstream document at ``/programmi/<program>.json`` carries far more data
than a feed needs; only the fields used to build the feed are modelled and
everything else is ignored. Keys are accepted both in the upstream snake_case
form (``podcast_info``, ``track_info``, ``page_url``) and in camelCase.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProgramModel(BaseModel):
    """Base for upstream models: immutable, lenient about extra keys."""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Genre(ProgramModel):
    name: str


class PodcastInfo(ProgramModel):
    """Show level metadata. ``image`` and ``weblink`` are paths on the content host."""
    title: str
    description: str
    image: str
    editor: str
    weblink: str
    genres: List[Genre]
    subgenres: List[Genre]


class TrackInfo(ProgramModel):
    date: str  # Expected YYYY-MM-DD, validated only when building the feed
    page_url: str


class Audio(ProgramModel):
    url: str
    duration: str


class Card(ProgramModel):
    """One episode of a program."""
    uniquename: str
    toptitle: str
    description: str
    image: str
    audio: Audio
    track_info: TrackInfo
    episode: Optional[str] = None
    season: Optional[str] = None


class Block(ProgramModel):
    cards: List[Card]


class RaiPlayProgram(ProgramModel):
    """Root of the upstream program document."""
    podcast_info: PodcastInfo
    block: Block
