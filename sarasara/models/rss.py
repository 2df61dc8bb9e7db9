"""
Records describing an RSS 2.0 channel with the iTunes podcast extension.

Every optional field defaults to None and a None field is left out of the
rendered document, so callers only fill in what they know.
"""
from typing import List, Optional
from pydantic import BaseModel


class RssCategory(BaseModel):
    name: str
    domain: Optional[str] = None


class RssImage(BaseModel):
    url: str
    title: str
    link: str
    description: Optional[str] = None


class RssEnclosure(BaseModel):
    url: str
    mime_type: str = "audio/mpeg"
    length: str = ""  # Unknown


class RssGuid(BaseModel):
    value: str
    permalink: bool = True


class ITunesItemExtension(BaseModel):
    image: Optional[str] = None
    duration: Optional[str] = None
    episode: Optional[str] = None
    season: Optional[str] = None


class RssItem(BaseModel):
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    pub_date: Optional[str] = None  # RFC 2822
    enclosure: Optional[RssEnclosure] = None
    guid: Optional[RssGuid] = None
    itunes_ext: Optional[ITunesItemExtension] = None


class RssChannel(BaseModel):
    title: str
    link: str
    description: str
    managing_editor: Optional[str] = None
    categories: List[RssCategory] = []
    generator: Optional[str] = None
    image: Optional[RssImage] = None
    items: List[RssItem] = []
