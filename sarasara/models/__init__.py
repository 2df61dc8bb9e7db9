"""
Data models for the upstream program payload and the generated RSS feed.
"""
from .program import Genre, PodcastInfo, TrackInfo, Audio, Card, Block, RaiPlayProgram
from .rss import (
    RssCategory,
    RssImage,
    RssEnclosure,
    RssGuid,
    ITunesItemExtension,
    RssItem,
    RssChannel
)

__all__ = [
    'Genre',
    'PodcastInfo',
    'TrackInfo',
    'Audio',
    'Card',
    'Block',
    'RaiPlayProgram',
    'RssCategory',
    'RssImage',
    'RssEnclosure',
    'RssGuid',
    'ITunesItemExtension',
    'RssItem',
    'RssChannel'
]
