"""
Functions for turning a RaiPlay Sound program into an RSS channel.
"""
from typing import Optional

from ..core.logging_config import get_logger
from ..models.program import Card, RaiPlayProgram
from ..models.rss import (
    ITunesItemExtension,
    RssCategory,
    RssChannel,
    RssEnclosure,
    RssGuid,
    RssImage,
    RssItem,
)
from .dates import format_rfc2822, parse_track_date
from .rss_writer import render_rss
from .url_utils import URLTypes, absolutize, build_proxied_audio_url

logger = get_logger(__name__)

GENERATOR = "sarasara https://github.com/steinuil/sarasara"
AUDIO_MIME_TYPE = "audio/mpeg"

def _pub_date(card: Card) -> Optional[str]:
    parsed = parse_track_date(card.track_info.date)
    if parsed is None:
        logger.debug(f"Omitting pubDate for {card.uniquename}: unparseable date {card.track_info.date!r}")
        return None
    formatted = format_rfc2822(parsed)
    if formatted is None:
        logger.debug(f"Omitting pubDate for {card.uniquename}: year {parsed.year} cannot be written as an RFC 2822 date")
    return formatted

def _enclosure_url(card: Card, public_base_url: Optional[URLTypes]) -> str:
    if public_base_url is None:
        return card.audio.url
    return build_proxied_audio_url(public_base_url, card.audio.url)

def build_item(
    card: Card,
    content_base_url: URLTypes,
    public_base_url: Optional[URLTypes] = None
) -> RssItem:
    """Map one episode card onto a feed item."""
    return RssItem(
        title=card.toptitle,
        link=absolutize(content_base_url, card.track_info.page_url),
        description=card.description,
        pub_date=_pub_date(card),
        enclosure=RssEnclosure(
            url=_enclosure_url(card, public_base_url),
            mime_type=AUDIO_MIME_TYPE,
            length="",
        ),
        guid=RssGuid(value=card.uniquename, permalink=False),
        itunes_ext=ITunesItemExtension(
            image=absolutize(content_base_url, card.image),
            duration=card.audio.duration,
            episode=card.episode,
            season=card.season,
        ),
    )

def build_channel(
    program: RaiPlayProgram,
    content_base_url: URLTypes,
    public_base_url: Optional[URLTypes] = None
) -> RssChannel:
    """
    Build an RSS channel from a program.

    Args:
        program: Parsed upstream program
        content_base_url: Host that relative image, weblink and page paths live on
        public_base_url: When set, enclosures point at this host's /audio proxy

    Returns:
        The channel, with one item per card in upstream order
    """
    info = program.podcast_info
    link = absolutize(content_base_url, info.weblink)

    channel = RssChannel(
        title=info.title,
        link=link,
        description=info.description,
        managing_editor=info.editor,
        categories=[RssCategory(name=genre.name) for genre in [*info.genres, *info.subgenres]],
        generator=GENERATOR,
        image=RssImage(
            url=absolutize(content_base_url, info.image),
            title=info.title,
            link=link,
            description=info.description,
        ),
        items=[build_item(card, content_base_url, public_base_url) for card in program.block.cards],
    )
    logger.info(f"Built channel '{channel.title}' with {len(channel.items)} items")
    return channel

def build_feed(
    program: RaiPlayProgram,
    content_base_url: URLTypes,
    public_base_url: Optional[URLTypes] = None
) -> bytes:
    """Build a program's channel and render it as an RSS document."""
    return render_rss(build_channel(program, content_base_url, public_base_url))
