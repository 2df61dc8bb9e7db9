"""
Serialize RSS channel records into an RSS 2.0 XML document.
"""
import xml.etree.ElementTree as ET
from typing import Optional

from ..models.rss import ITunesItemExtension, RssChannel, RssImage, RssItem

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"

ET.register_namespace("itunes", ITUNES_NS)

def _itunes(tag: str) -> str:
    return f"{{{ITUNES_NS}}}{tag}"

def _text(parent: ET.Element, tag: str, value: Optional[str]) -> None:
    """Add a text element, skipping values that are not set."""
    if value is None:
        return
    ET.SubElement(parent, tag).text = value

def _write_image(channel_el: ET.Element, image: RssImage) -> None:
    image_el = ET.SubElement(channel_el, "image")
    _text(image_el, "url", image.url)
    _text(image_el, "title", image.title)
    _text(image_el, "link", image.link)
    _text(image_el, "description", image.description)

def _write_itunes(item_el: ET.Element, ext: ITunesItemExtension) -> None:
    if ext.image is not None:
        ET.SubElement(item_el, _itunes("image"), {"href": ext.image})
    _text(item_el, _itunes("duration"), ext.duration)
    _text(item_el, _itunes("episode"), ext.episode)
    _text(item_el, _itunes("season"), ext.season)

def _write_item(channel_el: ET.Element, item: RssItem) -> None:
    item_el = ET.SubElement(channel_el, "item")
    _text(item_el, "title", item.title)
    _text(item_el, "link", item.link)
    _text(item_el, "description", item.description)

    if item.enclosure is not None:
        ET.SubElement(item_el, "enclosure", {
            "url": item.enclosure.url,
            "length": item.enclosure.length,
            "type": item.enclosure.mime_type,
        })

    if item.guid is not None:
        guid_el = ET.SubElement(item_el, "guid")
        guid_el.text = item.guid.value
        guid_el.set("isPermaLink", "true" if item.guid.permalink else "false")

    _text(item_el, "pubDate", item.pub_date)

    if item.itunes_ext is not None:
        _write_itunes(item_el, item.itunes_ext)

def render_rss(channel: RssChannel) -> bytes:
    """
    Render a channel as a UTF-8 encoded RSS document.

    Args:
        channel: Channel to render

    Returns:
        The XML document, including the XML declaration
    """
    rss = ET.Element("rss", {"version": "2.0"})
    channel_el = ET.SubElement(rss, "channel")

    _text(channel_el, "title", channel.title)
    _text(channel_el, "link", channel.link)
    _text(channel_el, "description", channel.description)
    _text(channel_el, "managingEditor", channel.managing_editor)

    for category in channel.categories:
        category_el = ET.SubElement(channel_el, "category")
        category_el.text = category.name
        if category.domain is not None:
            category_el.set("domain", category.domain)

    _text(channel_el, "generator", channel.generator)

    if channel.image is not None:
        _write_image(channel_el, channel.image)

    for item in channel.items:
        _write_item(channel_el, item)

    return ET.tostring(rss, encoding="utf-8", xml_declaration=True)
