"""Tests for RSS serialization."""

import xml.etree.ElementTree as ET

from sarasara.models.rss import (
    ITunesItemExtension,
    RssCategory,
    RssChannel,
    RssEnclosure,
    RssGuid,
    RssImage,
    RssItem,
)
from sarasara.processors.rss_writer import ITUNES_NS, render_rss


def make_channel(**overrides):
    fields = dict(title="Show", link="https://host/show", description="About the show")
    fields.update(overrides)
    return RssChannel(**fields)


def test_minimal_channel():
    document = render_rss(make_channel())
    assert document.startswith(b"<?xml")

    root = ET.fromstring(document)
    assert root.tag == "rss"
    assert root.get("version") == "2.0"
    channel = root.find("channel")
    assert [child.tag for child in channel] == ["title", "link", "description"]


def test_unset_fields_are_omitted():
    document = render_rss(make_channel(items=[RssItem(title="Only a title")]))
    item = ET.fromstring(document).find("channel/item")
    assert [child.tag for child in item] == ["title"]


def test_channel_element_order():
    channel = make_channel(
        managing_editor="Editor",
        categories=[RssCategory(name="A"), RssCategory(name="B", domain="genres")],
        generator="gen",
        image=RssImage(url="https://host/i.jpg", title="Show", link="https://host/show"),
        items=[RssItem(title="Ep")],
    )
    root = ET.fromstring(render_rss(channel))
    tags = [child.tag for child in root.find("channel")]
    assert tags == [
        "title", "link", "description", "managingEditor",
        "category", "category", "generator", "image", "item",
    ]
    assert root.findall("channel/category")[1].get("domain") == "genres"
    assert root.find("channel/image/description") is None


def test_full_item():
    item = RssItem(
        title="Ep & more",
        link="https://host/ep",
        description="<p>html</p>",
        pub_date="Tue, 05 Jan 2021 00:00:00 +0000",
        enclosure=RssEnclosure(url="https://cdn/ep.mp3?a=1&b=2"),
        guid=RssGuid(value="id-1", permalink=False),
        itunes_ext=ITunesItemExtension(image="https://host/ep.jpg", duration="10:00", episode="3", season="1"),
    )
    root = ET.fromstring(render_rss(make_channel(items=[item])))
    item_el = root.find("channel/item")

    assert item_el.findtext("title") == "Ep & more"
    assert item_el.findtext("description") == "<p>html</p>"
    assert item_el.find("enclosure").get("url") == "https://cdn/ep.mp3?a=1&b=2"
    assert item_el.find("enclosure").get("type") == "audio/mpeg"
    assert item_el.find(f"{{{ITUNES_NS}}}image").get("href") == "https://host/ep.jpg"
    assert item_el.findtext(f"{{{ITUNES_NS}}}duration") == "10:00"
    assert item_el.findtext(f"{{{ITUNES_NS}}}episode") == "3"
    assert item_el.findtext(f"{{{ITUNES_NS}}}season") == "1"


def test_itunes_namespace_prefix():
    item = RssItem(itunes_ext=ITunesItemExtension(duration="1:00"))
    document = render_rss(make_channel(items=[item]))
    assert b'xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd"' in document
    assert b"<itunes:duration>1:00</itunes:duration>" in document


def test_permalink_guid():
    item = RssItem(guid=RssGuid(value="https://host/ep"))
    root = ET.fromstring(render_rss(make_channel(items=[item])))
    assert root.find("channel/item/guid").get("isPermaLink") == "true"
