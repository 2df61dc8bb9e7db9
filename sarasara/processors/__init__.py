"""
Feed processors: URL helpers, date parsing, feed building and RSS rendering.
"""
from .feed_builder import build_channel, build_feed, GENERATOR
from .rss_writer import render_rss
