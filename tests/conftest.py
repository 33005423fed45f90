"""Shared fixtures for twitter card tests."""
from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from twitter_card.adapters.dom.soup import SoupHtmlParser
from twitter_card.pipeline import TwitterCard, normalize_options
from twitter_card.resolution import build_context

PAGE = """<!DOCTYPE html>
<html>
<head><title>Hello</title></head>
<body>
<h1 class="headline">Big news</h1>
<img id="hero" src="/img/hero.jpg">
<p class="lead">First paragraph</p>
</body>
</html>
"""


def _twitter_meta(markup: str) -> dict[str, str]:
    soup = BeautifulSoup(markup, "html.parser")
    return {
        tag["name"].removeprefix("twitter:"): tag["content"]
        for tag in soup.head.find_all("meta")
        if tag.get("name", "").startswith("twitter:")
    }


@pytest.fixture
def twitter_meta():
    """name -> content of every twitter:* meta tag in the head."""
    return _twitter_meta


@pytest.fixture
def parser():
    return SoupHtmlParser()


@pytest.fixture
def make_engine(parser):
    def _make(options):
        return TwitterCard(options, parser=parser)

    return _make


@pytest.fixture
def page():
    return PAGE


@pytest.fixture
def options():
    return normalize_options({"siteurl": "http://example.com", "site": "mysite", "card": "summary"})


@pytest.fixture
def make_context(parser, options):
    def _make(markup=PAGE, *, overrides=None, metadata=None, opts=None):
        return build_context(
            parser.parse(markup),
            overrides=overrides or {},
            metadata=metadata or {},
            options=opts or options,
        )

    return _make
