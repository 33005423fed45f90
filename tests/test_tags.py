"""Tests for meta tag markup and head insertion."""

from twitter_card.tags import create_tag, insert_tags


class TestCreateTag:
    def test_shape(self):
        assert create_tag("card", "summary") == '<meta name="twitter:card" content="summary" />'

    def test_value_verbatim(self):
        assert create_tag("title", "&lt;b&gt;") == '<meta name="twitter:title" content="&lt;b&gt;" />'


class TestInsertTags:
    def test_appended_in_order(self, parser, page, twitter_meta):
        document = parser.parse(page)
        out = insert_tags(document, {"card": "summary", "site": "@mysite", "title": "Hello"})
        assert list(twitter_meta(out).items()) == [
            ("card", "summary"),
            ("site", "@mysite"),
            ("title", "Hello"),
        ]

    def test_after_existing_head_children(self, parser, page):
        out = insert_tags(parser.parse(page), {"card": "summary"})
        assert out.index("<title>Hello</title>") < out.index('name="twitter:card"')
        assert out.index('name="twitter:card"') < out.index("</head>")

    def test_escaped_value_survives_serialization(self, parser, page):
        out = insert_tags(parser.parse(page), {"title": "&lt;script&gt;"})
        assert 'content="&lt;script&gt;"' in out
        assert "<script>" not in out

    def test_body_untouched(self, parser, page):
        out = insert_tags(parser.parse(page), {"card": "summary"})
        assert 'src="/img/hero.jpg"' in out
        assert '<p class="lead">First paragraph</p>' in out

    def test_head_created_when_missing(self, parser, twitter_meta):
        out = insert_tags(parser.parse("<html><body><p>x</p></body></html>"), {"card": "summary"})
        assert out.startswith("<html><head>")
        assert twitter_meta(out) == {"card": "summary"}

    def test_tags_keep_their_shape(self, parser, page):
        out = insert_tags(parser.parse(page), {"card": "summary", "title": 'say &quot;hi&quot;'})
        assert '<meta name="twitter:card" content="summary" />' in out
        assert '<meta name="twitter:title" content="say &quot;hi&quot;" />' in out

    def test_rest_of_page_byte_identical(self, parser):
        page = (
            "<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n  <title>T</title>\n</head>\n"
            "<body><p>a&nbsp;b &copy; 2024 &amp; c<br></p></body>\n</html>\n"
        )
        out = insert_tags(parser.parse(page), {"card": "summary", "site": "@s"})
        tags = '<meta name="twitter:card" content="summary" /><meta name="twitter:site" content="@s" />'
        assert out == page.replace("</head>", tags + "</head>")

    def test_uppercase_head(self, parser):
        page = "<HTML><HEAD><TITLE>T</TITLE></HEAD><BODY></BODY></HTML>"
        out = insert_tags(parser.parse(page), {"card": "summary"})
        assert out == '<HTML><HEAD><TITLE>T</TITLE><meta name="twitter:card" content="summary" /></HEAD><BODY></BODY></HTML>'

    def test_unclosed_head(self, parser):
        page = "<html><head><title>T</title><body>x</body></html>"
        out = insert_tags(parser.parse(page), {"card": "summary"})
        assert out == '<html><head><meta name="twitter:card" content="summary" /><title>T</title><body>x</body></html>'

    def test_head_inserted_after_html_start_tag(self, parser):
        page = '<!DOCTYPE html>\n<html lang="en">\n<body>x</body></html>'
        out = insert_tags(parser.parse(page), {"card": "summary"})
        assert out == (
            '<!DOCTYPE html>\n<html lang="en"><head><meta name="twitter:card" content="summary" /></head>'
            "\n<body>x</body></html>"
        )
