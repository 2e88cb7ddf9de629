"""Tests for embed markup rendering."""

from socialvideo.embed import (
    EMBED_STYLE,
    FULLSCREEN_ATTRIBUTES,
    EmbedSnippet,
    render_embed,
)


class TestEmbedSnippet:
    """Tests for EmbedSnippet.render."""

    def test_without_attributes(self):
        snippet = EmbedSnippet(src="https://example.com/v.mp4")
        assert snippet.render() == (
            "<div class='embed-container'>"
            "<iframe src='https://example.com/v.mp4' frameborder='0'></iframe>"
            "</div>"
        )

    def test_attributes_in_order(self):
        snippet = EmbedSnippet(src="https://x.test/v", attributes=("a", "b"))
        assert "frameborder='0' a b></iframe>" in snippet.render()


class TestRenderEmbed:
    """Tests for render_embed."""

    def test_style_precedes_snippet(self):
        html = render_embed("https://www.youtube.com/embed/abc", FULLSCREEN_ATTRIBUTES)
        assert html.startswith(EMBED_STYLE)
        assert html[len(EMBED_STYLE):].startswith("<div class='embed-container'>")

    def test_style_block_defines_container(self):
        assert EMBED_STYLE.startswith("<style>")
        assert ".embed-container {" in EMBED_STYLE
        assert "padding-bottom: 56.25%" in EMBED_STYLE
