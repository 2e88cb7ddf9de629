"""
Responsive embed markup for video iframes.

Every embed is the shared ``.embed-container`` style block followed by
one container div holding a single iframe:

    <style>...</style>
    <div class='embed-container'><iframe src='...' frameborder='0' ATTRS></iframe></div>

Providers differ only in the iframe src and the attribute set.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

# 16:9 responsive container; shared by every branch
EMBED_STYLE = """<style>
    .embed-container {
        position: relative; padding-bottom: 56.25%; height: 0; overflow: hidden; max-width: 100%;
    }
    .embed-container iframe, .embed-container object, .embed-container embed {
        position: absolute; top: 0; left: 0; width: 100%; height: 100%;
    }
</style>
"""

# DailyMotion and Vimeo players
FULLSCREEN_VENDOR_ATTRIBUTES: tuple[str, ...] = (
    "webkitAllowFullScreen",
    "mozallowfullscreen",
    "allowFullScreen",
)

# YouTube player
FULLSCREEN_ATTRIBUTES: tuple[str, ...] = ("allowfullscreen",)

# Plain video files
FILE_ATTRIBUTES: tuple[str, ...] = ("controls",)


@dataclass(frozen=True)
class EmbedSnippet:
    """One container div with one iframe.

    Attributes:
        src: iframe source URL (escaped on render)
        attributes: Bare boolean attributes appended to the iframe tag
    """

    src: str
    attributes: tuple[str, ...] = ()

    def render(self) -> str:
        attrs = " ".join(("frameborder='0'", *self.attributes))
        src = html.escape(self.src, quote=True)
        return (
            f"<div class='embed-container'>"
            f"<iframe src='{src}' {attrs}></iframe>"
            f"</div>"
        )


def render_embed(src: str, attributes: tuple[str, ...] = ()) -> str:
    """Build the full embed fragment: style block, then the iframe snippet.

    Args:
        src: iframe source URL
        attributes: Bare attributes for the iframe (fullscreen flags, etc.)

    Returns:
        HTML fragment string.
    """
    return EMBED_STYLE + EmbedSnippet(src=src, attributes=attributes).render()
