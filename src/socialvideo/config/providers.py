"""
Provider endpoint definitions.

URL bases used to derive thumbnails, playback locations and embed markup
from a (provider, video id) pair.
"""

# DailyMotion
DAILYMOTION_THUMBNAIL_BASE = "https://www.dailymotion.com/thumbnail/video"
DAILYMOTION_EMBED_BASE = "https://www.dailymotion.com/embed/video"

# Vimeo
VIMEO_PLAYER_BASE = "https://player.vimeo.com/video"

# YouTube
YOUTUBE_THUMBNAIL_BASE = "https://img.youtube.com/vi"
YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed"

# YouTube thumbnail filenames per quality. Other variants exist
# (mqdefault, sddefault, maxresdefault, 0-3.jpg) but are not exposed.
YOUTUBE_THUMBNAIL_FILES: dict[str, str] = {
    "small": "default.jpg",
    "medium": "hqdefault.jpg",
}
