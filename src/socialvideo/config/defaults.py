"""
Default configuration values for socialvideo.

Note: These can be overridden via config/loader.py which supports
environment variables, project config, and user config.
"""

# Vimeo simple API (v2), keyed by numeric video id: {base}/{id}.json
VIMEO_API_BASE = "https://vimeo.com/api/v2/video"

# Timeouts (seconds)
METADATA_TIMEOUT = 30
