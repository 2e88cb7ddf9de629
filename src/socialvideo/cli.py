#!/usr/bin/env python3
"""
socialvideo CLI - Detect video providers and build embeds from URLs.

Usage:
    socialvideo detect "https://youtube.com/watch?v=VIDEO_ID"
    socialvideo thumbnail "https://vimeo.com/VIDEO_ID"
    socialvideo location "https://dai.ly/VIDEO_ID"
    socialvideo embed "https://example.com/clip.mp4"
"""

import argparse
import json
import logging
import sys

from socialvideo.derive import (
    get_embed_video,
    get_video_location,
    get_video_thumbnail_by_url,
)
from socialvideo.detect import detect, is_social_video, is_video_file
from socialvideo.exceptions import MetadataError, SocialVideoError
from socialvideo.models.video_reference import ThumbnailQuality

EXIT_UNRECOGNIZED = 1
EXIT_LOOKUP_FAILED = 2


def _emit(value: str | None, url: str) -> int:
    if value is None:
        print(f"ERROR: URL not recognized: {url}", file=sys.stderr)
        return EXIT_UNRECOGNIZED
    print(value)
    return 0


def _cmd_detect(args) -> int:
    """Handle the detect subcommand.

    Always prints the JSON report; exits non-zero when the URL is neither
    a provider URL nor a plain video file.
    """
    ref = detect(args.url)
    video_file = is_video_file(args.url)
    print(
        json.dumps(
            {
                "provider": ref.provider.value if ref.provider else None,
                "video_id": ref.video_id,
                "is_video_file": video_file,
                "is_social_video": is_social_video(args.url),
            },
            indent=2,
        )
    )
    if not ref.is_recognized and not video_file:
        print(f"ERROR: URL not recognized: {args.url}", file=sys.stderr)
        return EXIT_UNRECOGNIZED
    return 0


def _cmd_thumbnail(args) -> int:
    """Handle the thumbnail subcommand."""
    return _emit(get_video_thumbnail_by_url(args.url, args.quality), args.url)


def _cmd_location(args) -> int:
    """Handle the location subcommand."""
    return _emit(get_video_location(args.url), args.url)


def _cmd_embed(args) -> int:
    """Handle the embed subcommand."""
    return _emit(get_embed_video(args.url), args.url)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="socialvideo",
        description="Detect YouTube, Vimeo and DailyMotion URLs and derive embeds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s detect "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    %(prog)s thumbnail "https://youtu.be/dQw4w9WgXcQ" --quality medium
    %(prog)s location "https://www.dailymotion.com/video/x7tgad0"
    %(prog)s embed "https://vimeo.com/channels/staffpicks/12345678"
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser(
        "detect",
        help="Show the detected provider and video id as JSON",
    )
    detect_parser.add_argument("url", help="Video URL")
    detect_parser.set_defaults(func=_cmd_detect)

    thumb_parser = subparsers.add_parser(
        "thumbnail",
        help="Print the thumbnail URL (Vimeo requires network access)",
    )
    thumb_parser.add_argument("url", help="Video URL")
    thumb_parser.add_argument(
        "--quality",
        choices=[q.value for q in ThumbnailQuality],
        default=ThumbnailQuality.SMALL.value,
        help="YouTube thumbnail size (default: small)",
    )
    thumb_parser.set_defaults(func=_cmd_thumbnail)

    location_parser = subparsers.add_parser(
        "location",
        help="Print the playable location URL",
    )
    location_parser.add_argument("url", help="Video URL")
    location_parser.set_defaults(func=_cmd_location)

    embed_parser = subparsers.add_parser(
        "embed",
        help="Print responsive embed HTML",
    )
    embed_parser.add_argument("url", help="Video URL")
    embed_parser.set_defaults(func=_cmd_embed)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        return args.func(args)
    except MetadataError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        if e.suggestion:
            print(f"  {e.suggestion}", file=sys.stderr)
        return EXIT_LOOKUP_FAILED
    except SocialVideoError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_LOOKUP_FAILED


if __name__ == "__main__":
    sys.exit(main())
