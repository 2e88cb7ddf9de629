"""Tests for the socialvideo CLI."""

import http.client
import json
from unittest.mock import MagicMock, patch

import pytest

from socialvideo.cli import EXIT_LOOKUP_FAILED, EXIT_UNRECOGNIZED, build_parser, main
from socialvideo.embed import EMBED_STYLE
from socialvideo.exceptions import NetworkError


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_quality_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["thumbnail", "https://youtu.be/x", "--quality", "huge"])


class TestCommands:
    """Tests for each subcommand."""

    def test_detect(self, capsys):
        assert main(["detect", "https://www.youtube.com/watch?v=dQw4w9WgXcQ"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "provider": "YouTube",
            "video_id": "dQw4w9WgXcQ",
            "is_video_file": False,
            "is_social_video": False,
        }

    def test_detect_plain_file(self, capsys):
        assert main(["detect", "https://example.com/clip.mp4"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["provider"] is None
        assert data["video_id"] is None
        assert data["is_video_file"] is True

    def test_detect_unrecognized(self, capsys):
        assert main(["detect", "not a url"]) == EXIT_UNRECOGNIZED
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["provider"] is None
        assert data["is_video_file"] is False
        assert "URL not recognized" in captured.err

    def test_location(self, capsys):
        assert main(["location", "https://dai.ly/x7tgad0"]) == 0
        assert capsys.readouterr().out.strip() == "https://www.dailymotion.com/embed/video/x7tgad0"

    def test_thumbnail_medium(self, capsys):
        assert main(["thumbnail", "https://youtu.be/dQw4w9WgXcQ", "--quality", "medium"]) == 0
        assert (
            capsys.readouterr().out.strip()
            == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"
        )

    def test_embed(self, capsys):
        assert main(["embed", "https://vimeo.com/347119375"]) == 0
        out = capsys.readouterr().out
        assert out.startswith(EMBED_STYLE)
        assert "https://player.vimeo.com/video/347119375" in out

    def test_unrecognized_url(self, capsys):
        assert main(["location", "not a url"]) == EXIT_UNRECOGNIZED
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "URL not recognized" in captured.err

    def test_vimeo_lookup_failure(self, capsys):
        error = NetworkError("Vimeo unreachable", provider="Vimeo", video_id="347119375")
        with patch("socialvideo.derive.fetch_vimeo_metadata", side_effect=error):
            assert main(["thumbnail", "https://vimeo.com/347119375"]) == EXIT_LOOKUP_FAILED
        err = capsys.readouterr().err
        assert "Vimeo unreachable" in err
        assert "internet connection" in err

    def test_vimeo_truncated_response(self, capsys):
        resp = MagicMock()
        resp.__enter__.return_value = resp
        resp.read.side_effect = http.client.IncompleteRead(b"[{", 100)
        with patch("urllib.request.urlopen", return_value=resp):
            assert main(["thumbnail", "https://vimeo.com/347119375"]) == EXIT_LOOKUP_FAILED
        assert "347119375" in capsys.readouterr().err

    def test_invalid_config(self, capsys, monkeypatch):
        monkeypatch.setenv("SOCIALVIDEO_VIMEO_API_BASE", "mirror.local/video")
        assert main(["thumbnail", "https://vimeo.com/347119375"]) == EXIT_LOOKUP_FAILED
        assert "must be an http(s) URL" in capsys.readouterr().err
