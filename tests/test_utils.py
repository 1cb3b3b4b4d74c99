"""Tests for video ID extraction."""

import pytest

from yt_transcript_server.errors import InvalidInputError
from yt_transcript_server.utils import extract_video_id


class TestExtractVideoId:
    def test_standard_url(self):
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_url_with_params(self):
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10s") == "dQw4w9WgXcQ"

    def test_v_not_first_param(self):
        url = "https://www.youtube.com/watch?feature=player_embedded&v=dQw4w9WgXcQ"
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    def test_short_url(self):
        assert extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_short_url_with_params(self):
        assert extract_video_id("https://youtu.be/dQw4w9WgXcQ?si=abc&t=42") == "dQw4w9WgXcQ"

    def test_embed_url(self):
        assert extract_video_id("https://www.youtube.com/embed/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_v_path_url(self):
        assert extract_video_id("https://www.youtube.com/v/dQw4w9WgXcQ?version=3") == "dQw4w9WgXcQ"

    def test_e_path_url(self):
        assert extract_video_id("http://youtube.com/e/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_channel_path_url(self):
        url = "https://www.youtube.com/user/SomeChannel#p/a/u/1/dQw4w9WgXcQ"
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    def test_mobile_host(self):
        assert extract_video_id("https://m.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_url_in_text(self):
        assert extract_video_id("watch this: https://youtu.be/dQw4w9WgXcQ now") == "dQw4w9WgXcQ"

    def test_id_with_dash_and_underscore(self):
        assert extract_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"

    @pytest.mark.parametrize("url", [
        "https://google.com",
        "not-a-url",
        "dQw4w9WgXcQ",
        "https://youtu.be/abc",
        "https://vimeo.com/123456789",
        "undefined",
        "",
    ])
    def test_invalid_url(self, url):
        with pytest.raises(InvalidInputError, match="Invalid YouTube URL"):
            extract_video_id(url)
