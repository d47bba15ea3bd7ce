"""
Tests for video ID extraction.
"""

import pytest

from video_id import extract_video_id


@pytest.mark.parametrize("value", ["ABC123", "dQw4w9WgXcQ", "", "not a url", "a:b"])
def test_plain_id_is_returned_unchanged(value):
    assert extract_video_id(value) == value


def test_watch_url():
    assert extract_video_id("https://www.youtube.com/watch?v=ABC123") == "ABC123"


def test_watch_url_with_extra_parameters():
    assert extract_video_id("https://m.youtube.com/watch?feature=share&v=ABC123&t=42") == "ABC123"


def test_short_link():
    assert extract_video_id("https://youtu.be/ABC123") == "ABC123"


def test_short_link_with_query():
    assert extract_video_id("https://youtu.be/ABC123?si=xyz") == "ABC123"


def test_youtube_url_without_video_is_returned_unchanged():
    url = "https://www.youtube.com/@somechannel"
    assert extract_video_id(url) == url


def test_other_host_is_returned_unchanged():
    url = "https://example.com/watch?v=ABC123"
    assert extract_video_id(url) == url


def test_unparseable_url_does_not_raise():
    value = "http://[invalid"
    assert extract_video_id(value) == value


def test_short_link_uses_first_path_segment():
    assert extract_video_id("https://youtu.be/ABC123/extra") == "ABC123"


@pytest.mark.parametrize("url", ["https://youtu.be/", "https://youtu.be"])
def test_short_link_without_id_is_returned_unchanged(url):
    assert extract_video_id(url) == url
