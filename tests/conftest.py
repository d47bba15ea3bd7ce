"""
Shared fixtures for the exporter tests. The YouTube API resource is always
mocked; no test touches the network.
"""

from unittest.mock import MagicMock

import pytest


def make_snippet(author, text, published_at="2024-01-01T00:00:00Z", likes=0):
    return {
        "authorDisplayName": author,
        "authorProfileImageUrl": f"https://yt3.ggpht.com/{author}.jpg",
        "textDisplay": text,
        "publishedAt": published_at,
        "likeCount": likes,
    }


def make_thread(thread_id, author, text, replies=None):
    """Build a commentThreads item the way the API returns it."""
    thread = {
        "id": thread_id,
        "snippet": {
            "topLevelComment": {"id": thread_id, "snippet": make_snippet(author, text)},
            "totalReplyCount": len(replies or []),
        },
    }
    if replies is not None:
        thread["replies"] = {
            "comments": [
                {"id": f"{thread_id}.{i}", "snippet": make_snippet(reply_author, reply_text)}
                for i, (reply_author, reply_text) in enumerate(replies)
            ]
        }
    return thread


@pytest.fixture
def mock_youtube():
    """A MagicMock standing in for the googleapiclient YouTube resource."""
    youtube = MagicMock()
    youtube.videos.return_value.list.return_value.execute.return_value = {
        "items": [{"snippet": {"title": "Test Video", "description": "Desc"}}]
    }
    youtube.commentThreads.return_value.list.return_value.execute.return_value = {"items": []}
    return youtube


def set_comment_pages(youtube, *pages):
    """Make successive commentThreads().list().execute() calls return pages in order."""
    youtube.commentThreads.return_value.list.return_value.execute.side_effect = list(pages)
