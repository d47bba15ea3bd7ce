"""
YouTube Data API v3 client.

Two read operations are exposed: video metadata for a single video and one
page of comment threads (top-level comments with their inlined replies).
Both require an API key and fail before any request is made when it is
missing. Nothing is retried; every failure is raised to the caller.
"""

import json
from dataclasses import dataclass
from typing import Optional, Tuple

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiError
from googleapiclient.errors import HttpError

from config import CONFIG


# ============================================================================
# ERRORS
# ============================================================================

class ExtractorError(Exception):
    """Base class for every error raised while exporting a video."""


class MissingCredential(ExtractorError):
    """No YouTube Data API key was supplied."""

    def __init__(self):
        super().__init__("YouTube API key is not provided.")


class MissingIdentifier(ExtractorError):
    """No video ID or URL was supplied."""

    def __init__(self):
        super().__init__("Video ID or URL is not provided.")


class VideoNotFound(ExtractorError):
    """The API returned no video for the requested ID."""

    def __init__(self, video_id):
        self.video_id = video_id
        super().__init__(f"Video not found or invalid video ID: {video_id}")


class RemoteRequestFailed(ExtractorError):
    """A request to a remote service failed (transport or API error)."""

    def __init__(self, message, reason=None):
        self.message = message
        self.reason = reason
        super().__init__(message)


# ============================================================================
# DATA MODEL
# ============================================================================

@dataclass(frozen=True)
class Comment:
    id: str
    author_display_name: str
    author_profile_image_url: str
    text_display: str
    published_at: str
    like_count: int
    # None means "no replies"; never an empty tuple
    replies: Optional[Tuple["Comment", ...]] = None


@dataclass(frozen=True)
class VideoDetails:
    title: str
    url: str
    description: str


@dataclass(frozen=True)
class PageResult:
    comments: Tuple[Comment, ...]
    next_page_token: Optional[str] = None


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def create_video_link(video_id):
    """
    Create the canonical YouTube watch URL for a video ID.

    Example:
        >>> create_video_link("dQw4w9WgXcQ")
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    """
    return f"https://www.youtube.com/watch?v={video_id}"


def parse_http_error_reason(http_error):
    """
    Extract the reason from an HttpError by parsing its content.

    The HttpError object contains a content attribute with JSON-encoded error details.

    Returns:
        str or None: The error reason (e.g., 'commentsDisabled', 'quotaExceeded') or None if not found
    """
    try:
        error_content = json.loads(http_error.content)
        errors = error_content.get('error', {}).get('errors', [{}])
        if errors:
            return errors[0].get('reason')
        return None
    except (json.JSONDecodeError, AttributeError, IndexError, KeyError, TypeError, ValueError):
        return None


def build_youtube_service(api_key):
    """Build the YouTube Data API resource for the given API key."""
    if not api_key:
        raise MissingCredential()
    return build(CONFIG['api_service'], CONFIG['api_version'], developerKey=api_key)


def _execute(request):
    """Execute an API request, converting any failure to RemoteRequestFailed."""
    try:
        return request.execute()
    except HttpError as e:
        raise RemoteRequestFailed(str(e), reason=parse_http_error_reason(e)) from e
    except (GoogleApiError, httplib2.HttpLib2Error, OSError) as e:
        # Transport failures (DNS, connection, redirects) carry no API reason
        raise RemoteRequestFailed(str(e)) from e


def _comment_from_snippet(comment_id, snippet, replies=None):
    # Top-level comments and replies share the same snippet fields
    return Comment(
        id=comment_id,
        author_display_name=snippet.get('authorDisplayName', ''),
        author_profile_image_url=snippet.get('authorProfileImageUrl', ''),
        text_display=snippet.get('textDisplay', ''),
        published_at=snippet.get('publishedAt', ''),
        like_count=int(snippet.get('likeCount', 0)),
        replies=replies,
    )


# ============================================================================
# API OPERATIONS
# ============================================================================

def fetch_video_details(api_key, video_id, youtube=None):
    """
    Retrieve title and description of a single video.

    The watch URL is always built from the video ID, never taken from the API.

    Parameters:
        api_key (str): YouTube Data API v3 key
        video_id (str): The video ID
        youtube (Resource): Optional pre-built API service object

    Returns:
        VideoDetails: The video's metadata

    Raises:
        MissingCredential: If api_key is empty (no request is made)
        VideoNotFound: If the API returns no items
        RemoteRequestFailed: For transport or API errors
    """
    if not api_key:
        raise MissingCredential()
    if youtube is None:
        youtube = build_youtube_service(api_key)

    response = _execute(youtube.videos().list(part="snippet", id=video_id))

    items = response.get('items') or []
    if not items:
        raise VideoNotFound(video_id)

    snippet = items[0]['snippet']
    return VideoDetails(
        title=snippet.get('title', ''),
        url=create_video_link(video_id),
        description=snippet.get('description', ''),
    )


def fetch_comments_page(api_key, video_id, page_token=None, youtube=None):
    """
    Retrieve one page of comment threads for a video.

    Requests the largest page size the API allows. Each thread's top-level
    comment becomes a Comment; replies embedded in the thread are attached
    as a flat tuple (replies never nest).

    Parameters:
        api_key (str): YouTube Data API v3 key
        video_id (str): The video ID to fetch comments from
        page_token (str): Pagination cursor (None for the first page)
        youtube (Resource): Optional pre-built API service object

    Returns:
        PageResult: The page's comments and the next page token (None on the last page)

    Raises:
        MissingCredential: If api_key is empty (no request is made)
        RemoteRequestFailed: For transport or API errors
    """
    if not api_key:
        raise MissingCredential()
    if youtube is None:
        youtube = build_youtube_service(api_key)

    response = _execute(
        youtube.commentThreads().list(
            part="snippet,replies",
            videoId=video_id,
            maxResults=CONFIG['max_results_comments'],
            pageToken=page_token,
        )
    )

    comments = []
    for thread in response.get('items', []):
        # Structure: thread['snippet']['topLevelComment']['snippet']
        top_level_comment = thread['snippet']['topLevelComment']['snippet']

        # Replies are only embedded when the thread has some; an absent
        # 'replies' part and an empty list both map to None
        replies = None
        reply_items = (thread.get('replies') or {}).get('comments') or []
        if reply_items:
            replies = tuple(
                _comment_from_snippet(reply.get('id', ''), reply['snippet'])
                for reply in reply_items
            )

        comments.append(_comment_from_snippet(thread.get('id', ''), top_level_comment, replies))

    return PageResult(
        comments=tuple(comments),
        next_page_token=response.get('nextPageToken') or None,
    )
