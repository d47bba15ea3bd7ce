"""
Video identifier extraction.

Accepts either a bare YouTube video ID or a full video URL and returns the
video ID. Anything that is not a recognised YouTube URL is returned as-is.
"""

from urllib.parse import urlparse, parse_qs

YOUTUBE_HOSTS = ('youtube.com', 'youtu.be')
SHORT_LINK_HOST = 'youtu.be'


def extract_video_id(value):
    """
    Extract the video ID from a YouTube URL, or return the input unchanged.

    Supported formats:
    - https://www.youtube.com/watch?v=VIDEO_ID (any host containing youtube.com)
    - https://youtu.be/VIDEO_ID (short link)
    - VIDEO_ID (returned unchanged)

    No validation of the ID itself is done; a bad ID only fails once the API
    is queried.

    Example:
        >>> extract_video_id("https://youtu.be/ABC123")
        "ABC123"
    """
    try:
        parsed_url = urlparse(value)
    except (ValueError, TypeError, AttributeError):
        # Not a URL - treat it as an ID
        return value

    hostname = parsed_url.hostname or ''
    if not parsed_url.scheme or not hostname:
        return value

    if any(host in hostname for host in YOUTUBE_HOSTS):
        query = parse_qs(parsed_url.query)
        if query.get('v'):
            return query['v'][0]
        if hostname == SHORT_LINK_HOST:
            # Short links carry the ID as the first path segment: youtu.be/VIDEO_ID
            short_id = parsed_url.path.lstrip('/').split('/')[0]
            if short_id:
                return short_id

    return value
