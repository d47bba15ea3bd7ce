"""
Transcript retrieval for a single video using youtube-transcript-api.

The YouTube Data API does not expose transcripts, so captions are read
through youtube-transcript-api and rendered as "[mm:ss] text" lines.
"""

from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

from config import CONFIG
from youtube_client import RemoteRequestFailed

TRANSCRIPT_UNAVAILABLE = 'transcriptUnavailable'


def format_timestamp(seconds):
    """Format seconds as hh:mm:ss or mm:ss."""
    total = int(round(seconds))
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60
    if h > 0:
        return f"{h:02d}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"


def format_transcript(snippets):
    """Render transcript snippets as one "[timestamp] text" line each."""
    lines = []
    for snippet in snippets:
        text = snippet.text.replace("\n", " ").strip()
        lines.append(f"[{format_timestamp(snippet.start)}] {text}")
    return "\n".join(lines)


def fetch_transcript(video_id, languages=None, api=None):
    """
    Fetch and render the transcript of a video.

    Parameters:
        video_id (str): The video ID
        languages (list): Language codes in order of preference (default: from CONFIG)
        api (YouTubeTranscriptApi): Optional pre-built client

    Returns:
        str: The transcript, one timestamped line per caption snippet

    Raises:
        RemoteRequestFailed: If no transcript can be retrieved
    """
    if api is None:
        api = YouTubeTranscriptApi()
    if languages is None:
        languages = CONFIG['transcript_languages']

    try:
        fetched = api.fetch(video_id, languages=languages)
    except CouldNotRetrieveTranscript as e:
        raise RemoteRequestFailed(str(e), reason=TRANSCRIPT_UNAVAILABLE) from e
    except OSError as e:
        raise RemoteRequestFailed(str(e)) from e

    return format_transcript(fetched)
