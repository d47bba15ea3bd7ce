"""
Comment and transcript export to plain-text documents.

Drives the YouTube client across every comment page, optionally fetches the
transcript, and builds one UTF-8 text document per requested content type.
Documents are returned in memory; write_documents() saves them to disk.
"""

import os
import re
import tempfile
import unicodedata
from dataclasses import dataclass

from tqdm import tqdm

from config import CONFIG
from transcript_source import fetch_transcript
from video_id import extract_video_id
from youtube_client import (
    MissingCredential,
    MissingIdentifier,
    build_youtube_service,
    fetch_comments_page,
    fetch_video_details,
)

MODE_COMMENTS = 'comments'
MODE_TRANSCRIPTION = 'transcription'
MODE_BOTH = 'both'
EXPORT_MODES = (MODE_COMMENTS, MODE_TRANSCRIPTION, MODE_BOTH)

# Best-effort tag removal, not an HTML parser: each "<" up to the next ">" is
# dropped; an unterminated "<" is left in place.
MARKUP_PATTERN = re.compile(r'<[^>]*>')
COMBINING_MARKS_PATTERN = re.compile('[\u0300-\u036f]')
UNSAFE_FILENAME_CHARS_PATTERN = re.compile(r'[^A-Za-z0-9_]')


@dataclass(frozen=True)
class DownloadableDocument:
    filename: str
    content: str


# ============================================================================
# TEXT UTILITIES
# ============================================================================

def strip_markup(text):
    """Remove every <...> tag-like span from text."""
    return MARKUP_PATTERN.sub('', text)


def clean_file_name(title):
    """
    Turn a video title into a filesystem-safe, lowercase ASCII name.

    Accents are removed (NFD decomposition, then combining marks dropped),
    every character outside [A-Za-z0-9_] becomes "_", and the result is
    lowercased.

    Example:
        >>> clean_file_name("Café É Ótimo!")
        "cafe_e_otimo_"
    """
    without_diacritics = COMBINING_MARKS_PATTERN.sub('', unicodedata.normalize('NFD', title))
    return UNSAFE_FILENAME_CHARS_PATTERN.sub('_', without_diacritics).lower()


def build_header(video, source_label):
    # Title, description, source URL and separator, each followed by a blank line
    return (
        f"{video.title}\n\n"
        f"{video.description}\n\n"
        f"{source_label} {video.url}\n\n"
        f"{CONFIG['separator']}\n\n"
    )


def format_comments(comments):
    """Render comments as "author: text" lines, replies indented by two spaces."""
    lines = []
    for comment in comments:
        lines.append(f"{comment.author_display_name}: {strip_markup(comment.text_display)}\n")
        if comment.replies is not None:
            for reply in comment.replies:
                lines.append(f"  {reply.author_display_name}: {strip_markup(reply.text_display)}\n")
    return ''.join(lines)


def build_comments_document(video, comments):
    content = build_header(video, CONFIG['comments_source_label']) + format_comments(comments)
    filename = f"{CONFIG['comments_file_label']}{clean_file_name(video.title)}.txt"
    return DownloadableDocument(filename=filename, content=content)


def build_transcription_document(video, transcript):
    content = build_header(video, CONFIG['transcription_source_label']) + transcript
    filename = f"{CONFIG['transcription_file_label']}{clean_file_name(video.title)}.txt"
    return DownloadableDocument(filename=filename, content=content)


# ============================================================================
# COLLECTION
# ============================================================================

def collect_all_comments(api_key, video_id, youtube=None, show_progress=False):
    """
    Fetch every comment page of a video, in order.

    Pages are fetched one after another, each with the token returned by the
    previous one, until a page comes back without a token. There is no page
    limit. Any failure discards the pages collected so far.

    Returns:
        tuple of Comment: All top-level comments in arrival order
    """
    comments = ()  # Accumulated comments, replaced (never mutated) per page
    page_token = None  # Pagination cursor (None for first page)

    with tqdm(desc="Fetching comment pages", unit="page", disable=not show_progress) as progress:
        # Pagination loop: continues until there are no more pages to fetch
        while True:
            page = fetch_comments_page(api_key, video_id, page_token, youtube=youtube)
            comments = comments + page.comments
            progress.update(1)
            progress.set_postfix(comments=len(comments))

            # If next_page_token is absent, we've reached the last page
            if page.next_page_token is None:
                return comments
            page_token = page.next_page_token


def collect_and_format(api_key, identifier, mode=MODE_COMMENTS, youtube=None,
                       transcript_source=None, show_progress=False):
    """
    Fetch a video's data and build the text documents for the requested mode.

    Parameters:
        api_key (str): YouTube Data API v3 key
        identifier (str): Video ID or YouTube URL
        mode (str): 'comments', 'transcription' or 'both'
        youtube (Resource): Optional pre-built API service object
        transcript_source (callable): Returns the transcript text for a video ID
            (default: transcript_source.fetch_transcript)
        show_progress (bool): Display a tqdm bar while paging through comments

    Returns:
        list of DownloadableDocument: Comments document first, then transcription

    Raises:
        MissingCredential, MissingIdentifier, VideoNotFound, RemoteRequestFailed
        ValueError: If mode is not one of EXPORT_MODES
    """
    if mode not in EXPORT_MODES:
        raise ValueError(f"Unknown export mode: {mode!r} (expected one of {', '.join(EXPORT_MODES)})")
    if not api_key:
        raise MissingCredential()
    if not identifier or not identifier.strip():
        raise MissingIdentifier()

    video_id = extract_video_id(identifier.strip())
    if transcript_source is None:
        transcript_source = fetch_transcript
    if youtube is None:
        youtube = build_youtube_service(api_key)

    video = fetch_video_details(api_key, video_id, youtube=youtube)

    documents = []
    if mode in (MODE_COMMENTS, MODE_BOTH):
        comments = collect_all_comments(api_key, video_id, youtube=youtube, show_progress=show_progress)
        documents.append(build_comments_document(video, comments))

    if mode in (MODE_TRANSCRIPTION, MODE_BOTH):
        documents.append(build_transcription_document(video, transcript_source(video_id)))

    return documents


# ============================================================================
# OUTPUT
# ============================================================================

def atomic_write_text(file_path, text):
    """
    Atomically write UTF-8 text to a file using a temporary file and os.replace().

    The target file is never left partially written, even if the program is
    interrupted during the write.
    """
    dir_path = os.path.dirname(file_path) or '.'

    with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', dir=dir_path,
                                     delete=False, newline='') as temp_file:
        temp_path = temp_file.name
        try:
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        except Exception:
            temp_file.close()
            os.unlink(temp_path)
            raise

    os.replace(temp_path, file_path)


def write_documents(documents, output_dir=None):
    """
    Save each document as a .txt file in output_dir (created if missing).

    Returns:
        list of str: Paths of the written files, in document order
    """
    if output_dir is None:
        output_dir = CONFIG['output_dir']
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for document in documents:
        file_path = os.path.join(output_dir, document.filename)
        atomic_write_text(file_path, document.content)
        paths.append(file_path)
    return paths
