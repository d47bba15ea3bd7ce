"""
Configuration for the YouTube comment and transcript exporter.

Settings live in a single CONFIG dictionary. The YouTube Data API key is read
from the environment (optionally via a .env file) and can be overridden from
the command line.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# ============================================================================
# CONFIGURATION
# ============================================================================

CONFIG = {
    'output_dir': 'output',              # Directory for the exported .txt files
    'api_service': 'youtube',            # Discovery service name
    'api_version': 'v3',                 # YouTube Data API version
    'max_results_comments': 100,         # Comment threads per API call (max 100 per YouTube API)
    'transcript_languages': ['pt', 'en'],  # Transcript language preference, in order
    'separator': '-' * 55,
    'comments_source_label': 'Comentários extraídos de:',
    'transcription_source_label': 'Transcrição extraída de:',
    'comments_file_label': 'Comentários_',
    'transcription_file_label': 'Transcrição_',
}

# Value shipped in .env.example; treated the same as a missing key
API_KEY_PLACEHOLDER = "your_api_key_here"


def get_api_key(override=None):
    """
    Resolve the YouTube Data API key.

    Parameters:
        override (str): Key passed explicitly (e.g. --api-key); wins over the environment

    Returns:
        str or None: The API key, or None when it is not configured
    """
    api_key = override or os.getenv("YOUTUBE_API_KEY")
    if not api_key or api_key == API_KEY_PLACEHOLDER:
        return None
    return api_key
