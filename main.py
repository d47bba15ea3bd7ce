"""
YouTube Comment & Transcript Export Tool

This script exports the comments (with replies) and/or the transcript of a
single YouTube video to plain-text files, using the YouTube Data API v3.
"""

# ============================================================================
# IMPORTS
# ============================================================================

import argparse
import sys

from config import CONFIG, get_api_key
from text_export import EXPORT_MODES, MODE_COMMENTS, collect_and_format, write_documents
from youtube_client import ExtractorError, RemoteRequestFailed


def print_missing_api_key_help():
    """Explain how to configure the YouTube Data API key."""
    print("=" * 70)
    print("ERROR: YouTube API key not found or not configured properly")
    print("=" * 70)
    print()
    print("Please follow these steps:")
    print("1. Copy .env.example to .env")
    print("   $ cp .env.example .env")
    print()
    print("2. Get your API key from Google Cloud Console:")
    print("   https://console.cloud.google.com/apis/credentials")
    print()
    print("3. Edit .env and add your API key:")
    print("   YOUTUBE_API_KEY=your_actual_api_key_here")
    print()
    print("   ...or pass it directly with --api-key")
    print()
    print("4. Make sure YouTube Data API v3 is enabled in your project")
    print("=" * 70)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Export the comments and/or transcript of a YouTube video to .txt files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode (prompts for the video)
  python main.py

  # Comments of a video, by URL or by ID
  python main.py --video "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
  python main.py --video dQw4w9WgXcQ

  # Comments and transcript, with an explicit API key
  python main.py --video dQw4w9WgXcQ --mode both --api-key "YOUR_KEY"
        """
    )
    parser.add_argument(
        '--video',
        type=str,
        help='YouTube video ID or URL (e.g., https://youtu.be/dQw4w9WgXcQ)'
    )
    parser.add_argument(
        '--api-key',
        type=str,
        help='YouTube Data API v3 key (overrides .env file)'
    )
    parser.add_argument(
        '--mode',
        choices=EXPORT_MODES,
        default=MODE_COMMENTS,
        help='What to export (default: comments)'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default=CONFIG['output_dir'],
        help=f"Directory for the exported files (default: {CONFIG['output_dir']})"
    )
    return parser


def main(argv=None):
    """
    Run the exporter.

    Returns:
        int: Process exit status (0 on success, 1 on error)
    """
    args = build_parser().parse_args(argv)

    api_key = get_api_key(args.api_key)
    if not api_key:
        print_missing_api_key_help()
        return 1

    # Step 1: User Input (Interactive or CLI)
    print()
    if args.video:
        video = args.video.strip()
    else:
        video = input("Enter the YouTube video ID or URL: ").strip()
    print(f"Processing video: {video}")
    print()

    # Step 2: Fetch and Format
    try:
        documents = collect_and_format(api_key, video, mode=args.mode, show_progress=True)
    except RemoteRequestFailed as e:
        print(f"Error: {e.message}")
        if e.reason == 'quotaExceeded':
            print("API quota exceeded. Quota resets at midnight Pacific Time (PT).")
        elif e.reason == 'commentsDisabled':
            print("Comments are disabled for this video.")
        return 1
    except ExtractorError as e:
        print(f"Error: {e}")
        return 1

    # Step 3: Save Files
    paths = write_documents(documents, args.output_dir)

    print()
    print("=" * 70)
    print("Export complete!")
    print("=" * 70)
    print(f"Files written: {len(paths)}")
    for path in paths:
        print(f"  {path}")
    print("=" * 70)
    return 0


# ============================================================================
# MAIN EXECUTION
# ============================================================================

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nScript interrupted by user. Nothing was saved.")
        sys.exit(0)
