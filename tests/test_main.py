"""
Tests for the command-line front end.
"""

from unittest.mock import MagicMock, patch

import httplib2
import pytest

import main
from config import get_api_key
from text_export import DownloadableDocument
from youtube_client import RemoteRequestFailed, VideoNotFound


@pytest.fixture
def api_key_env(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "ENV_KEY")


def test_get_api_key(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "ENV_KEY")
    assert get_api_key() == "ENV_KEY"
    assert get_api_key("CLI_KEY") == "CLI_KEY"

    monkeypatch.setenv("YOUTUBE_API_KEY", "your_api_key_here")
    assert get_api_key() is None

    monkeypatch.delenv("YOUTUBE_API_KEY")
    assert get_api_key() is None


def test_missing_api_key_exits_with_error(monkeypatch, capsys):
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)

    with patch("main.collect_and_format") as mock_collect:
        assert main.main(["--video", "XYZ"]) == 1

    mock_collect.assert_not_called()
    assert "YouTube API key not found" in capsys.readouterr().out


def test_exports_files(api_key_env, tmp_path, capsys):
    documents = [DownloadableDocument("Comentários_test_video.txt", "content")]

    with patch("main.collect_and_format", return_value=documents) as mock_collect:
        status = main.main(["--video", "https://youtu.be/XYZ", "--mode", "both",
                            "--output-dir", str(tmp_path)])

    assert status == 0
    mock_collect.assert_called_once_with("ENV_KEY", "https://youtu.be/XYZ", mode="both", show_progress=True)
    assert (tmp_path / "Comentários_test_video.txt").read_text(encoding="utf-8") == "content"
    assert "Files written: 1" in capsys.readouterr().out


def test_prompts_for_video_when_not_given(api_key_env, tmp_path):
    with patch("builtins.input", return_value=" XYZ ") as mock_input, \
            patch("main.collect_and_format", return_value=[]) as mock_collect:
        assert main.main(["--api-key", "CLI_KEY", "--output-dir", str(tmp_path)]) == 0

    mock_input.assert_called_once()
    mock_collect.assert_called_once_with("CLI_KEY", "XYZ", mode="comments", show_progress=True)


def test_errors_are_reported(api_key_env, tmp_path, capsys):
    with patch("main.collect_and_format", side_effect=VideoNotFound("XYZ")):
        assert main.main(["--video", "XYZ", "--output-dir", str(tmp_path)]) == 1
    assert "Video not found" in capsys.readouterr().out

    error = RemoteRequestFailed("HttpError 403", reason="commentsDisabled")
    with patch("main.collect_and_format", side_effect=error):
        assert main.main(["--video", "XYZ", "--output-dir", str(tmp_path)]) == 1
    assert "Comments are disabled" in capsys.readouterr().out


def test_invalid_mode_is_rejected(api_key_env):
    with pytest.raises(SystemExit):
        main.main(["--video", "XYZ", "--mode", "audio"])


def test_offline_failure_is_reported_without_traceback(api_key_env, tmp_path, capsys):
    mock_youtube = MagicMock()
    mock_youtube.videos.return_value.list.return_value.execute.side_effect = \
        httplib2.ServerNotFoundError("Unable to find the server at youtube.googleapis.com")

    with patch("text_export.build_youtube_service", return_value=mock_youtube):
        assert main.main(["--video", "XYZ", "--output-dir", str(tmp_path)]) == 1

    assert "Unable to find the server" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []
