"""
Tests for the leaderboard HTTP client.

requests is mocked; no server is needed.
"""

import sys
import os
import threading
from unittest.mock import MagicMock

import pytest
import requests

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_controller import SessionEnded  # noqa: E402
from services.leaderboard_client import LeaderboardClient  # noqa: E402


def make_response(status=200, payload=None):
    response = MagicMock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status} error")
    return response


@pytest.fixture
def http():
    return MagicMock()


@pytest.fixture
def client(http):
    client = LeaderboardClient(base_url="http://scores.test/", session=http)
    yield client
    client.close()


class TestFetchHighScores:
    """Tests for fetching the leaderboard."""

    def test_returns_and_caches_scores(self, client, http):
        http.get.return_value = make_response(payload=[
            {'name': 'Alice', 'score': 30},
            {'name': 'Bob', 'score': 20},
        ])

        scores = client.fetch_high_scores()

        assert scores == [{'name': 'Alice', 'score': 30}, {'name': 'Bob', 'score': 20}]
        assert client.get_cached_scores() == scores
        http.get.assert_called_once_with("http://scores.test/api/getHighScores", timeout=10)

    def test_network_error_keeps_stale_data(self, client, http):
        http.get.return_value = make_response(payload=[{'name': 'Alice', 'score': 30}])
        client.fetch_high_scores()

        http.get.side_effect = requests.exceptions.ConnectionError("down")
        assert client.fetch_high_scores() == [{'name': 'Alice', 'score': 30}]

    def test_server_error_returns_empty_when_nothing_cached(self, client, http):
        http.get.return_value = make_response(status=500, payload={'error': 'boom'})
        assert client.fetch_high_scores() == []

    def test_unexpected_payload_ignored(self, client, http):
        http.get.return_value = make_response(payload={'error': 'nope'})
        assert client.fetch_high_scores() == []

    def test_truncates_to_top_five(self, client, http):
        rows = [{'name': f"p{i}", 'score': 100 - i} for i in range(8)]
        http.get.return_value = make_response(payload=rows)
        assert len(client.fetch_high_scores()) == 5


class TestSubmitScore:
    """Tests for submitting a score."""

    def test_posts_and_refreshes(self, client, http):
        http.post.return_value = make_response(status=201, payload={'name': 'Alice', 'score': 30})
        http.get.return_value = make_response(payload=[{'name': 'Alice', 'score': 30}])

        assert client.submit_score("Alice", 30) is True

        args, kwargs = http.post.call_args
        assert args[0] == "http://scores.test/api/saveScore"
        assert kwargs['json'] == {'name': 'Alice', 'score': 30}
        assert {'name': 'Alice', 'score': 30} in client.get_cached_scores()

    def test_non_ok_status_is_failure(self, client, http):
        http.post.return_value = make_response(status=500)
        assert client.submit_score("Alice", 30) is False
        http.get.assert_not_called()

    def test_network_error_is_failure(self, client, http):
        http.post.side_effect = requests.exceptions.Timeout("slow")
        assert client.submit_score("Alice", 30) is False

    def test_session_ended_submits_in_background(self, client, http):
        http.post.return_value = make_response(status=201)
        http.get.return_value = make_response(payload=[])

        future = client.handle_session_ended(SessionEnded(player_name="Alice", final_score=30))

        assert future.result(timeout=5) is True
        assert http.post.call_args[1]['json'] == {'name': 'Alice', 'score': 30}

    def test_default_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("LEADERBOARD_API_URL", "http://env.test")
        client = LeaderboardClient(session=MagicMock())
        try:
            assert client.base_url == "http://env.test"
        finally:
            client.close()


class TestFetchHighScoresAsync:
    """Tests for the background leaderboard fetch."""

    def test_fills_cache_off_the_calling_thread(self, client, http):
        started = threading.Event()
        release = threading.Event()

        def slow_get(url, timeout):
            started.set()
            release.wait(timeout=5)
            return make_response(payload=[{'name': 'Alice', 'score': 30}])

        http.get.side_effect = slow_get

        future = client.fetch_high_scores_async()

        # The caller gets control back while the request is still in flight
        assert started.wait(timeout=5)
        assert not future.done()
        assert client.get_cached_scores() == []

        release.set()
        assert future.result(timeout=5) == [{'name': 'Alice', 'score': 30}]
        assert client.get_cached_scores() == [{'name': 'Alice', 'score': 30}]

    def test_failure_is_contained(self, client, http):
        http.get.side_effect = requests.exceptions.ConnectionError("down")
        assert client.fetch_high_scores_async().result(timeout=5) == []
