"""Tests for SuggestionClient."""

from unittest.mock import MagicMock, patch

import requests

from dictionary_plus.services.suggestion_client import SuggestionClient

GET_PATH = "dictionary_plus.services.suggestion_client.requests.get"


def _make_response(status_code=200, payload=None, json_error=None):
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestFetchSuggestions:
    """Tests for SuggestionClient.fetch_suggestions."""

    def test_success_preserves_server_order(self, test_config):
        """Words come back in relevance order, not sorted."""
        payload = [{"word": "cat", "score": 3}, {"word": "car"}, {"word": "cab"}]
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, payload)):
            assert client.fetch_suggestions("ca") == ["cat", "car", "cab"]

    def test_query_parameters(self, test_config):
        """Prefix and limit are sent as s= and max=."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, [])) as mock_get:
            client.fetch_suggestions("ice cr", limit=5)

        assert mock_get.call_args.args[0] == "https://sug.test/sug"
        assert mock_get.call_args.kwargs["params"] == {"s": "ice cr", "max": 5}
        assert mock_get.call_args.kwargs["timeout"] == 3.0

    def test_default_limit_is_ten(self, test_config):
        """Without a limit, ten suggestions are requested."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, [])) as mock_get:
            client.fetch_suggestions("ca")
        assert mock_get.call_args.kwargs["params"]["max"] == 10

    def test_result_capped_by_limit(self, test_config):
        """A server returning too many items is truncated."""
        payload = [{"word": f"w{i}"} for i in range(20)]
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, payload)):
            assert client.fetch_suggestions("w", limit=3) == ["w0", "w1", "w2"]

    def test_malformed_json_returns_empty(self, test_config):
        """An undecodable body yields an empty list, not an exception."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, json_error=ValueError("bad"))):
            assert client.fetch_suggestions("ca") == []

    def test_non_list_body_returns_empty(self, test_config):
        """A JSON object instead of an array yields an empty list."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, {"word": "cat"})):
            assert client.fetch_suggestions("ca") == []

    def test_items_without_word_skipped(self, test_config):
        """Items lacking a string word are ignored."""
        payload = [{"word": "cat"}, {"score": 1}, "car", {"word": 7}, {"word": "cab"}]
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(200, payload)):
            assert client.fetch_suggestions("ca") == ["cat", "cab"]

    def test_non_2xx_returns_empty(self, test_config):
        """An error status yields an empty list."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, return_value=_make_response(500)):
            assert client.fetch_suggestions("ca") == []

    def test_connection_error_returns_empty(self, test_config):
        """Transport failures are absorbed."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, side_effect=requests.exceptions.ConnectionError):
            assert client.fetch_suggestions("ca") == []

    def test_timeout_returns_empty(self, test_config):
        """Timeouts are absorbed."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH, side_effect=requests.exceptions.Timeout):
            assert client.fetch_suggestions("ca") == []

    def test_blank_prefix_skips_request(self, test_config):
        """No request is sent for a blank prefix or a non-positive limit."""
        client = SuggestionClient(test_config)
        with patch(GET_PATH) as mock_get:
            assert client.fetch_suggestions("  ") == []
            assert client.fetch_suggestions("ca", limit=0) == []
        mock_get.assert_not_called()
