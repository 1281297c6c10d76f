import httpx
import pytest
from unittest.mock import patch

from stockwatch.errors import NotifyError
from stockwatch.notify.discord import DiscordNotifier

CHANNEL_URL = "https://discord.com/api/v10/channels/123456/messages"


def discord_response(status_code: int) -> httpx.Response:
    return httpx.Response(status_code, json={}, request=httpx.Request("POST", CHANNEL_URL))


class TestDiscordNotifier:
    """Unit tests for the Discord REST notifier"""

    @patch("stockwatch.notify.discord.httpx.post")
    def test_send_request_shape(self, mock_post):
        mock_post.return_value = discord_response(200)

        DiscordNotifier("test-token", "123456", timeout_sec=5).send("hello")

        args, kwargs = mock_post.call_args
        assert args == (CHANNEL_URL,)
        assert kwargs["headers"]["Authorization"] == "Bot test-token"
        assert kwargs["json"] == {"content": "hello"}
        assert kwargs["timeout"] == 5

    @patch("stockwatch.notify.discord.httpx.post")
    def test_notify_available_message(self, mock_post):
        mock_post.return_value = discord_response(200)

        DiscordNotifier("test-token", "123456").notify_available("https://a.co/d/XYZ/ref=abc?tag=1")

        content = mock_post.call_args.kwargs["json"]["content"]
        assert content == "🎉 This item is now available! Check it out: https://a.co/d/XYZ"

    @patch("stockwatch.notify.discord.httpx.post")
    def test_error_status_raises_notify_error(self, mock_post):
        mock_post.return_value = discord_response(403)

        with pytest.raises(NotifyError, match="HTTP 403"):
            DiscordNotifier("test-token", "123456").send("hello")

    @patch("stockwatch.notify.discord.httpx.post")
    def test_timeout_raises_notify_error(self, mock_post):
        mock_post.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(NotifyError, match="Timeout"):
            DiscordNotifier("test-token", "123456").send("hello")

    @patch("stockwatch.notify.discord.httpx.post")
    def test_connection_error_raises_notify_error(self, mock_post):
        mock_post.side_effect = httpx.ConnectError("no route")

        with pytest.raises(NotifyError):
            DiscordNotifier("test-token", "123456").send("hello")

    @pytest.mark.parametrize("token,channel_id", [
        ("tokén", "123456"),
        ("test-token", "12\n3456"),
    ])
    @patch("httpx.Client.send")
    def test_malformed_credentials_raise_notify_error(self, mock_send, token, channel_id):
        """Credentials that cannot form a valid request never leak library errors"""
        with pytest.raises(NotifyError):
            DiscordNotifier(token, channel_id).send("hello")

        mock_send.assert_not_called()
