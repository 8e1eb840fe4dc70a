"""Tests for emoji uploads sent as multipart forms."""

import pytest

from esa_client import ConfigurationError, CreateEmojiParams, EsaClient


class TestCreateEmoji:
    @pytest.mark.asyncio
    async def test_upload_with_image_file(self, esa_client, mock_api):
        mock_api.add_response(201, json={"code": "party_parrot"})

        result = await esa_client.create_emoji(
            CreateEmojiParams(
                code="party_parrot",
                image=b"\x89PNG fake image",
                image_filename="parrot.png",
                image_content_type="image/png",
            )
        )

        assert result == {"code": "party_parrot"}
        request = mock_api.last_request
        assert request.method == "POST"
        assert request.url.path == "/v1/teams/test-team/emojis"
        assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
        assert b'name="emoji[code]"' in request.content
        assert b"party_parrot" in request.content
        assert b'name="emoji[image]"; filename="parrot.png"' in request.content
        assert b"\x89PNG fake image" in request.content
        assert b"emoji[origin_code]" not in request.content

    @pytest.mark.asyncio
    async def test_alias_of_existing_emoji(self, esa_client, mock_api):
        await esa_client.create_emoji({"code": "yay", "origin_code": "tada"})

        content = mock_api.last_request.content
        assert mock_api.last_request.headers["content-type"].startswith(
            "multipart/form-data"
        )
        assert b'name="emoji[code]"' in content
        assert b'name="emoji[origin_code]"' in content
        assert b"tada" in content
        assert b"emoji[image]" not in content

    @pytest.mark.asyncio
    async def test_image_given_as_string_is_a_plain_field(self, esa_client, mock_api):
        await esa_client.create_emoji(
            {"code": "logo", "image": "data:image/png;base64,AAAA"}
        )

        content = mock_api.last_request.content
        assert b'name="emoji[image]"\r\n' in content
        assert b"filename=" not in content
        assert b"data:image/png;base64,AAAA" in content

    @pytest.mark.asyncio
    async def test_team_override(self, teamless_client, mock_api):
        await teamless_client.create_emoji({"code": "ok"}, team_name="docs")

        assert mock_api.last_request.url.path == "/v1/teams/docs/emojis"

    def test_missing_team_fails_before_sending(self, mock_api):
        client = EsaClient(access_token="test-token", transport=mock_api.transport)

        with pytest.raises(ConfigurationError, match="Team name is required"):
            client.create_emoji({"code": "ok"})

        assert mock_api.requests == []

    def test_empty_team_override_does_not_count(self, mock_api):
        client = EsaClient(access_token="test-token", transport=mock_api.transport)

        with pytest.raises(ConfigurationError):
            client.create_emoji({"code": "ok"}, team_name="")

        assert mock_api.requests == []
