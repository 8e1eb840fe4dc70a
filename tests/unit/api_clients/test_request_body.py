"""Tests for request body variants."""

from esa_client.api_clients.request_body import MultipartBody, QueryParams


class TestQueryParams:
    def test_none_values_are_omitted(self):
        query = QueryParams({"q": "tag:python", "page": None, "per_page": 20})

        assert query.encode() == [("q", "tag:python"), ("per_page", "20")]

    def test_booleans_are_lowercase(self):
        query = QueryParams({"wip": True, "star": False})

        assert query.encode() == [("wip", "true"), ("star", "false")]

    def test_empty_strings_are_kept(self):
        assert QueryParams({"q": ""}).encode() == [("q", "")]

    def test_empty_mapping(self):
        assert QueryParams().encode() == []


class TestMultipartBody:
    def test_fields_and_files_keep_order(self):
        form = MultipartBody()
        form.add_field("emoji[code]", "party")
        form.add_file("emoji[image]", b"data", filename="party.png", content_type="image/png")

        assert form.field_names() == ["emoji[code]", "emoji[image]"]
        assert form.parts[0] == ("emoji[code]", (None, "party", None))
        assert form.parts[1] == ("emoji[image]", ("party.png", b"data", "image/png"))

    def test_instances_do_not_share_parts(self):
        first = MultipartBody()
        first.add_field("a", "1")

        assert MultipartBody().parts == []
