"""Reshape tests — upstream schema validation maps mismatches to UpstreamMalformedResponse."""

import pytest

from gateway.core.errors import ErrorKind, UpstreamMalformedResponseError
from gateway.core.reshape import first_or_malformed, parse_upstream
from gateway.schemas.upstream import (
    GeniusSearchResponse,
    MediaInfo,
    NpmSearchResponse,
    Quote,
    YoutubeVideo,
)


def test_parse_valid_npm_response():
    data = {"objects": [{"package": {"name": "left-pad", "version": "1.3.0", "x": 1}}]}
    result = parse_upstream(NpmSearchResponse, data, "npm-registry")
    pkg = result.objects[0].package
    assert pkg.name == "left-pad"
    assert pkg.model_dump()["x"] == 1  # extra fields kept


def test_missing_field_raises_malformed():
    with pytest.raises(UpstreamMalformedResponseError) as exc:
        parse_upstream(NpmSearchResponse, {"total": 0}, "npm-registry")
    assert exc.value.kind == ErrorKind.UPSTREAM_MALFORMED_RESPONSE
    assert "npm-registry" in exc.value.message
    assert "objects" in exc.value.message
    assert exc.value.source == "npm-registry"


def test_non_dict_payload_raises_malformed():
    with pytest.raises(UpstreamMalformedResponseError):
        parse_upstream(Quote, ["not", "a", "dict"], "quotable")


def test_nested_path_reported():
    data = {"response": {"hits": [{"result": {"title": "no url"}}]}}
    with pytest.raises(UpstreamMalformedResponseError) as exc:
        parse_upstream(GeniusSearchResponse, data, "genius")
    assert "response.hits.0.result.url" in exc.value.message


def test_first_or_malformed_empty():
    with pytest.raises(UpstreamMalformedResponseError) as exc:
        first_or_malformed([], "genius", "songs")
    assert exc.value.message == "No songs returned by genius"


def test_first_or_malformed_returns_first():
    assert first_or_malformed(["a", "b"], "src", "items") == "a"


def test_media_info_prefers_direct_url():
    info = MediaInfo.model_validate({
        "url": "https://direct",
        "requested_formats": [{"url": "https://merged"}],
    })
    assert info.download_url() == "https://direct"


def test_media_info_falls_back_to_requested_formats():
    info = MediaInfo.model_validate({"requested_formats": [{"url": "https://video"}]})
    assert info.download_url() == "https://video"


def test_media_info_without_url():
    assert MediaInfo.model_validate({"title": "x"}).download_url() is None


def test_youtube_video_payload_builds_watch_url():
    video = YoutubeVideo.model_validate({"id": "abc", "title": "T", "duration": 61.0})
    payload = video.to_payload()
    assert payload["videoId"] == "abc"
    assert payload["url"] == "https://www.youtube.com/watch?v=abc"
    assert payload["seconds"] == 61.0
