"""
Unit tests for Pydantic models.
"""
import pytest

from app.models import (
    FailureReason,
    PlaylistItemsResponse,
    PlaylistMetadata,
    SearchOutcome,
    SearchState,
    VideosResponse,
)


def test_playlist_items_response_parses_api_payload():
    data = {
        "kind": "youtube#playlistItemListResponse",
        "nextPageToken": "CDIQAA",
        "items": [{"contentDetails": {"videoId": "abc", "videoPublishedAt": "2020-01-01T00:00:00Z"}}],
    }
    response = PlaylistItemsResponse.model_validate(data)
    assert response.next_page_token == "CDIQAA"
    assert response.items[0].content_details.video_id == "abc"


def test_playlist_items_response_last_page():
    response = PlaylistItemsResponse.model_validate({"items": []})
    assert response.next_page_token is None
    assert response.items == []


def test_video_without_content_details_has_no_duration():
    response = VideosResponse.model_validate({"items": [{"id": "abc"}]})
    assert response.items[0].duration is None


def test_playlist_metadata_immutable():
    """Test that PlaylistMetadata is immutable (frozen)."""
    metadata = PlaylistMetadata(id="PL1", title="Title")
    assert metadata.description == ""
    assert metadata.thumbnail_url == ""
    with pytest.raises(Exception):  # ValidationError for frozen model
        metadata.title = "Changed"


def test_search_outcome_failed():
    outcome = SearchOutcome.failed(FailureReason.FETCH_FAILED, "nope", playlist_id="PL1")
    assert outcome.state == SearchState.FAILED
    assert outcome.result is None
    assert outcome.error.reason == FailureReason.FETCH_FAILED


def test_search_outcome_in_progress_rejects_terminal_state():
    with pytest.raises(ValueError):
        SearchOutcome.in_progress(SearchState.DONE)


def test_search_state_is_terminal():
    assert SearchState.DONE.is_terminal
    assert SearchState.FAILED.is_terminal
    assert not SearchState.FETCHING_DURATIONS.is_terminal
