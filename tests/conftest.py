"""
Shared test fixtures and configuration for the AnimeApi test suite.

This module provides:
- Raw API records (show, movie, catalog page)
- Mock HTTP responses for requests.get
- Repository cleanup between tests
"""

from unittest.mock import Mock

import pytest

from services.repository import Repository


# ========== Repository Fixtures ==========


@pytest.fixture(autouse=True)
def reset_repository():
    """Auto-reset Repository before each test to prevent cross-test pollution."""
    repo = Repository()
    repo.clear()
    yield
    repo.clear()


# ========== Sample Data Fixtures ==========


@pytest.fixture
def raw_show():
    """Realistic raw detail record for a series."""
    return {
        "_id": "5114",
        "slug": "fullmetal-alchemist-brotherhood",
        "title": "Fullmetal Alchemist: Brotherhood",
        "year": "2009",
        "genres": ["Action", "Adventure", "Drama"],
        "rating": {"percentage": 92, "votes": 1200, "watching": 3},
        "images": {
            "poster": "https://cdn.example/fma/poster.jpg",
            "fanart": "https://cdn.example/fma/fanart.jpg",
        },
        "type": "show",
        "synopsis": "Two brothers search for the <b>Philosopher's Stone</b>.",
        "runtime": "24",
        "status": "Finished Airing",
        "num_seasons": 1,
        "episodes": [
            {
                "title": "Fullmetal Alchemist",
                "season": 1,
                "episode": 1,
                "torrents": {
                    "480p": {"url": "magnet:?xt=urn:btih:480", "seeds": 10},
                    "720p": {"url": "magnet:?xt=urn:btih:720", "seeds": 20},
                },
            },
        ],
    }


@pytest.fixture
def raw_movie():
    """Realistic raw detail record for a movie."""
    return {
        "_id": "199",
        "slug": "sen-to-chihiro-no-kamikakushi",
        "title": "Spirited Away",
        "year": "2001",
        "genres": ["Adventure", "Supernatural"],
        "rating": {"percentage": 93, "votes": 900, "watching": 1},
        "images": {"poster": "https://cdn.example/sa/poster.jpg"},
        "type": "movie",
        "synopsis": "A girl wanders into the world of spirits.",
        "runtime": "125",
        "trailer": "https://www.youtube.com/watch?v=ByXuk9QqQkk",
        "torrents": {
            "en": {
                "720p": {"url": "magnet:?xt=urn:btih:sa720", "seeds": 50},
                "1080p": {"url": "magnet:?xt=urn:btih:sa1080", "seeds": 40},
            },
            "ja": {
                "480p": {"url": "magnet:?xt=urn:btih:sa480ja", "seeds": 5},
            },
        },
    }


@pytest.fixture
def raw_page(raw_show, raw_movie):
    """Raw catalog page as returned by /animes/{page}."""
    return [raw_show, raw_movie]


# ========== Mock HTTP Helpers ==========


def make_response(status_code=200, json_data=None, json_error=False):
    """Build a Mock standing in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory():
    """Factory for mock responses (status code, JSON body, invalid JSON)."""
    return make_response
