"""Shared test fixtures and configuration."""

import os

import pytest


TEST_ENV = {
    "TOOLBOX_SEARCH_LOG_LEVEL": "debug",
    "TOOLBOX_SEARCH_LOG_JSON": "true",
    "TOOLBOX_SEARCH_INCLUDE_BUILTIN_BLOCKS": "true",
    "TOOLBOX_SEARCH_BLOCK_DEFINITIONS_FILE": "",
    "TOOLBOX_SEARCH_TRACE_ENABLED": "false",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset the search settings environment before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def dropdown_alt_definition():
    """Block whose only weather words come from image dropdown alt text."""
    return {
        "type": "searcher_dropdown_alt",
        "message0": "weather %1",
        "args0": [
            {
                "type": "field_dropdown",
                "name": "WEATHER",
                "options": [
                    [
                        {
                            "src": "data:image/gif;base64,R0lGODlhAQABAAAAACH5BAEKAAEA",
                            "width": 1,
                            "height": 1,
                            "alt": "Sunny",
                        },
                        "SUN",
                    ],
                    [
                        {
                            "src": "data:image/gif;base64,R0lGODlhAQABAAAAACH5BAEKAAEA",
                            "width": 1,
                            "height": 1,
                            "alt": "Cloudy",
                        },
                        "CLOUD",
                    ],
                ],
            }
        ],
    }
