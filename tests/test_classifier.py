"""Tests for keyword classification."""

import pytest

from prompt_engineer.prompting import Classification, classify


@pytest.mark.parametrize(
    "text",
    [
        "Improve the UI of my app",
        "design a landing page for my website",
        "UX research plan for a mobile application",
        "Help me REDESIGN my portfolio",
        "Better user interface for the admin panel",
    ],
)
def test_ui_ux_wins_over_other_families(text):
    assert classify(text) == Classification.UI_UX


def test_app_development():
    assert classify("Build me a mobile app for tracking workouts") == Classification.APP_DEV


def test_development_outranks_web_keywords():
    assert classify("frontend and backend development") == Classification.APP_DEV


def test_web_development():
    assert classify("Create a website for my bakery") == Classification.WEB_DEV
    assert classify("Fix my BACKEND") == Classification.WEB_DEV


@pytest.mark.parametrize(
    "text",
    [
        "",
        "A happy poem about autumn",
        "quick guide to baking bread",
        "Write a short story about a dragon",
    ],
)
def test_no_match(text):
    assert classify(text) == Classification.NONE


def test_short_keywords_must_start_a_word():
    # "build" contains "ui", "happy" contains "app", "cobweb" contains "web"
    assert classify("build a shed") == Classification.NONE
    assert classify("happy birthday") == Classification.NONE
    assert classify("cobweb removal") == Classification.NONE
    assert classify("apps for kids") == Classification.APP_DEV
