from __future__ import annotations

import pytest

from chargesheet_import.parsing.designation import (
    DESIGNATIONS,
    SPREADSHEET_DESIGNATIONS,
    split_designation,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("PSI पाटील", ("PSI", "पाटील")),
        ("P.I. देशमुख", ("P.I.", "देशमुख")),
        ("सपोनि  कदम ", ("सपोनि", "कदम")),
        ("पोना जाधव", ("पोना", "जाधव")),
        ("रमेश शिंदे", ("", "रमेश शिंदे")),
    ],
)
def test_literal_prefixes(text, expected):
    assert split_designation(text) == expected


def test_first_listed_prefix_wins():
    # "पोह" is listed before "पोहे", so "पोहे ..." splits on the shorter prefix
    assert split_designation("पोहे माने") == ("पोह", "े माने")
    # "पोउपनि" is listed before "मपोउपनि" but does not prefix it
    assert split_designation("मपोउपनि सावंत") == ("मपोउपनि", "सावंत")


def test_spreadsheet_list_adds_english_ranks():
    assert "Inspector" not in DESIGNATIONS
    assert split_designation("Inspector Rao", SPREADSHEET_DESIGNATIONS) == ("Inspector", "Rao")
    assert split_designation("Sub-Inspector Rao", SPREADSHEET_DESIGNATIONS) == ("Sub-Inspector", "Rao")


def test_numbered_rank_after_literal_list():
    # with the default list the literal prefix always matches first
    assert split_designation("पोह क्र. 123 पाटील")[0] == "पोह"
    # without literal prefixes the buckle number becomes part of the designation
    assert split_designation("पोह क्र. 123 पाटील", designations=()) == ("पोह 123", "पाटील")
    assert split_designation("पोना/456 जाधव", designations=()) == ("पोना 456", "जाधव")


def test_numbered_rank_disabled():
    assert split_designation("पोह 123 पाटील", designations=(), numbered_bases=()) == ("", "पोह 123 पाटील")
