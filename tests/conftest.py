"""Shared fixtures for the keyword grouper test-suite."""

import os

import pytest

# The API tests fire many requests from the same client address.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from keyword_grouper.modules.grouping import KeywordEntry


SAMPLE_TEXT = (
    "tarif coiffeur bayonne\t2800\n"
    "tarif d'un coiffeur bayonne\t1800\n"
    "tarif d'un coiffeur a bayonne\t800\n"
    "devis elagage a bayonne\t800\n"
    "banque en ligne\t600\n"
)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_entries() -> list:
    return [
        KeywordEntry(keyword="tarif coiffeur bayonne", value=2800),
        KeywordEntry(keyword="tarif d'un coiffeur bayonne", value=1800),
        KeywordEntry(keyword="tarif d'un coiffeur a bayonne", value=800),
        KeywordEntry(keyword="devis elagage a bayonne", value=800),
        KeywordEntry(keyword="banque en ligne", value=600),
    ]
