"""
Tests for Sanctions Compliance Signals
======================================

Version: 0.1.0
"""

import copy
from typing import Any

import pytest

from services.trade_compliance.models import OverallRating
from services.trade_compliance.screening.signals import (
    CRITICAL_TAGS,
    TOPIC_TAGS,
    SignalStatus,
    classify_result,
    derive_verdict,
    enrich_results,
    match_tags,
    normalize_locales,
)


def candidate(topics: Any = None, country: Any = None) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    if topics is not None:
        properties["topics"] = topics
    if country is not None:
        properties["country"] = country
    return {"id": "NK-test", "properties": properties}


# ============================================================================
# Lookup Tables
# ============================================================================


class TestLookupTables:
    """Tests for the static topic and critical tag tables."""

    def test_topic_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            TOPIC_TAGS["poi"] = "Person of interest"  # type: ignore[index]

    def test_critical_tags_are_display_tags(self) -> None:
        assert CRITICAL_TAGS <= set(TOPIC_TAGS.values())

    def test_non_critical_tags(self) -> None:
        assert "Export controlled" not in CRITICAL_TAGS
        assert "Sanction-linked entity" not in CRITICAL_TAGS


# ============================================================================
# Tag Matching
# ============================================================================


class TestMatchTags:
    """Tests for topic to display tag mapping."""

    def test_first_seen_order(self) -> None:
        assert match_tags(["debarment", "sanction"]) == [
            "Debarred entity",
            "Sanctioned entity",
        ]

    def test_duplicates_removed(self) -> None:
        assert match_tags(["sanction", "sanction", "terrorism", "sanction"]) == [
            "Sanctioned entity",
            "Terrorism",
        ]

    def test_unmapped_topics_ignored(self) -> None:
        assert match_tags(["poi", "role.pep", "trade.risk"]) == ["Trade risk"]

    def test_custom_table(self) -> None:
        assert match_tags(["poi"], {"poi": "Person of interest"}) == ["Person of interest"]


class TestNormalizeLocales:
    """Tests for country code normalization."""

    def test_uppercased_sorted_unique(self) -> None:
        assert normalize_locales(["ru", "by", "RU", "cn"]) == ["BY", "CN", "RU"]

    def test_empty(self) -> None:
        assert normalize_locales([]) == []


# ============================================================================
# Verdict Derivation
# ============================================================================


class TestDeriveVerdict:
    """Tests for the status/overall rule."""

    @pytest.mark.parametrize("tag", sorted(CRITICAL_TAGS))
    def test_any_critical_tag_is_red(self, tag: str) -> None:
        assert derive_verdict([tag]) == (SignalStatus.YES, OverallRating.NO)

    def test_critical_wins_over_non_critical(self) -> None:
        status, overall = derive_verdict(["Export controlled", "Terrorism"])

        assert status == SignalStatus.YES
        assert overall == OverallRating.NO

    def test_non_critical_only_is_amber(self) -> None:
        status, overall = derive_verdict(["Export controlled", "Sanction-linked entity"])

        assert status == SignalStatus.YES_IF
        assert overall == OverallRating.AMBER

    def test_no_tags_is_green(self) -> None:
        assert derive_verdict([]) == (SignalStatus.NO, OverallRating.GREEN)


# ============================================================================
# Candidate Classification
# ============================================================================


class TestClassifyResult:
    """Tests for classifying a single candidate."""

    def test_sanctioned_and_debarred(self) -> None:
        signal = classify_result(candidate(topics=["sanction", "debarment"]))

        assert signal.matched_tags == ["Sanctioned entity", "Debarred entity"]
        assert signal.status == SignalStatus.YES
        assert signal.overall == OverallRating.NO

    def test_unmapped_topic_is_green(self) -> None:
        signal = classify_result(candidate(topics=["poi"]))

        assert signal.matched_tags == []
        assert signal.status == SignalStatus.NO
        assert signal.overall == OverallRating.GREEN

    def test_export_controlled_is_amber(self) -> None:
        signal = classify_result(candidate(topics=["export.control"], country=["de"]))

        assert signal.status == SignalStatus.YES_IF
        assert signal.overall == OverallRating.AMBER
        assert signal.locales == ["DE"]

    def test_missing_properties(self) -> None:
        signal = classify_result({"id": "NK-empty"})

        assert signal.matched_tags == []
        assert signal.locales == []
        assert signal.overall == OverallRating.GREEN

    def test_malformed_fields_ignored(self) -> None:
        signal = classify_result(candidate(topics="sanction", country=["us", 7, None]))

        assert signal.matched_tags == []
        assert signal.locales == ["US"]

    def test_to_dict(self) -> None:
        signal = classify_result(candidate(topics=["terrorism"], country=["sy", "iq"]))

        assert signal.to_dict() == {
            "status": "YES",
            "overall": "NO",
            "matched_tags": ["Terrorism"],
            "locales": ["IQ", "SY"],
        }


class TestEnrichResults:
    """Tests for attaching compliance blocks."""

    def test_attaches_compliance_in_place(
        self,
        sample_match_results: list[dict[str, Any]],
    ) -> None:
        enriched = enrich_results(sample_match_results)

        assert enriched is sample_match_results
        red, amber, green = enriched
        assert red["compliance"]["overall"] == "NO"
        assert red["compliance"]["locales"] == ["BY", "RU"]
        assert amber["compliance"]["status"] == "YES IF"
        assert green["compliance"] == {
            "status": "NO",
            "overall": "GREEN",
            "matched_tags": [],
            "locales": [],
        }

    def test_other_fields_untouched(
        self,
        sample_match_results: list[dict[str, Any]],
    ) -> None:
        original = copy.deepcopy(sample_match_results)

        enrich_results(sample_match_results)

        for before, after in zip(original, sample_match_results):
            after = dict(after)
            after.pop("compliance")
            assert after == before

    def test_idempotent(self, sample_match_results: list[dict[str, Any]]) -> None:
        first = copy.deepcopy(enrich_results(sample_match_results))
        second = enrich_results(sample_match_results)

        assert first == second
