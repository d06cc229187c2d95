"""Tests for candidate selection of a single episode."""

from conftest import ep, files

from tvrename.match import find_candidates
from tvrename.models import EpisodeRecord


def test_exact_matches_keep_pool_order_and_skip_similar():
    pool = files("b - Pilot.mkv", "Pilot.mkv", "PILOT.mp4", "Pilots.mkv")
    found = find_candidates(ep(1, 1, "Pilot"), pool)
    assert [f.path.name for f in found.exact] == ["Pilot.mkv", "PILOT.mp4"]
    assert found.similar == []


def test_punctuation_variants_are_all_exact():
    pool = files("Pilot!.mkv", "Pilot.mkv")
    found = find_candidates(ep(1, 1, "Pilot"), pool)
    assert len(found.exact) == 2


def test_similar_by_edit_distance():
    pool = files("Pilott.mkv", "Something Else.mkv")
    found = find_candidates(ep(1, 1, "Pilot"), pool)
    assert found.exact == []
    assert [f.path.name for f in found.similar] == ["Pilott.mkv"]


def test_similar_by_containment_both_ways():
    pool = files("Show S01E01 The Pilot.mkv", "Pilot.mkv", "Unrelated.mkv")
    found = find_candidates(ep(1, 1, "The Pilot Part 1"), pool)
    # "pilot" is contained in "thepilotpart1"; "thepilotpart1" is not in the first key
    assert [f.path.name for f in found.similar] == ["Pilot.mkv"]

    found = find_candidates(ep(1, 1, "The Pilot"), pool)
    assert [f.path.name for f in found.similar] == ["Show S01E01 The Pilot.mkv", "Pilot.mkv"]


def test_no_candidates():
    found = find_candidates(ep(1, 1, "Pilot"), files("Finale.mkv"))
    assert not found
    assert found.exact == [] and found.similar == []


def test_nameless_episode_has_no_candidates():
    pool = files("Pilot.mkv")
    assert not find_candidates(EpisodeRecord(id=1, season_number=1, number=1, name=None), pool)
    assert not find_candidates(EpisodeRecord(id=1, season_number=1, number=1, name=""), pool)
