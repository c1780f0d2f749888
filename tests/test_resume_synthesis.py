"""Tests for summary generation and completeness scoring."""

from __future__ import annotations

import pytest

from resume_ecosystem.services.resume_synthesis import calculate_completeness, generate_summary


def _achievement(achievement_type: str, **fields) -> dict:
    return {"type": achievement_type, "skills": [], "description": "", "metadata": {}, **fields}


def test_summary_for_no_achievements() -> None:
    assert generate_summary({}, []) == "Motivated professional with 0 verified achievements. "


def test_summary_counts_total_regardless_of_status() -> None:
    achievements = [
        _achievement("project", status="unverified"),
        _achievement("project", status="pending"),
    ]

    summary = generate_summary({"name": "Ada"}, achievements)

    assert summary.startswith("Motivated professional with 2 verified achievements. ")
    assert "Built 2 projects. " in summary


def test_summary_fragment_order_and_pluralization() -> None:
    achievements = [
        _achievement("course"),
        _achievement("hackathon"),
        _achievement("internship"),
        _achievement("internship"),
        _achievement("project"),
    ]

    summary = generate_summary(None, achievements)

    assert summary == (
        "Motivated professional with 5 verified achievements. "
        "Completed 2 internships. "
        "Participated in 1 hackathon. "
        "Built 1 project. "
        "Completed 1 course. "
    )


def test_certifications_are_counted_but_get_no_sentence() -> None:
    summary = generate_summary({}, [_achievement("certification")])

    assert summary == "Motivated professional with 1 verified achievements. "


def test_summary_skills_sentence() -> None:
    achievements = [
        _achievement("project", skills=["React"], description="Built with React and Docker"),
    ]

    summary = generate_summary({}, achievements)

    assert summary == (
        "Motivated professional with 1 verified achievements. "
        "Built 1 project. "
        "Proficient in 2+ technologies including React, Docker."
    )


def test_summary_previews_first_three_skills() -> None:
    achievements = [_achievement("project", skills=["A", "B", "C", "D"])]

    summary = generate_summary({}, achievements)

    assert summary.endswith("Proficient in 4+ technologies including A, B, C.")


def test_completeness_profile_fields_only() -> None:
    user = {"name": "Ada", "email": "ada@example.com", "portfolio": "https://ada.dev"}

    assert calculate_completeness({}, user) == 10


def test_completeness_summary_threshold_is_strictly_longer_than_50() -> None:
    user = {}

    assert calculate_completeness({"summary": "x" * 50}, user) == 0
    assert calculate_completeness({"summary": "x" * 51}, user) == 10


@pytest.mark.parametrize(
    ("skill_count", "achievement_count", "expected"),
    [
        (3, 1, 16),
        (10, 4, 60),
        (25, 9, 60),
    ],
)
def test_completeness_skill_and_achievement_caps(
    skill_count: int, achievement_count: int, expected: int
) -> None:
    resume = {
        "skills": [f"skill-{i}" for i in range(skill_count)],
        "achievement_ids": list(range(achievement_count)),
    }

    assert calculate_completeness(resume, {}) == expected


def test_completeness_is_capped_at_100() -> None:
    user = {
        "name": "Ada",
        "email": "ada@example.com",
        "phone": "555",
        "location": "London",
        "linkedin": "in/ada",
        "github": "ada",
    }
    resume = {
        "summary": "x" * 80,
        "skills": [str(i) for i in range(10)],
        "achievement_ids": [1, 2, 3, 4],
    }

    assert calculate_completeness(resume, user) == 100
