"""Unit tests for course status merging and payload building."""

import pytest

from app.schemas import (
    CourseStatus,
    CourseStatusInput,
    ModuleProgressInput,
    SectionProgressInput,
    SectionStatus,
)
from app.services.course_status_merger import (
    build_create_payload,
    build_update_payload,
    find_course_status,
    merge_modules,
    merge_sections,
)


def _delta(section_id, *modules):
    return SectionProgressInput(
        sectionId=section_id,
        modules=[ModuleProgressInput(moduleId=m, progress=p) for m, p in modules],
    )


def _as_ids(sections):
    return [
        (s.section_id, [(m.module_id, m.progress) for m in s.modules])
        for s in sections
    ]


# ─────────────────────────────────────────────────────────────────
# merge_sections / merge_modules
# ─────────────────────────────────────────────────────────────────


class TestMergeSections:
    def test_overwrites_only_the_targeted_module(self, existing_status):
        merged = merge_sections(existing_status.sections, [_delta("S1", ("M1", 80))])

        assert _as_ids(merged) == [
            ("S1", [("M1", 80), ("M3", 100)]),
            ("S2", [("M9", 20)]),
        ]

    def test_appends_unknown_section_with_exactly_incoming_modules(self, existing_status):
        merged = merge_sections(
            existing_status.sections,
            [_delta("S7", ("M70", 10), ("M71", 0))],
        )

        assert _as_ids(merged)[:2] == _as_ids(existing_status.sections)
        assert _as_ids(merged)[2] == ("S7", [("M70", 10), ("M71", 0)])

    def test_appends_unknown_module_after_existing_ones(self, existing_status):
        merged = merge_sections(existing_status.sections, [_delta("S2", ("M10", 5))])

        assert _as_ids(merged)[1] == ("S2", [("M9", 20), ("M10", 5)])
        assert merged[0] is existing_status.sections[0]

    def test_scenario_update_and_append_in_same_section(self):
        status = CourseStatus.model_validate({
            "documentId": "cs_1",
            "course": {"documentId": "C1"},
            "sections": [
                {"section": {"documentId": "S1"}, "modules": [
                    {"module": {"documentId": "M1"}, "progress": 50},
                ]},
            ],
        })

        merged = merge_sections(status.sections, [_delta("S1", ("M1", 80), ("M2", 10))])

        assert _as_ids(merged) == [("S1", [("M1", 80), ("M2", 10)])]

    def test_is_idempotent(self, existing_status):
        deltas = [_delta("S1", ("M1", 80), ("M4", 30)), _delta("S5", ("M50", 60))]

        once = merge_sections(existing_status.sections, deltas)
        twice = merge_sections(once, deltas)

        assert twice == once

    def test_does_not_mutate_existing_record(self, existing_status, sample_course_status_doc):
        merge_sections(existing_status.sections, [_delta("S1", ("M1", 99), ("M2", 1))])

        assert existing_status == CourseStatus.model_validate(sample_course_status_doc)

    def test_repeated_section_ids_in_one_update_are_combined(self, existing_status):
        merged = merge_sections(
            existing_status.sections,
            [_delta("S9", ("A", 10)), _delta("S9", ("A", 20), ("B", 5))],
        )

        assert _as_ids(merged)[-1] == ("S9", [("A", 20), ("B", 5)])

    def test_repeated_stored_section_only_first_is_merged(self):
        status = CourseStatus.model_validate({
            "sections": [
                {"section": {"documentId": "S1"}, "modules": [
                    {"module": {"documentId": "M1"}, "progress": 10},
                ]},
                {"section": {"documentId": "S1"}, "modules": [
                    {"module": {"documentId": "M1"}, "progress": 20},
                ]},
            ],
        })

        merged = merge_sections(status.sections, [_delta("S1", ("M1", 90))])

        assert _as_ids(merged) == [("S1", [("M1", 90)]), ("S1", [("M1", 20)])]
        assert merged[1] is status.sections[1]

    def test_no_deltas_returns_equal_sections(self, existing_status):
        assert merge_sections(existing_status.sections, []) == existing_status.sections


class TestMergeModules:
    def test_repeated_stored_module_only_first_is_updated(self):
        section = SectionStatus.model_validate({
            "section": {"documentId": "S1"},
            "modules": [
                {"module": {"documentId": "M1"}, "progress": 10},
                {"module": {"documentId": "M1"}, "progress": 20},
            ],
        })

        merged = merge_modules(section.modules, [ModuleProgressInput(moduleId="M1", progress=90)])

        assert [(m.module_id, m.progress) for m in merged] == [("M1", 90), ("M1", 20)]

    def test_last_value_wins_for_repeated_module(self, existing_status):
        modules = existing_status.sections[0].modules
        merged = merge_modules(modules, [
            ModuleProgressInput(moduleId="M1", progress=60),
            ModuleProgressInput(moduleId="M1", progress=70),
        ])

        assert [(m.module_id, m.progress) for m in merged] == [("M1", 70), ("M3", 100)]


# ─────────────────────────────────────────────────────────────────
# build_update_payload
# ─────────────────────────────────────────────────────────────────


class TestBuildUpdatePayload:
    def test_full_payload_uses_reference_ids(self, existing_status):
        data = CourseStatusInput(course="crs_intro", progress=60, sections=[_delta("S1", ("M1", 80))])

        payload = build_update_payload(data, 7, existing_status)

        assert payload == {
            "course": "crs_intro",
            "user": 7,
            "progress": 60,
            "isFavourite": True,
            "sections": [
                {"section": "S1", "modules": [
                    {"module": "M1", "progress": 80},
                    {"module": "M3", "progress": 100},
                ]},
                {"section": "S2", "modules": [
                    {"module": "M9", "progress": 20},
                ]},
            ],
        }

    def test_zero_progress_keeps_existing_progress(self, existing_status):
        payload = build_update_payload(
            CourseStatusInput(course="crs_intro", progress=0), 7, existing_status
        )

        assert payload["progress"] == 45

    def test_missing_progress_keeps_existing_progress(self, existing_status):
        payload = build_update_payload(CourseStatusInput(course="crs_intro"), 7, existing_status)

        assert payload["progress"] == 45

    def test_explicit_false_favourite_overrides(self, existing_status):
        payload = build_update_payload(
            CourseStatusInput(course="crs_intro", isFavourite=False), 7, existing_status
        )

        assert payload["isFavourite"] is False

    def test_missing_favourite_keeps_existing(self, existing_status):
        payload = build_update_payload(CourseStatusInput(course="crs_intro"), 7, existing_status)

        assert payload["isFavourite"] is True

    def test_drops_entries_with_missing_relations(self):
        status = CourseStatus.model_validate({
            "documentId": "cs_1",
            "course": {"documentId": "C1"},
            "sections": [
                {"section": None, "modules": [{"module": {"documentId": "M1"}, "progress": 5}]},
                {"section": {"documentId": "S2"}, "modules": [
                    {"module": None, "progress": 5},
                    {"module": {"documentId": "M2"}, "progress": 15},
                ]},
            ],
        })

        payload = build_update_payload(CourseStatusInput(course="C1"), 1, status)

        assert payload["sections"] == [
            {"section": "S2", "modules": [{"module": "M2", "progress": 15}]},
        ]


# ─────────────────────────────────────────────────────────────────
# build_create_payload
# ─────────────────────────────────────────────────────────────────


class TestBuildCreatePayload:
    def test_defaults_when_unspecified(self):
        payload = build_create_payload(CourseStatusInput(course="crs_new"), 3)

        assert payload == {
            "course": "crs_new",
            "user": 3,
            "progress": 0,
            "isFavourite": False,
            "sections": [],
        }

    def test_takes_sections_verbatim(self):
        data = CourseStatusInput(
            course="crs_new",
            progress=25,
            isFavourite=True,
            sections=[_delta("S1", ("M1", 25), ("M2", 0))],
        )

        payload = build_create_payload(data, 3)

        assert payload["progress"] == 25
        assert payload["isFavourite"] is True
        assert payload["sections"] == [
            {"section": "S1", "modules": [
                {"module": "M1", "progress": 25},
                {"module": "M2", "progress": 0},
            ]},
        ]


class TestFindCourseStatus:
    @pytest.mark.parametrize("statuses", [None, []])
    def test_returns_none_without_statuses(self, statuses):
        assert find_course_status(statuses, "crs_intro") is None

    def test_returns_first_match(self, existing_status):
        other = CourseStatus(documentId="cs_other")
        assert find_course_status([other, existing_status], "crs_intro") is existing_status


class TestUnsetFields:
    def test_nulls_read_as_defaults(self):
        status = CourseStatus.model_validate({
            "progress": None,
            "isFavourite": None,
            "sections": [{"section": {"documentId": "S1"}, "modules": [
                {"module": {"documentId": "M1"}, "progress": None},
            ]}],
        })

        assert status.progress == 0
        assert status.isFavourite is False
        assert status.sections[0].modules[0].progress == 0
