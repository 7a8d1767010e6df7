from __future__ import annotations

import pytest

from admin_dashboard.aggregate.build_view import build_dashboard, build_dashboard_from_snapshot
from admin_dashboard.config import Settings
from admin_dashboard.models import ClassRecord, DashboardSnapshot, Subject, User


@pytest.fixture
def users() -> list[dict]:
    return [
        {"id": 1, "name": "Ada", "email": "ada@school.test", "role": "admin", "createdAt": "2024-01-05"},
        {"id": 2, "name": "Ben", "email": "ben@school.test", "role": "teacher", "createdAt": "2024-02-01"},
        {"id": 3, "name": "Cy", "email": "cy@school.test", "role": "student", "createdAt": "2024-02-03"},
        {"id": 4, "name": "Di", "email": "di@school.test", "role": "teacher", "createdAt": None},
        {"id": 5, "name": "Ed", "email": "ed@school.test", "role": "teacher", "createdAt": "2024-03-10"},
    ]


@pytest.fixture
def subjects() -> list[dict]:
    return [
        {"id": 1, "name": "Algebra", "department": {"name": "Mathematics"}},
        {"id": 2, "name": "Poetry", "department": {"name": "Languages"}},
        {"id": 3, "name": "Geometry", "department": {"name": "Mathematics"}},
        {"id": 4, "name": "Drama"},
    ]


@pytest.fixture
def classes() -> list[dict]:
    return [
        {"id": 1, "name": "7A Algebra", "subject": {"name": "Algebra"}, "createdAt": "2024-01-10"},
        {"id": 2, "name": "8B Poetry", "subject": {"name": "Poetry"}, "createdAt": "2024-04-01"},
        {"id": 3, "name": "7B Algebra", "subject": {"name": "Algebra"}, "createdAt": "2024-02-10"},
        {"id": 4, "name": "Club", "createdAt": "2024-03-01"},
    ]


def test_full_view(users: list[dict], subjects: list[dict], classes: list[dict]) -> None:
    view = build_dashboard(users, subjects, [{"id": 1, "name": "Mathematics"}], classes)

    assert [(k.label, k.value) for k in view.kpis] == [
        ("Total Users", 5),
        ("Teachers", 3),
        ("Admins", 1),
        ("Subjects", 4),
        ("Departments", 1),
        ("Classes", 4),
    ]
    assert [(r.role, r.total) for r in view.users_by_role] == [("admin", 1), ("teacher", 3), ("student", 1)]
    assert [(g.group_name, g.total) for g in view.subjects_by_department] == [
        ("Mathematics", 2),
        ("Languages", 1),
        ("Unassigned", 1),
    ]
    assert [(g.group_name, g.total, g.rank) for g in view.top_departments] == [
        ("Mathematics", 2, 1),
        ("Languages", 1, 2),
        ("Unassigned", 1, 3),
    ]
    assert [(g.group_name, g.total, g.rank) for g in view.top_subjects] == [
        ("Algebra", 2, 1),
        ("Poetry", 1, 2),
        ("Unassigned", 1, 3),
    ]
    assert [c["id"] for c in view.newest_classes] == [2, 4, 3, 1]
    assert [u["id"] for u in view.newest_teachers] == [5, 2, 4]


def test_empty_classes_do_not_fail(users: list[dict]) -> None:
    view = build_dashboard(users=users, classes=[])
    assert view.newest_classes == []
    assert view.top_subjects == []
    assert view.classes_by_subject == []
    assert view.kpi("Classes") == 0


def test_unloaded_collections_count_as_empty() -> None:
    view = build_dashboard(None, None, None, None)
    assert all(k.value == 0 for k in view.kpis)
    assert len(view.kpis) == 6
    assert view.users_by_role == []
    assert view.newest_teachers == []
    assert view.top_departments == []


def test_recompute_is_idempotent(users: list[dict], subjects: list[dict], classes: list[dict]) -> None:
    first = build_dashboard(users, subjects, [], classes)
    second = build_dashboard(users, subjects, [], classes)
    assert first == second
    assert first.as_dict() == second.as_dict()


def test_top_lists_keep_five() -> None:
    many = [{"id": i, "name": f"c{i}", "subject": {"name": f"S{i % 7}"}} for i in range(30)]
    view = build_dashboard(classes=many)
    assert len(view.classes_by_subject) == 7
    assert [g.rank for g in view.top_subjects] == [1, 2, 3, 4, 5]
    assert [g.group_name for g in view.top_subjects] == ["S0", "S1", "S2", "S3", "S4", "S5", "S6"][:5]
    assert len(view.newest_classes) == 5


def test_accepts_entity_models(users: list[dict], subjects: list[dict], classes: list[dict]) -> None:
    view = build_dashboard(
        [User.model_validate(u) for u in users],
        [Subject.model_validate(s) for s in subjects],
        [],
        [ClassRecord.model_validate(c) for c in classes],
    )
    assert view.kpi("Teachers") == 3
    assert view.top_departments[0].group_name == "Mathematics"
    assert [c.id for c in view.newest_classes] == [2, 4, 3, 1]
    assert view.as_dict()["newestClasses"][0]["createdAt"] == "2024-04-01"


def test_as_dict_uses_presentation_keys(users: list[dict], subjects: list[dict], classes: list[dict]) -> None:
    out = build_dashboard(users, subjects, [], classes).as_dict()
    assert set(out) == {
        "kpis",
        "usersByRole",
        "subjectsByDepartment",
        "classesBySubject",
        "newestClasses",
        "newestTeachers",
        "topDepartments",
        "topSubjects",
    }
    assert out["kpis"][0] == {"label": "Total Users", "value": 5}
    assert out["usersByRole"][0] == {"role": "admin", "total": 1}
    assert out["classesBySubject"][0] == {"groupName": "Algebra", "total": 2}
    assert out["topSubjects"][0] == {"groupName": "Algebra", "total": 2, "rank": 1}


def test_snapshot_with_settings_limits(users: list[dict], classes: list[dict]) -> None:
    snapshot = DashboardSnapshot(users=users, classes=classes)
    settings = Settings(data_dir=".", top_n=1, recent_n=2, teacher_role="student")
    view = build_dashboard_from_snapshot(snapshot, settings)
    assert len(view.top_subjects) == 1
    assert [c["id"] for c in view.newest_classes] == [2, 4]
    assert [u["id"] for u in view.newest_teachers] == [3]
    assert view.kpi("Teachers") == 1
    assert build_dashboard_from_snapshot(snapshot).kpi("Teachers") == 3
