"""Assemble the admin dashboard view-model.

`build_dashboard` wires the grouping, ranking, recency and KPI helpers into a
`DashboardView`. It is a pure function of its four input collections: any of
them may be None while its fetch is pending, and two calls on equal inputs
return equal views.

Expectations:
- users carry a `role`
- subjects may embed `department.name`
- classes may embed `subject.name` and carry a `createdAt` timestamp
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from admin_dashboard.aggregate.group_counts import GroupCount, RankedItem, count_by, top_n
from admin_dashboard.aggregate.kpis import KpiSpec, compute_kpis
from admin_dashboard.aggregate.recency import most_recent
from admin_dashboard.aggregate.relations import (
    UNASSIGNED,
    resolve_relation,
    role_is,
    role_of,
)
from admin_dashboard.config import DEFAULT_RECENT_N, DEFAULT_TOP_N, Settings
from admin_dashboard.models import (
    DashboardSnapshot,
    DashboardView,
    GroupTotal,
    KpiValue,
    RankedGroup,
    RoleTotal,
)

log = logging.getLogger(__name__)


def department_name_of(subject: Any) -> str:
    return resolve_relation(subject, "department.name", UNASSIGNED)


def subject_name_of(class_record: Any) -> str:
    return resolve_relation(class_record, "subject.name", UNASSIGNED)


def _group_totals(groups: list[GroupCount]) -> list[GroupTotal]:
    return [GroupTotal(group_name=g.key, total=g.total) for g in groups]


def _ranked_groups(ranked: list[RankedItem]) -> list[RankedGroup]:
    return [RankedGroup(group_name=r.key, total=r.total, rank=r.rank) for r in ranked]


def build_dashboard(
    users: Sequence[Any] | None = None,
    subjects: Sequence[Any] | None = None,
    departments: Sequence[Any] | None = None,
    classes: Sequence[Any] | None = None,
    *,
    top_limit: int = DEFAULT_TOP_N,
    recent_limit: int = DEFAULT_RECENT_N,
    teacher_role: str = "teacher",
    admin_role: str = "admin",
) -> DashboardView:
    """Compute the dashboard view from the current source collections.

    Args:
        users: User records, or None while not loaded.
        subjects: Subject records, or None while not loaded.
        departments: Department records, or None while not loaded.
        classes: Class records, or None while not loaded.
        top_limit: Size of the top departments/subjects lists.
        recent_limit: Size of the newest classes/teachers lists.
        teacher_role: Role value that marks a teacher.
        admin_role: Role value that marks an admin.

    Returns:
        A `DashboardView`. Never raises on missing relations or timestamps.
    """
    users = users or ()
    subjects = subjects or ()
    departments = departments or ()
    classes = classes or ()

    is_teacher = role_is(teacher_role)
    is_admin = role_is(admin_role)

    # -------------------------
    # Group counts
    # -------------------------
    by_role = count_by(users, role_of)
    by_department = count_by(subjects, department_name_of)
    by_subject = count_by(classes, subject_name_of)

    # -------------------------
    # Rankings and recency
    # -------------------------
    top_departments = top_n(by_department, top_limit)
    top_subjects = top_n(by_subject, top_limit)
    newest_classes = most_recent(classes, recent_limit)
    newest_teachers = most_recent(users, recent_limit, predicate=is_teacher)

    # -------------------------
    # KPIs
    # -------------------------
    kpis = compute_kpis(
        [
            KpiSpec("Total Users", users),
            KpiSpec("Teachers", users, is_teacher),
            KpiSpec("Admins", users, is_admin),
            KpiSpec("Subjects", subjects),
            KpiSpec("Departments", departments),
            KpiSpec("Classes", classes),
        ]
    )

    log.debug(
        "Dashboard built: users=%d subjects=%d departments=%d classes=%d",
        len(users),
        len(subjects),
        len(departments),
        len(classes),
    )

    return DashboardView(
        kpis=[KpiValue(label=label, value=value) for label, value in kpis.items()],
        users_by_role=[RoleTotal(role=g.key, total=g.total) for g in by_role],
        subjects_by_department=_group_totals(by_department),
        classes_by_subject=_group_totals(by_subject),
        newest_classes=newest_classes,
        newest_teachers=newest_teachers,
        top_departments=_ranked_groups(top_departments),
        top_subjects=_ranked_groups(top_subjects),
    )


def build_dashboard_from_snapshot(
    snapshot: DashboardSnapshot,
    settings: Settings | None = None,
) -> DashboardView:
    """Build the view from a `DashboardSnapshot`, using `settings` limits if given."""
    if settings is None:
        return build_dashboard(
            snapshot.users,
            snapshot.subjects,
            snapshot.departments,
            snapshot.classes,
        )
    return build_dashboard(
        snapshot.users,
        snapshot.subjects,
        snapshot.departments,
        snapshot.classes,
        top_limit=settings.top_n,
        recent_limit=settings.recent_n,
        teacher_role=settings.teacher_role,
        admin_role=settings.admin_role,
    )
