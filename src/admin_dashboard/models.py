"""Pydantic models for backend entities and the dashboard view-model.

Entity models mirror the records served by the administration backend. They
keep unknown fields (`extra="allow"`) because the backend sends more than the
dashboard reads, and accept both camelCase and snake_case field names.

View-model models define the exact shape handed to the presentation layer;
`DashboardView.as_dict` serialises them with camelCase keys.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =========================================================
# ENTITIES
# =========================================================


class NamedRef(BaseModel):
    """Embedded reference to a related entity (e.g. a class's subject)."""
    model_config = ConfigDict(extra="allow")
    id: int | str | None = None
    name: str | None = None


class User(BaseModel):
    """Schema for a user record (admin, teacher, student...)."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    id: int | str
    name: str
    email: str
    role: str | None = None
    created_at: str | int | float | datetime | None = Field(default=None, alias="createdAt")


class Department(BaseModel):
    """Schema for a department record."""
    model_config = ConfigDict(extra="allow")
    id: int | str
    name: str


class Subject(BaseModel):
    """Schema for a subject record.

    Attributes:
        id: Subject identifier.
        name: Subject name.
        department: Embedded department reference, absent when unassigned.
        department_id: Foreign key to the department, if the backend sends it.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    id: int | str
    name: str
    department: NamedRef | None = None
    department_id: int | str | None = Field(default=None, alias="departmentId")


class ClassRecord(BaseModel):
    """Schema for a class record.

    Attributes:
        id: Class identifier.
        name: Class name.
        subject: Embedded subject reference, absent when unassigned.
        teacher: Embedded teacher reference, absent when unassigned.
        subject_id: Foreign key to the subject, if sent.
        teacher_id: Foreign key to the teacher, if sent.
        created_at: Creation timestamp as sent by the backend (ISO text or
            epoch milliseconds, passed through unconverted).
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    id: int | str
    name: str
    subject: NamedRef | None = None
    teacher: NamedRef | None = None
    subject_id: int | str | None = Field(default=None, alias="subjectId")
    teacher_id: int | str | None = Field(default=None, alias="teacherId")
    created_at: str | int | float | datetime | None = Field(default=None, alias="createdAt")


@dataclass(frozen=True)
class DashboardSnapshot:
    """The four source collections as currently available.

    A collection is None while its fetch has not completed (or has failed);
    the assembler treats that the same as an empty collection.
    """
    users: Sequence[Any] | None = None
    subjects: Sequence[Any] | None = None
    departments: Sequence[Any] | None = None
    classes: Sequence[Any] | None = None


# =========================================================
# VIEW-MODEL
# =========================================================


class KpiValue(BaseModel):
    """A single KPI card: label and integer value."""
    model_config = ConfigDict(frozen=True)
    label: str
    value: int = Field(..., ge=0)


class RoleTotal(BaseModel):
    """Number of users holding a role."""
    model_config = ConfigDict(frozen=True)
    role: str
    total: int = Field(..., ge=0)


class GroupTotal(BaseModel):
    """Number of records in a named group (department, subject)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    group_name: str = Field(..., alias="groupName")
    total: int = Field(..., ge=0)


class RankedGroup(GroupTotal):
    """A `GroupTotal` with its 1-based position in a top-N list."""
    rank: int = Field(..., ge=1)


class DashboardView(BaseModel):
    """Everything the admin dashboard page renders.

    `newest_classes` and `newest_teachers` hold the original records (entity
    models or raw mappings), newest first.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    kpis: list[KpiValue]
    users_by_role: list[RoleTotal] = Field(alias="usersByRole")
    subjects_by_department: list[GroupTotal] = Field(alias="subjectsByDepartment")
    classes_by_subject: list[GroupTotal] = Field(alias="classesBySubject")
    newest_classes: list[Any] = Field(alias="newestClasses")
    newest_teachers: list[Any] = Field(alias="newestTeachers")
    top_departments: list[RankedGroup] = Field(alias="topDepartments")
    top_subjects: list[RankedGroup] = Field(alias="topSubjects")

    def kpi(self, label: str) -> int:
        """Return the value of the KPI called `label` (0 when absent)."""
        for item in self.kpis:
            if item.label == label:
                return item.value
        return 0

    def as_dict(self) -> dict[str, Any]:
        """Convert the view into a JSON-serialisable dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
