"""
Resume Record Data Structures

Defines the stored shape of a resume document as handed over by the storage
layer. Two schema variants exist: the legacy one (name, contact, education,
skills, experience) and the extended one (adds locations, majors, employment
types, achievements, per-job projects, awards, volunteer work, hobbies).

Absence is kept explicit everywhere:
- Optional scalar fields are None when absent
- Optional list fields are None when absent, and a (possibly empty) list when present

The rendering context decides what an absent field looks like on the page.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type

from resumely.contexts.records.logger import log_item_skipped, log_value_defaulted
from resumely.utils.timestamp import parse_date


class EmploymentType(str, Enum):
    """Employment type of a work experience entry."""

    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"

    @property
    def label(self) -> str:
        """Display label (e.g., "Full-time")."""
        return self.value.capitalize()


class Proficiency(str, Enum):
    """Spoken language proficiency level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    NATIVE = "native"


def _get(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among camelCase/snake_case key spellings."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> Optional[str]:
    """Strip a stored string, mapping None and blank strings to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: Any) -> Optional[List[str]]:
    """Keep absence (None) distinct from an empty list; drop blank items."""
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    return [text for text in (_text(item) for item in value) if text]


def _enum_value(enum_cls: Type[Enum], value: Any, default, field_name: str):
    """
    Look up a stored enum value, tolerating case and space/underscore spellings.

    Unknown values fall back to default (logged) instead of failing the record.
    """
    text = _text(value)
    if text is None:
        return default
    key = "-".join(text.lower().replace("_", " ").split())
    try:
        return enum_cls(key)
    except ValueError:
        log_value_defaulted(field_name, text, default)
        return default


def _entries(value: Any, entry_cls, section: str) -> Optional[list]:
    """
    Build entries from a stored list.

    Mappings go through entry_cls.from_dict. Sections stored as flat strings
    (certifications, projects, languages) become entries named by the string.
    Anything else is skipped.
    """
    if value is None:
        return None
    if isinstance(value, (str, Mapping)):
        value = [value]

    entries = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, Mapping):
            entries.append(entry_cls.from_dict(item))
        elif isinstance(item, str) and hasattr(entry_cls, "from_name"):
            name = _text(item)
            if name:
                entries.append(entry_cls.from_name(name))
        else:
            log_item_skipped(section, item)
    return entries


@dataclass
class Address:
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Address":
        return cls(
            street=_text(data.get("street")),
            city=_text(data.get("city")),
            state=_text(data.get("state")),
            zip_code=_text(_get(data, "zipCode", "zip_code")),
            country=_text(data.get("country")),
        )

    def parts(self) -> List[str]:
        """Non-empty address parts in display order."""
        return [
            part
            for part in (self.street, self.city, self.state, self.zip_code, self.country)
            if part
        ]


@dataclass
class ContactInfo:
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContactInfo":
        address = data.get("address")
        return cls(
            phone=_text(data.get("phone")),
            email=_text(data.get("email")),
            address=Address.from_dict(address) if isinstance(address, Mapping) else None,
            linkedin=_text(data.get("linkedin")),
            website=_text(data.get("website")),
        )


@dataclass
class EducationEntry:
    """
    Single education entry.

    Attributes:
        institution: School or university name
        degree: Degree name (e.g., "B.Sc.")
        field: Field of study
        start_date: Start of studies
        end_date: End of studies (None = ongoing)
        gpa: Grade point average on a 0-4.0 scale
        location, major, honors, description: Extended-variant extras
    """

    institution: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    gpa: Optional[float] = None
    location: Optional[str] = None
    major: Optional[str] = None
    honors: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        gpa = data.get("gpa")
        return cls(
            institution=_text(data.get("institution")),
            degree=_text(data.get("degree")),
            field=_text(data.get("field")),
            start_date=parse_date(_get(data, "startDate", "start_date")),
            end_date=parse_date(_get(data, "endDate", "end_date")),
            gpa=float(gpa) if gpa not in (None, "") else None,
            location=_text(data.get("location")),
            major=_text(data.get("major")),
            honors=_text(data.get("honors")),
            description=_text(data.get("description")),
        )


@dataclass
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        company: Employer name
        position: Job title
        start_date: First day in the position
        end_date: Last day in the position (ignored for display when current)
        current: Whether the position is held now
        description: Free-text description of the role
        achievements: Ordered achievement bullets
        employment_type: Full-time, part-time, contract, internship, or freelance
        location, projects, skills_used: Extended-variant extras
    """

    company: Optional[str] = None
    position: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None
    achievements: List[str] = field(default_factory=list)
    employment_type: Optional[EmploymentType] = None
    location: Optional[str] = None
    projects: List[str] = field(default_factory=list)
    skills_used: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        employment_type = _get(data, "employmentType", "employment_type")
        return cls(
            company=_text(data.get("company")),
            position=_text(data.get("position")),
            start_date=parse_date(_get(data, "startDate", "start_date")),
            end_date=parse_date(_get(data, "endDate", "end_date")),
            current=bool(data.get("current", False)),
            description=_text(data.get("description")),
            achievements=_string_list(data.get("achievements")) or [],
            employment_type=_enum_value(EmploymentType, employment_type, None, "employment type"),
            location=_text(data.get("location")),
            projects=_string_list(data.get("projects")) or [],
            skills_used=_string_list(_get(data, "skillsUsed", "skills_used")) or [],
        )


@dataclass
class LanguageEntry:
    name: Optional[str] = None
    proficiency: Proficiency = Proficiency.INTERMEDIATE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LanguageEntry":
        return cls(
            name=_text(data.get("name")),
            proficiency=_enum_value(
                Proficiency, data.get("proficiency"), Proficiency.INTERMEDIATE, "proficiency"
            ),
        )

    @classmethod
    def from_name(cls, name: str) -> "LanguageEntry":
        return cls(name=name)


@dataclass
class CertificationEntry:
    name: Optional[str] = None
    issuer: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CertificationEntry":
        return cls(
            name=_text(data.get("name")),
            issuer=_text(data.get("issuer")),
            issue_date=parse_date(_get(data, "date", "issue_date")),
            expiry_date=parse_date(_get(data, "expiryDate", "expiry_date")),
            description=_text(data.get("description")),
        )

    @classmethod
    def from_name(cls, name: str) -> "CertificationEntry":
        return cls(name=name)


@dataclass
class ProjectEntry:
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    link: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectEntry":
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            technologies=_string_list(data.get("technologies")) or [],
            link=_text(data.get("link")),
            start_date=parse_date(_get(data, "startDate", "start_date")),
            end_date=parse_date(_get(data, "endDate", "end_date")),
        )

    @classmethod
    def from_name(cls, name: str) -> "ProjectEntry":
        return cls(name=name)


@dataclass
class ResumeRecord:
    """
    A stored resume document owned by a user.

    Attributes:
        name: Resume display name (also the name drawn in the header)
        template_id: Catalog template the user picked
        contact: Contact information (None = absent)
        summary: Free-text professional summary / bio
        education, experience: Ordered entries (None = absent)
        skills: Flat skill strings (None = absent, [] = explicitly none)
        languages, certifications, projects: Optional structured lists
        awards, volunteer, hobbies: Optional flat string lists
    """

    name: Optional[str] = None
    template_id: Optional[str] = None
    contact: Optional[ContactInfo] = None
    summary: Optional[str] = None
    education: Optional[List[EducationEntry]] = None
    experience: Optional[List[ExperienceEntry]] = None
    skills: Optional[List[str]] = None
    languages: Optional[List[LanguageEntry]] = None
    certifications: Optional[List[CertificationEntry]] = None
    projects: Optional[List[ProjectEntry]] = None
    awards: Optional[List[str]] = None
    volunteer: Optional[List[str]] = None
    hobbies: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeRecord":
        """
        Build a record from a stored document.

        Accepts camelCase keys as stored and their snake_case equivalents.
        Storage bookkeeping keys (_id, userId, createdAt, ...) are ignored.

        Raises:
            ValueError: If a date or GPA value cannot be interpreted
        """
        contact = data.get("contact")
        return cls(
            name=_text(data.get("name")),
            template_id=_text(_get(data, "templateId", "template_id")),
            contact=ContactInfo.from_dict(contact) if isinstance(contact, Mapping) else None,
            summary=_text(data.get("summary")),
            education=_entries(data.get("education"), EducationEntry, "education"),
            experience=_entries(data.get("experience"), ExperienceEntry, "experience"),
            skills=_string_list(data.get("skills")),
            languages=_entries(data.get("languages"), LanguageEntry, "languages"),
            certifications=_entries(data.get("certifications"), CertificationEntry, "certifications"),
            projects=_entries(data.get("projects"), ProjectEntry, "projects"),
            awards=_string_list(data.get("awards")),
            volunteer=_string_list(data.get("volunteer")),
            hobbies=_string_list(data.get("hobbies")),
        )

    @property
    def display_name(self) -> str:
        return self.name or "Resume"

    def to_summary(self) -> Dict[str, Any]:
        """Counts of populated sections, used for logging."""
        return {
            "education": len(self.education or []),
            "experience": len(self.experience or []),
            "skills": len(self.skills or []),
            "certifications": len(self.certifications or []),
            "projects": len(self.projects or []),
        }
