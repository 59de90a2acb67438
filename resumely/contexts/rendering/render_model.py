"""
Render Model

Read-only, presentation-ready projection of a ResumeRecord. Built once per
render call, never mutated afterwards, and never written back to storage.

All display decisions are taken here, before any drawing:
- Absent fields are replaced by placeholder content (when placeholders are enabled)
- Explicitly empty lists stay empty, so their sections are skipped
- Dates become "{Mon} {YYYY}" strings, with "Present" for ongoing entries

Section renderers therefore never branch on missing record data mid-layout.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from resumely.contexts.records.resume_record import (
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from resumely.contexts.rendering.defaults import Placeholders
from resumely.utils.timestamp import format_month_year

PRESENT = "Present"


def format_date_range(
    start: Optional[date], end: Optional[date], ongoing: bool = False
) -> Optional[str]:
    """
    Format a start/end pair as "{Mon} {YYYY} - {Mon} {YYYY}".

    Args:
        start: Start date (None = unknown)
        end: End date (ignored when ongoing)
        ongoing: Display "Present" as the end bound regardless of end

    Returns:
        Range string, a single bound when only one is known, or None
    """
    start_text = format_month_year(start)
    end_text = PRESENT if ongoing else format_month_year(end)

    if start_text and end_text:
        return f"{start_text} - {end_text}"
    return start_text or end_text


def format_gpa(gpa: float) -> str:
    """Drop a trailing ".0" the way stored numbers print (4.0 -> "4", 3.75 -> "3.75")."""
    return f"{gpa:g}"


@dataclass(frozen=True)
class ExperienceView:
    heading: str
    dates: Optional[str] = None
    details: Tuple[str, ...] = ()
    description: Optional[str] = None
    achievements: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    skills_used: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EducationView:
    heading: str
    institution: Optional[str] = None
    dates: Optional[str] = None
    major: Optional[str] = None
    gpa: Optional[str] = None
    honors: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class CertificationView:
    heading: str
    dates: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ProjectView:
    name: str
    dates: Optional[str] = None
    description: Optional[str] = None
    technologies: Tuple[str, ...] = ()
    link: Optional[str] = None


@dataclass(frozen=True)
class RenderModel:
    """
    Normalized resume content ready for layout.

    Attributes:
        name: Name drawn in the header
        contact: Ordered contact items (phone, email, address, LinkedIn, website)
        summary: Professional summary, or None to skip the section
        skills, awards, volunteer, hobbies: Flat item lists (empty = skip section)
        experience, education, certifications, projects: Entry views
        languages: Preformatted "Name (Proficiency)" strings
        generated_on: Date printed in the footer
    """

    name: str
    generated_on: date
    contact: Tuple[str, ...] = ()
    summary: Optional[str] = None
    skills: Tuple[str, ...] = ()
    experience: Tuple[ExperienceView, ...] = ()
    education: Tuple[EducationView, ...] = ()
    languages: Tuple[str, ...] = ()
    certifications: Tuple[CertificationView, ...] = ()
    projects: Tuple[ProjectView, ...] = ()
    awards: Tuple[str, ...] = ()
    volunteer: Tuple[str, ...] = ()
    hobbies: Tuple[str, ...] = ()


def _contact_items(contact: Optional[ContactInfo], placeholders: Optional[Placeholders]) -> Tuple[str, ...]:
    contact = contact or ContactInfo()
    items = []

    phone = contact.phone or (placeholders.phone if placeholders else None)
    if phone:
        items.append(phone)
    if contact.email:
        items.append(contact.email)
    if contact.address:
        address_parts = contact.address.parts()
        if address_parts:
            items.append(", ".join(address_parts))
    if contact.linkedin:
        items.append(contact.linkedin)
    if contact.website:
        items.append(contact.website)

    return tuple(items)


def _experience_view(entry: ExperienceEntry) -> ExperienceView:
    if entry.position and entry.company:
        heading = f"{entry.position} at {entry.company}"
    else:
        heading = entry.position or entry.company or ""

    details = []
    if entry.employment_type:
        details.append(entry.employment_type.label)
    if entry.location:
        details.append(entry.location)

    return ExperienceView(
        heading=heading,
        dates=format_date_range(entry.start_date, entry.end_date, ongoing=entry.current),
        details=tuple(details),
        description=entry.description,
        achievements=tuple(entry.achievements),
        projects=tuple(entry.projects),
        skills_used=tuple(entry.skills_used),
    )


def _placeholder_experience(placeholders: Placeholders) -> ExperienceView:
    job = placeholders.job
    return ExperienceView(heading=f"{job.position} at {job.company}", description=job.description)


def _education_view(entry: EducationEntry) -> EducationView:
    if entry.degree and entry.field:
        heading = f"{entry.degree} in {entry.field}"
    else:
        heading = entry.degree or entry.field or entry.institution or ""

    institution = entry.institution
    if institution and entry.location:
        institution = f"{institution}, {entry.location}"

    # No end date on a started degree means it is still in progress
    ongoing = entry.start_date is not None and entry.end_date is None

    return EducationView(
        heading=heading,
        institution=institution,
        dates=format_date_range(entry.start_date, entry.end_date, ongoing=ongoing),
        major=entry.major,
        gpa=format_gpa(entry.gpa) if entry.gpa is not None else None,
        honors=entry.honors,
        description=entry.description,
    )


def _certification_view(entry: CertificationEntry) -> CertificationView:
    heading = " - ".join(part for part in (entry.name, entry.issuer) if part)

    dates = format_month_year(entry.issue_date)
    expiry = format_month_year(entry.expiry_date)
    if expiry:
        dates = f"{dates} | Expires {expiry}" if dates else f"Expires {expiry}"

    return CertificationView(heading=heading, dates=dates, description=entry.description)


def _project_view(entry: ProjectEntry) -> ProjectView:
    return ProjectView(
        name=entry.name or "",
        dates=format_date_range(entry.start_date, entry.end_date),
        description=entry.description,
        technologies=tuple(entry.technologies),
        link=entry.link,
    )


def build_render_model(
    record: ResumeRecord,
    placeholders: Optional[Placeholders] = None,
    generated_on: Optional[date] = None,
) -> RenderModel:
    """
    Project a resume record into a RenderModel.

    Args:
        record: Resume record as loaded from storage (not modified)
        placeholders: Stand-in content for absent name, phone, summary, skills,
                      and work history. None disables substitution.
        generated_on: Footer date (default: today)

    Returns:
        Frozen RenderModel
    """
    name = record.name or (placeholders.name if placeholders else record.display_name)

    summary = record.summary
    if summary is None and placeholders:
        summary = placeholders.summary

    skills = record.skills
    if skills is None:
        skills = list(placeholders.skills) if placeholders else []

    if record.experience is None:
        experience = (_placeholder_experience(placeholders),) if placeholders else ()
    else:
        experience = tuple(_experience_view(entry) for entry in record.experience)

    languages = tuple(
        f"{language.name} ({language.proficiency.value.capitalize()})"
        for language in record.languages or []
        if language.name
    )

    return RenderModel(
        name=name,
        generated_on=generated_on or date.today(),
        contact=_contact_items(record.contact, placeholders),
        summary=summary,
        skills=tuple(skills),
        experience=experience,
        education=tuple(_education_view(entry) for entry in record.education or []),
        languages=languages,
        certifications=tuple(
            _certification_view(entry) for entry in record.certifications or [] if entry.name
        ),
        projects=tuple(_project_view(entry) for entry in record.projects or [] if entry.name),
        awards=tuple(record.awards or ()),
        volunteer=tuple(record.volunteer or ()),
        hobbies=tuple(record.hobbies or ()),
    )
