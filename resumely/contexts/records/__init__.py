"""
Records Context

Responsibilities:
- Defines the stored shape of resume documents (legacy and extended variants)
- Loads resume records from exported YAML/JSON files

Owns: Resume record data structures
Never: Decides how absent fields are displayed
"""

from resumely.contexts.records.loader import load_resume_record
from resumely.contexts.records.resume_record import (
    Address,
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    EmploymentType,
    ExperienceEntry,
    LanguageEntry,
    Proficiency,
    ProjectEntry,
    ResumeRecord,
)

__all__ = [
    "load_resume_record",
    "Address",
    "CertificationEntry",
    "ContactInfo",
    "EducationEntry",
    "EmploymentType",
    "ExperienceEntry",
    "LanguageEntry",
    "Proficiency",
    "ProjectEntry",
    "ResumeRecord",
]
