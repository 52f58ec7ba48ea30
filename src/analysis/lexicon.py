"""Static tables used by the rule-based analysis stages

Everything here is read-only and shared between calls. Components take these
tables as constructor defaults so tests or real backends can substitute them.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from src.core.models import Department, SupportedLanguage


class ScriptRange(NamedTuple):
    """Unicode block that identifies a language when any character falls in it"""
    language: SupportedLanguage
    first: str
    last: str


class Phrase(NamedTuple):
    """Phrase table entry with one variant per supported language"""
    en: str
    hi: str
    ta: str

    def variant(self, language: SupportedLanguage) -> str:
        return getattr(self, language)


class DepartmentInfo(NamedTuple):
    code: str
    name: str


# Checked in order: Hindi wins over Tamil for mixed-script text
SCRIPT_RANGES: Tuple[ScriptRange, ...] = (
    ScriptRange("hi", "\u0900", "\u097f"),
    ScriptRange("ta", "\u0b80", "\u0bff"),
)

PHRASE_TABLE: Tuple[Phrase, ...] = (
    Phrase("water problem", "पानी की समस्या", "தண்ணீர் பிரச்சனை"),
    Phrase("electricity issue", "बिजली की समस्या", "மின்சார பிரச்சனை"),
    Phrase("road maintenance", "सड़क रखरखाव", "சாலை பராமரிப்பு"),
)

NEGATIVE_WORDS: frozenset = frozenset({
    "issue", "problem", "broken", "terrible", "bad",
    "urgent", "emergency", "dangerous", "unsafe", "critical",
})

# Keyword urgency model
URGENT_KEYWORDS: Tuple[str, ...] = (
    "urgent", "emergency", "immediately", "danger", "critical", "life-threatening",
    "severe", "serious", "dying", "death", "fatal", "collapse", "accident",
)
COMPLAINT_KEYWORDS: Tuple[str, ...] = (
    "bad", "poor", "terrible", "awful", "horrible", "disgusting",
    "broken", "faulty", "useless", "damaged", "corrupt", "failed",
)

# Evaluation order matters: on equal counts the earlier department wins
DEPARTMENT_KEYWORDS: Tuple[Tuple[Department, Tuple[str, ...]], ...] = (
    (Department.WATER, ("water", "pipe", "leak", "tap", "supply", "drainage", "sewage", "flood")),
    (Department.ELECTRICITY, ("electricity", "power", "outage", "blackout", "voltage", "electric", "light", "transformer")),
    (Department.ROADS, ("road", "street", "pothole", "highway", "traffic", "signal", "construction", "bridge")),
    (Department.SANITATION, ("garbage", "waste", "trash", "clean", "sanitation", "dump", "collection")),
    (Department.PUBLIC_HEALTH, ("hospital", "clinic", "health", "medical", "doctor", "disease", "treatment")),
    (Department.EDUCATION, ("school", "college", "education", "university", "teacher", "student", "classroom")),
    (Department.TRANSPORT, ("bus", "train", "transport", "metro", "vehicle", "schedule", "delay")),
    (Department.HOUSING, ("house", "apartment", "building", "lease", "rent", "construction", "roof")),
    (Department.LAND, ("land", "property", "ownership", "survey", "title", "deed", "encroachment")),
    (Department.GENERAL, ("general", "administration", "complaint", "government", "official", "corruption")),
)

DEPARTMENT_DIRECTORY: Mapping[Department, DepartmentInfo] = MappingProxyType({
    Department.WATER: DepartmentInfo("WATER", "Water Department"),
    Department.ELECTRICITY: DepartmentInfo("ELEC", "Electricity Department"),
    Department.ROADS: DepartmentInfo("ROADS", "Roads & Infrastructure"),
    Department.SANITATION: DepartmentInfo("SANIT", "Sanitation Department"),
    Department.PUBLIC_HEALTH: DepartmentInfo("HEALTH", "Public Health Department"),
    Department.EDUCATION: DepartmentInfo("EDU", "Education Department"),
    Department.TRANSPORT: DepartmentInfo("TRANS", "Transport Department"),
    Department.HOUSING: DepartmentInfo("HOUSE", "Housing Department"),
    Department.LAND: DepartmentInfo("LAND", "Land & Revenue Department"),
    Department.GENERAL: DepartmentInfo("GEN", "General Administration"),
})


def department_info(department: Department) -> DepartmentInfo:
    """Routing code and display name of a department"""
    return DEPARTMENT_DIRECTORY[Department(department)]
