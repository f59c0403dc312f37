"""Resume data model following the resume.json layout, loaded from YAML or JSON."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

import yaml


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps dates and timestamps as the strings written."""


_Loader.yaml_implicit_resolvers = {
    first: [
        (tag, pattern)
        for tag, pattern in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _as_text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"field '{key}' must be a scalar, not {type(value).__name__}")


def _as_texts(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list, not {type(value).__name__}")
    return [_as_text(item, key) for item in value]


def _text(key: str) -> Any:
    return field(default="", metadata={"key": key, "load": _as_text, "export": str})


def _texts(key: str) -> Any:
    return field(
        default_factory=list,
        metadata={"key": key, "load": _as_texts, "export": list},
    )


def _section(key: str, cls: type) -> Any:
    return field(
        default_factory=cls,
        metadata={
            "key": key,
            "load": cls._from_mapping,
            "export": lambda section: section._context(),
        },
    )


def _sections(key: str, cls: type) -> Any:
    def load(value: Any, name: str) -> list:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(
                f"field '{name}' must be a list, not {type(value).__name__}"
            )
        return [cls._from_mapping(item, name) for item in value]

    return field(
        default_factory=list,
        metadata={
            "key": key,
            "load": load,
            "export": lambda items: [item._context() for item in items],
        },
    )


class _Section:
    """Shared loading and context export for resume sections."""

    @classmethod
    def _from_mapping(cls, data: Any, key: str = "resume"):
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(
                f"field '{key}' must be a mapping, not {type(data).__name__}"
            )
        values = {}
        for spec in fields(cls):
            name = spec.metadata["key"]
            if name in data:
                values[spec.name] = spec.metadata["load"](data[name], name)
        return cls(**values)

    def _context(self) -> dict[str, Any]:
        return {
            spec.metadata["key"]: spec.metadata["export"](getattr(self, spec.name))
            for spec in fields(self)
        }


@dataclass
class Location(_Section):
    address: str = _text("address")
    postal_code: str = _text("postalCode")
    city: str = _text("city")
    country_code: str = _text("countryCode")
    region: str = _text("region")


@dataclass
class Profile(_Section):
    network: str = _text("network")
    username: str = _text("username")
    url: str = _text("url")


@dataclass
class Basics(_Section):
    name: str = _text("name")
    label: str = _text("label")
    image: str = _text("image")
    email: str = _text("email")
    phone: str = _text("phone")
    url: str = _text("url")
    summary: str = _text("summary")
    location: Location = _section("location", Location)
    profiles: list[Profile] = _sections("profiles", Profile)


@dataclass
class Work(_Section):
    name: str = _text("name")
    position: str = _text("position")
    url: str = _text("url")
    start_date: str = _text("startDate")
    end_date: str = _text("endDate")
    summary: str = _text("summary")
    highlights: list[str] = _texts("highlights")


@dataclass
class Volunteer(_Section):
    organization: str = _text("organization")
    position: str = _text("position")
    url: str = _text("url")
    start_date: str = _text("startDate")
    end_date: str = _text("endDate")
    summary: str = _text("summary")
    highlights: list[str] = _texts("highlights")


@dataclass
class Education(_Section):
    institution: str = _text("institution")
    url: str = _text("url")
    area: str = _text("area")
    study_type: str = _text("studyType")
    start_date: str = _text("startDate")
    end_date: str = _text("endDate")
    score: str = _text("score")
    courses: list[str] = _texts("courses")


@dataclass
class Award(_Section):
    title: str = _text("title")
    awarder: str = _text("awarder")
    date: str = _text("date")
    summary: str = _text("summary")


@dataclass
class Certificate(_Section):
    name: str = _text("name")
    date: str = _text("date")
    issuer: str = _text("issuer")
    url: str = _text("url")


@dataclass
class Publication(_Section):
    name: str = _text("name")
    publisher: str = _text("publisher")
    release_date: str = _text("releaseDate")
    url: str = _text("url")
    summary: str = _text("summary")


@dataclass
class Skill(_Section):
    name: str = _text("name")
    level: str = _text("level")
    keywords: list[str] = _texts("keywords")


@dataclass
class Language(_Section):
    language: str = _text("language")
    fluency: str = _text("fluency")


@dataclass
class Interest(_Section):
    name: str = _text("name")
    keywords: list[str] = _texts("keywords")


@dataclass
class Reference(_Section):
    name: str = _text("name")
    reference: str = _text("reference")


@dataclass
class Project(_Section):
    name: str = _text("name")
    start_date: str = _text("startDate")
    end_date: str = _text("endDate")
    description: str = _text("description")
    highlights: list[str] = _texts("highlights")
    url: str = _text("url")


@dataclass
class Resume(_Section):
    basics: Basics = _section("basics", Basics)
    awards: list[Award] = _sections("awards", Award)
    work: list[Work] = _sections("work", Work)
    volunteer: list[Volunteer] = _sections("volunteer", Volunteer)
    education: list[Education] = _sections("education", Education)
    certificates: list[Certificate] = _sections("certificates", Certificate)
    publications: list[Publication] = _sections("publications", Publication)
    skills: list[Skill] = _sections("skills", Skill)
    languages: list[Language] = _sections("languages", Language)
    interests: list[Interest] = _sections("interests", Interest)
    references: list[Reference] = _sections("references", Reference)
    projects: list[Project] = _sections("projects", Project)

    def export_context(self) -> dict[str, Any]:
        """Return the template context, keyed by the resume.json field names."""
        return self._context()


def load_resume(data: Any) -> Resume:
    """Build a Resume from already parsed data; raise ValueError on bad shapes."""
    return Resume._from_mapping(data)


def parse_resume(text: str | bytes) -> Resume:
    """Parse YAML (or JSON) text into a Resume; raise ValueError if invalid."""
    try:
        data = yaml.load(text, Loader=_Loader)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    return load_resume(data)