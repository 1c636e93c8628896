# company_site/domain/company.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# "header1" -> ("header", "1"), "footer 2" -> ("footer", "2")
_TRAILING_NUMBER = re.compile(r"^(?P<stem>.*?\D)\s*(?P<number>\d+)$")


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class TemplateRef:
    """
    Reference from a section to the partial that renders it.

    Two ways to get a path out of it:
    - composite_path: "<category>/<template_name>", bypassing the registry
    - section_label: the free-text key looked up in the TemplateRegistry
    """

    category: Optional[str] = None
    template_name: Optional[str] = None
    label: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "TemplateRef":
        if not raw:
            return cls()
        return cls(
            category=_clean(raw.get("category")),
            template_name=_clean(raw.get("template_name")),
            label=_clean(raw.get("label")),
        )

    @property
    def composite_path(self) -> Optional[str]:
        if not self.category or not self.template_name:
            return None
        return f"{self.category}/{self.template_name}"

    @property
    def section_label(self) -> Optional[str]:
        if self.label:
            return self.label
        if not self.template_name:
            return None

        match = _TRAILING_NUMBER.match(self.template_name)
        if not match:
            return self.template_name
        return f"{match.group('stem').strip()} {match.group('number')}"

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "category": self.category,
            "template_name": self.template_name,
            "label": self.label,
        }


@dataclass(frozen=True)
class Theme:
    colors: Dict[str, Any] = field(default_factory=dict)
    fonts: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "Theme":
        if not raw:
            return cls()
        return cls(
            colors=dict(raw.get("colors") or {}),
            fonts=dict(raw.get("fonts") or {}),
        )

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return {"colors": dict(self.colors), "fonts": dict(self.fonts)}


@dataclass(frozen=True)
class SectionRecord:
    template: TemplateRef
    data: Dict[str, Any] = field(default_factory=dict)
    # Raw stored value; the resolver decides whether it is usable.
    order: Any = 0
    id: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "SectionRecord":
        data = raw.get("data")
        return cls(
            template=TemplateRef.from_mapping(raw.get("template")),
            data=dict(data) if isinstance(data, Mapping) else {},
            order=raw.get("order", 0),
            id=raw.get("id"),
        )


@dataclass(frozen=True)
class CompanyRecord:
    """Read-only view of a company, as handed to the composition engine."""

    slug: str
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    logo: Optional[str] = None
    theme: Theme = field(default_factory=Theme)
    sections: Tuple[SectionRecord, ...] = ()
    id: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "CompanyRecord":
        return cls(
            slug=raw["slug"],
            name=raw.get("name"),
            address=raw.get("address"),
            phone=raw.get("phone"),
            logo=raw.get("logo"),
            theme=Theme.from_mapping(raw.get("theme")),
            sections=tuple(
                SectionRecord.from_mapping(s) for s in raw.get("sections") or ()
            ),
            id=raw.get("id"),
        )

    def attributes(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "address": self.address,
            "phone": self.phone,
            "logo": self.logo,
            "slug": self.slug,
            "theme": self.theme.as_dict(),
        }
