# company_site/domain/section_data.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Union


class SectionDataError(ValueError):
    pass


@dataclass(frozen=True)
class Link:
    label: str
    href: str

    def as_dict(self) -> Dict[str, str]:
        return {"label": self.label, "href": self.href}


@dataclass(frozen=True)
class HeaderData:
    kind: ClassVar[str] = "header"

    title: Optional[str] = None
    tagline: Optional[str] = None
    links: Tuple[Link, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_context(self) -> Dict[str, Any]:
        return {
            **self.extra,
            "title": self.title,
            "tagline": self.tagline,
            "links": [link.as_dict() for link in self.links],
        }


@dataclass(frozen=True)
class FooterData:
    kind: ClassVar[str] = "footer"

    text: Optional[str] = None
    links: Tuple[Link, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_context(self) -> Dict[str, Any]:
        return {
            **self.extra,
            "text": self.text,
            "links": [link.as_dict() for link in self.links],
        }


@dataclass(frozen=True)
class OpaqueData:
    """Fallback for categories without a schema; raw data passes through."""

    kind: ClassVar[str] = "opaque"

    values: Dict[str, Any] = field(default_factory=dict)

    def as_context(self) -> Dict[str, Any]:
        return dict(self.values)


SectionData = Union[HeaderData, FooterData, OpaqueData]


def _optional_text(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SectionDataError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _links(raw: Mapping[str, Any]) -> Tuple[Link, ...]:
    value = raw.get("links")
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise SectionDataError("'links' must be a list")

    links = []
    for position, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise SectionDataError(f"links[{position}] must be an object")
        label, href = item.get("label"), item.get("href")
        if not isinstance(label, str) or not isinstance(href, str):
            raise SectionDataError(f"links[{position}] needs string 'label' and 'href'")
        links.append(Link(label=label, href=href))
    return tuple(links)


def _extra(raw: Mapping[str, Any], known: Tuple[str, ...]) -> Dict[str, Any]:
    return {key: value for key, value in raw.items() if key not in known}


def _parse_header(raw: Mapping[str, Any]) -> HeaderData:
    return HeaderData(
        title=_optional_text(raw, "title"),
        tagline=_optional_text(raw, "tagline"),
        links=_links(raw),
        extra=_extra(raw, ("title", "tagline", "links")),
    )


def _parse_footer(raw: Mapping[str, Any]) -> FooterData:
    return FooterData(
        text=_optional_text(raw, "text"),
        links=_links(raw),
        extra=_extra(raw, ("text", "links")),
    )


SECTION_DATA_PARSERS: Dict[str, Callable[[Mapping[str, Any]], SectionData]] = {
    "header": _parse_header,
    "footer": _parse_footer,
}


def parse_section_data(
    category: Optional[str],
    raw: Optional[Mapping[str, Any]],
) -> Tuple[SectionData, Optional[str]]:
    """
    Parse a section payload into the variant for its category.

    Returns (data, error). A payload that fails validation comes back as
    OpaqueData together with the validation message, so the section can
    still render.
    """
    raw = dict(raw or {})
    parser = SECTION_DATA_PARSERS.get((category or "").lower())
    if parser is None:
        return OpaqueData(values=raw), None

    try:
        return parser(raw), None
    except SectionDataError as exc:
        return OpaqueData(values=raw), str(exc)
