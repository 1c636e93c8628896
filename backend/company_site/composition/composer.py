# company_site/composition/composer.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from company_site.composition.resolver import (
    RenderDescriptor,
    RenderPlan,
    UnresolvedSection,
)
from company_site.domain.company import CompanyRecord


@dataclass(frozen=True)
class PageContext:
    """Everything a view needs to render one company page."""

    company: Dict[str, Any]
    canonical_url: str
    sections: Tuple[RenderDescriptor, ...] = ()
    diagnostics: Tuple[UnresolvedSection, ...] = field(default=(), compare=False)

    @property
    def slug(self) -> str:
        return self.company["slug"]

    def layout_context(self, section_map: Mapping[str, str]) -> Dict[str, Any]:
        """Context for layout.html: {data, sectionMap}."""
        data = dict(self.company)
        data["url"] = self.canonical_url
        data["sections"] = [descriptor.as_context() for descriptor in self.sections]

        return {"data": data, "sectionMap": dict(section_map)}

    def direct_context(self) -> Dict[str, Any]:
        """Context for render.html: flat {sections, company}."""
        sections = []
        for descriptor in self.sections:
            section = descriptor.as_context()
            section["temp_location"] = descriptor.path
            sections.append(section)

        company = dict(self.company)
        company["url"] = self.canonical_url

        return {"sections": sections, "company": company}


class PageComposer:
    """
    Merges a company's attributes with its resolved render plan.

    Pure transformation; only call it with a company that exists.
    """

    def __init__(self, base_url: str = ""):
        self.base_url = (base_url or "").rstrip("/")

    def canonical_url(self, request_path: str) -> str:
        if not request_path.startswith("/"):
            request_path = "/" + request_path
        return self.base_url + request_path

    def compose(
        self,
        company: CompanyRecord,
        plan: RenderPlan,
        request_path: str,
    ) -> PageContext:
        return PageContext(
            company=company.attributes(),
            canonical_url=self.canonical_url(request_path),
            sections=plan.descriptors,
            diagnostics=plan.diagnostics,
        )
