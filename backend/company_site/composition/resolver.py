# company_site/composition/resolver.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from company_site.composition.registry import TemplateRegistry
from company_site.domain.company import SectionRecord
from company_site.domain.section_data import SectionData, parse_section_data

logger = logging.getLogger(__name__)


class ResolutionMode(str, Enum):
    # label looked up in the TemplateRegistry, rendered by layout.html
    LAYOUT = "layout"
    # "<category>/<template_name>" composite path, rendered by render.html
    DIRECT = "direct"


@dataclass(frozen=True)
class RenderDescriptor:
    path: str
    data: SectionData
    order: int
    template: Dict[str, Optional[str]] = field(default_factory=dict)
    label: Optional[str] = None
    section_id: Optional[str] = None
    # Set when the payload failed its schema and fell back to raw data.
    data_error: Optional[str] = None

    @property
    def kind(self) -> str:
        return self.data.kind

    def as_context(self) -> Dict[str, Any]:
        return {
            "id": self.section_id,
            "path": self.path,
            "label": self.label,
            "kind": self.kind,
            "order": self.order,
            "template": dict(self.template),
            "data": self.data.as_context(),
        }


@dataclass(frozen=True)
class UnresolvedSection:
    """A section dropped from the plan; the page renders without it."""

    index: int
    order: Any
    reason: str
    reference: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "order": self.order,
            "reason": self.reason,
            "reference": self.reference,
        }


@dataclass(frozen=True)
class RenderPlan:
    mode: ResolutionMode
    descriptors: Tuple[RenderDescriptor, ...] = ()
    diagnostics: Tuple[UnresolvedSection, ...] = ()

    @property
    def paths(self) -> List[str]:
        return [descriptor.path for descriptor in self.descriptors]

    def __iter__(self) -> Iterator[RenderDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)


def _coerce_order(order: Any) -> Optional[int]:
    if order is None:
        return 0
    if isinstance(order, bool):
        return None
    if isinstance(order, int):
        return order
    if isinstance(order, float) and order.is_integer():
        return int(order)
    return None


def _safe_segment(value: str) -> bool:
    return value not in (".", "..") and "/" not in value and "\\" not in value


class SectionResolver:
    """
    Turns a company's stored sections into an ordered render plan.

    Sections are stable-sorted by order, so equal orders keep the order in
    which they were stored. A section that cannot be resolved is dropped and
    reported in RenderPlan.diagnostics; it never fails the page.
    """

    def __init__(self, registry: TemplateRegistry):
        self.registry = registry

    def resolve(
        self,
        sections: Iterable[SectionRecord],
        mode: ResolutionMode = ResolutionMode.LAYOUT,
        partial_exists: Optional[Callable[[str], bool]] = None,
    ) -> RenderPlan:
        """
        partial_exists, when given, is asked about each DIRECT composite path;
        sections whose partial is missing are dropped as "missing partial".
        """
        ordered: List[Tuple[int, int, SectionRecord]] = []
        dropped: List[UnresolvedSection] = []

        for index, section in enumerate(sections):
            order = _coerce_order(section.order)
            if order is None:
                dropped.append(
                    UnresolvedSection(index, section.order, "invalid order")
                )
                continue
            ordered.append((order, index, section))

        ordered.sort(key=lambda item: item[0])

        descriptors: List[RenderDescriptor] = []
        for order, index, section in ordered:
            try:
                path, label = self._path_for(section, mode, partial_exists)
            except _Unresolved as exc:
                dropped.append(
                    UnresolvedSection(index, section.order, exc.reason, exc.reference)
                )
                continue

            data, data_error = parse_section_data(
                section.template.category, section.data
            )
            if data_error:
                logger.warning(
                    "Section %s (%s) data does not match its schema, "
                    "rendering raw data: %s",
                    index,
                    path,
                    data_error,
                )

            descriptors.append(
                RenderDescriptor(
                    path=path,
                    data=data,
                    order=order,
                    template=section.template.as_dict(),
                    label=label,
                    section_id=section.id,
                    data_error=data_error,
                )
            )

        dropped.sort(key=lambda item: item.index)
        for item in dropped:
            logger.warning(
                "Dropping section %s (order=%r, mode=%s): %s [%s]",
                item.index,
                item.order,
                mode.value,
                item.reason,
                item.reference,
            )

        return RenderPlan(
            mode=mode,
            descriptors=tuple(descriptors),
            diagnostics=tuple(dropped),
        )

    def _path_for(
        self,
        section: SectionRecord,
        mode: ResolutionMode,
        partial_exists: Optional[Callable[[str], bool]] = None,
    ) -> Tuple[str, Optional[str]]:
        template = section.template

        if mode is ResolutionMode.DIRECT:
            if not template.category or not template.template_name:
                raise _Unresolved(
                    "missing category or template_name",
                    template.category or template.template_name,
                )
            if not (
                _safe_segment(template.category)
                and _safe_segment(template.template_name)
            ):
                raise _Unresolved("invalid path segment", template.composite_path)
            if partial_exists is not None and not partial_exists(template.composite_path):
                raise _Unresolved("missing partial", template.composite_path)
            return template.composite_path, template.section_label

        label = template.section_label
        if not label:
            raise _Unresolved("missing template label", None)

        path = self.registry.resolve(label)
        if path is None:
            raise _Unresolved("unknown template label", label)
        return path, label


class _Unresolved(Exception):
    def __init__(self, reason: str, reference: Optional[str]):
        super().__init__(reason)
        self.reason = reason
        self.reference = reference
