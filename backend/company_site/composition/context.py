# company_site/composition/context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import current_app

from company_site.composition.composer import PageComposer
from company_site.composition.registry import TemplateRegistry
from company_site.composition.renderer import ViewRenderer
from company_site.composition.resolver import SectionResolver
from company_site.repositories.company import CompanyRepository

EXTENSION_KEY = "company_site"


@dataclass(frozen=True)
class CompositionContext:
    """
    Collaborators of the page-composition pipeline.

    Built once by the app factory and passed into every render call.
    """

    repository: CompanyRepository
    registry: TemplateRegistry
    resolver: SectionResolver
    composer: PageComposer
    renderer: ViewRenderer
    layout_template: str = "layout.html"
    direct_template: str = "render.html"
    partial_extension: str = ".html"

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        *,
        repository: CompanyRepository,
        renderer: ViewRenderer,
    ) -> "CompositionContext":
        registry = TemplateRegistry.from_config(config)

        return cls(
            repository=repository,
            registry=registry,
            resolver=SectionResolver(registry),
            composer=PageComposer(config.get("BASE_URL", "")),
            renderer=renderer,
            layout_template=config.get("LAYOUT_TEMPLATE", "layout.html"),
            direct_template=config.get("DIRECT_TEMPLATE", "render.html"),
            partial_extension=config.get("PARTIAL_EXTENSION", ".html"),
        )


def get_composition_context() -> CompositionContext:
    return current_app.extensions[EXTENSION_KEY]
