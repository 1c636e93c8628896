# company_site/domain/exceptions.py
from __future__ import annotations


class CompanyNotFound(LookupError):
    """The company lookup yielded nothing; composition never starts."""

    def __init__(self, identifier: str):
        super().__init__(f"Company not found: {identifier}")
        self.identifier = identifier


class SlugConflict(ValueError):
    def __init__(self, slug: str):
        super().__init__(f"Slug already exists: {slug}")
        self.slug = slug


class RenderFailure(RuntimeError):
    """
    The view renderer could not produce a document.

    Templates are static configuration, so this is never retried.
    """

    def __init__(self, template_path: str):
        super().__init__(f"Failed to render template: {template_path}")
        self.template_path = template_path
