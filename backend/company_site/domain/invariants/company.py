import re
from collections.abc import Mapping
from .section import assert_section
from .exceptions import InvariantViolation

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
TEXT_FIELDS = ("name", "address", "phone", "logo")
THEME_KEYS = {"colors", "fonts"}

# First path segments owned by fixed routes; a company there could never render
RESERVED_SLUGS = {"company", "render", "templates", "assets", "ping", "health"}


def assert_slug(slug):
    if not slug:
        raise InvariantViolation("Company slug is required.")

    if not isinstance(slug, str) or not SLUG_PATTERN.match(slug):
        raise InvariantViolation(
            f"Company slug must be lowercase letters, digits and single hyphens: {slug!r}"
        )

    if slug in RESERVED_SLUGS:
        raise InvariantViolation(f"Company slug is reserved: {slug!r}")


def assert_theme(theme):
    if theme is None:
        return

    if not isinstance(theme, Mapping):
        raise InvariantViolation("Theme must be an object.")

    unknown = set(theme) - THEME_KEYS
    if unknown:
        raise InvariantViolation(f"Unknown theme keys: {sorted(unknown)}")

    for key in THEME_KEYS:
        value = theme.get(key)
        if value is not None and not isinstance(value, Mapping):
            raise InvariantViolation(f"Theme {key} must be an object.")


def assert_company(data, partial=False):
    """
    Validates a company payload before it reaches the store.

    partial=True is used for updates, where slug may be omitted.
    """
    if not isinstance(data, Mapping):
        raise InvariantViolation("Company payload must be an object.")

    if not partial or "slug" in data:
        assert_slug(data.get("slug"))

    for key in TEXT_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise InvariantViolation(f"Company {key} must be a string.")

    assert_theme(data.get("theme"))

    sections = data.get("sections")
    if sections is None:
        return

    if not isinstance(sections, list):
        raise InvariantViolation("Company sections must be a list.")

    for section in sections:
        assert_section(section)
