# company_site/composition/registry.py
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


def normalize_label(label: str) -> str:
    """'Header  1 ' and 'header 1' name the same section."""
    return " ".join(label.split()).casefold()


class TemplateRegistry:
    """
    Static mapping from a section label ("header 1") to a partial path
    ("header/header1.html").

    Built once at startup and never mutated, so it is safe to share across
    requests and threads without locking.
    """

    def __init__(self, templates: Mapping[str, str]):
        labels = {}
        paths = {}

        for label, path in templates.items():
            if not isinstance(label, str) or not label.strip():
                raise ValueError(f"Invalid section label: {label!r}")
            if not isinstance(path, str) or not path.strip():
                raise ValueError(f"Invalid template path for {label!r}: {path!r}")

            key = normalize_label(label)
            if key in paths:
                raise ValueError(f"Duplicate section label: {label!r}")

            labels[label] = path
            paths[key] = path

        self._labels = MappingProxyType(labels)
        self._paths = MappingProxyType(paths)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "TemplateRegistry":
        return cls(config.get("SECTION_TEMPLATES") or {})

    def resolve(self, label: Optional[str]) -> Optional[str]:
        if not label:
            return None
        return self._paths.get(normalize_label(label))

    def labels(self) -> Tuple[str, ...]:
        return tuple(self._labels)

    def as_mapping(self) -> Mapping[str, str]:
        return self._labels

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.resolve(label) is not None

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"TemplateRegistry({dict(self._labels)!r})"
