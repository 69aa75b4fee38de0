# graphlearn/domain/policies/material_filter.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from graphlearn.domain.entities.material import Material

ALL_CATEGORIES = "all"

_CATEGORY_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        ALL_CATEGORIES: "All materials",
        "basics": "Basics",
        "algorithms": "Algorithms",
        "applications": "Applications",
        "advanced": "Advanced topics",
    },
    "uk": {
        ALL_CATEGORIES: "Всі матеріали",
        "basics": "Основи",
        "algorithms": "Алгоритми",
        "applications": "Застосування",
        "advanced": "Додаткові теми",
    },
}


@dataclass(frozen=True)
class CategoryOption:
    id: str
    label: str


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().casefold()


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").casefold()


def search_materials(materials: Sequence[Material], query: Optional[str]) -> Sequence[Material]:
    """
    Substring search over title, description and category (case-insensitive).
    An empty query hands back the very same collection object.
    """
    if not query:
        return materials
    q = query.casefold()
    return [
        m for m in materials
        if _contains(m.title, q) or _contains(m.description, q) or _contains(m.category, q)
    ]


def matches(material: Material, query: str, category: str) -> bool:
    """`query` must already be normalized (see normalize_query)."""
    if category != ALL_CATEGORIES and material.category != category:
        return False
    if not query:
        return True
    return _contains(material.title, query) or _contains(material.description, query)


def filter_materials(
    materials: Iterable[Material],
    query: Optional[str] = "",
    category: Optional[str] = ALL_CATEGORIES,
) -> List[Material]:
    """
    Visible subset for the list view: title/description contains the query
    AND the category equals the selection ("all" matches everything).
    Original collection order is preserved; an empty result is valid.
    """
    q = normalize_query(query)
    cat = (category or ALL_CATEGORIES).strip() or ALL_CATEGORIES
    return [m for m in materials if matches(m, q, cat)]


def recent_shortcuts(items: Sequence[Material], limit: int = 3) -> List[Material]:
    if limit <= 0:
        return []
    return list(items[:limit])


def label_for_category(category_id: str, locale: str = "en") -> str:
    labels = _CATEGORY_LABELS.get(locale, _CATEGORY_LABELS["en"])
    # unknown categories stay filterable, they just have no curated label
    return labels.get(category_id, category_id)


def category_options(category_ids: Iterable[str], locale: str = "en") -> List[CategoryOption]:
    out = [CategoryOption(id=ALL_CATEGORIES, label=label_for_category(ALL_CATEGORIES, locale))]
    for cid in category_ids:
        if cid == ALL_CATEGORIES:
            continue
        out.append(CategoryOption(id=cid, label=label_for_category(cid, locale)))
    return out


def unknown_categories(materials: Iterable[Material], known: Iterable[str]) -> List[str]:
    known_set = set(known)
    return sorted({m.category for m in materials if m.category not in known_set})
