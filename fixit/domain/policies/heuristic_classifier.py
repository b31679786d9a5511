"""Local heuristic classifier — keyword scoring over the complaint text.

Pure function of (description, has_image): no I/O, deterministic, total.

Matching is lowercase substring containment, not tokenization, so a keyword
embedded in a longer word still counts ("leaking" contains "leak").
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from fixit.domain.entities.analysis_result import AnalysisResult, clamp_risk_score
from fixit.domain.value_objects.enums import Category, Priority


@dataclass(frozen=True)
class CategoryRule:
    category: Category
    keywords: tuple[str, ...]


# Table order is significant: on equal match counts the earlier rule wins.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(Category.PLUMBING, (
        "water", "leak", "pipe", "tap", "drain", "toilet", "flush",
        "overflow", "sewage", "bathroom",
    )),
    CategoryRule(Category.ELECTRICAL, (
        "light", "electric", "power", "switch", "socket", "fan", "wire",
        "short circuit", "bulb", "voltage", "current",
    )),
    CategoryRule(Category.CIVIL, (
        "wall", "crack", "ceiling", "floor", "roof", "door", "window",
        "broken", "damage", "structural", "paint", "concrete",
    )),
    CategoryRule(Category.HOUSEKEEPING, (
        "dirty", "clean", "garbage", "waste", "smell", "pest", "insect",
        "rat", "cockroach", "dust", "hygiene",
    )),
    CategoryRule(Category.IT_INFRASTRUCTURE, (
        "internet", "wifi", "network", "computer", "projector", "screen",
        "printer", "server", "laptop", "connection",
    )),
    CategoryRule(Category.FURNITURE, (
        "chair", "table", "bench", "desk", "cupboard", "shelf", "almirah",
        "broken furniture",
    )),
)

# ── Priority tiers (checked critical → high → low, default Medium) ──

CRITICAL_KEYWORDS: tuple[str, ...] = (
    "fire", "emergency", "gas leak", "explosion", "flood", "electrocution",
    "dangerous", "urgent", "immediately",
)

HIGH_KEYWORDS: tuple[str, ...] = (
    "severe", "major", "no water", "no power", "broken", "not working",
    "complete failure", "serious",
)

LOW_KEYWORDS: tuple[str, ...] = (
    "minor", "small", "slight", "little", "barely", "cosmetic",
)

PRIORITY_TIERS: tuple[tuple[Priority, tuple[str, ...]], ...] = (
    (Priority.CRITICAL, CRITICAL_KEYWORDS),
    (Priority.HIGH, HIGH_KEYWORDS),
    (Priority.LOW, LOW_KEYWORDS),
)

# ── Risk scoring ────────────────────────────────────────────────────

BASE_PRIORITY_SCORE = MappingProxyType({
    Priority.CRITICAL: 90,
    Priority.HIGH: 70,
    Priority.MEDIUM: 50,
    Priority.LOW: 25,
})

CATEGORY_BONUS = MappingProxyType({
    Category.ELECTRICAL: 15,
    Category.PLUMBING: 10,
    Category.CIVIL: 8,
    Category.HOUSEKEEPING: 5,
    Category.IT_INFRASTRUCTURE: 5,
    Category.FURNITURE: 3,
    Category.OTHERS: 0,
})

IMAGE_BONUS = 5


@dataclass(frozen=True)
class KeywordMatch:
    """Which keywords fired, per category and for the chosen priority tier."""

    category_hits: dict[Category, tuple[str, ...]]
    priority_hits: tuple[str, ...]


def _normalize(description: str | None) -> str:
    return (description or "").lower()


def _hits(text: str, keywords: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(kw for kw in keywords if kw in text)


def detect_category(description: str | None) -> Category:
    """Return the category whose rule has the strictly highest match count."""
    text = _normalize(description)
    detected = Category.OTHERS
    max_matches = 0
    for rule in CATEGORY_RULES:
        matches = len(_hits(text, rule.keywords))
        if matches > max_matches:
            max_matches = matches
            detected = rule.category
    return detected


def detect_priority(description: str | None) -> Priority:
    text = _normalize(description)
    for priority, keywords in PRIORITY_TIERS:
        if any(kw in text for kw in keywords):
            return priority
    return Priority.MEDIUM


def compute_risk_score(category: Category, priority: Priority, has_image: bool) -> int:
    """base[priority] + bonus[category] + image bonus, capped at 100."""
    image_bonus = IMAGE_BONUS if has_image else 0
    return clamp_risk_score(
        BASE_PRIORITY_SCORE[priority] + CATEGORY_BONUS.get(category, 0) + image_bonus
    )


def classify_locally(description: str | None, has_image: bool = False) -> AnalysisResult:
    """Classify a complaint without any remote call.

    Empty or keyword-free text yields Others / Medium.
    """
    category = detect_category(description)
    priority = detect_priority(description)
    risk_score = compute_risk_score(category, priority, has_image)
    return AnalysisResult.local(category, priority, risk_score)


def explain_match(description: str | None) -> KeywordMatch:
    text = _normalize(description)
    category_hits = {}
    for rule in CATEGORY_RULES:
        hits = _hits(text, rule.keywords)
        if hits:
            category_hits[rule.category] = hits

    priority_hits: tuple[str, ...] = ()
    for _priority, keywords in PRIORITY_TIERS:
        priority_hits = _hits(text, keywords)
        if priority_hits:
            break

    return KeywordMatch(category_hits=category_hits, priority_hits=priority_hits)
