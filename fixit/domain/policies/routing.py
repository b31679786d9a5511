"""Routing policy — department, resolution window and reasoning text.

All three are pure lookups: department depends only on category, the
resolution window only on priority, and reasoning on (category, priority,
risk score).
"""

from types import MappingProxyType

from fixit.domain.value_objects.enums import Category, Priority

DEPARTMENT_BY_CATEGORY = MappingProxyType({
    Category.PLUMBING: "Plumbing & Sanitation Dept.",
    Category.ELECTRICAL: "Electrical Maintenance Dept.",
    Category.CIVIL: "Civil Engineering Dept.",
    Category.HOUSEKEEPING: "Housekeeping & Sanitation",
    Category.IT_INFRASTRUCTURE: "IT Support Dept.",
    Category.FURNITURE: "Furniture & Assets Dept.",
    Category.OTHERS: "General Maintenance Dept.",
})

RESOLUTION_BY_PRIORITY = MappingProxyType({
    Priority.CRITICAL: "Same day (< 4 hours)",
    Priority.HIGH: "1-2 days",
    Priority.MEDIUM: "3-5 days",
    Priority.LOW: "5-7 days",
})

REASONING_TEMPLATES = MappingProxyType({
    Priority.CRITICAL: (
        "This complaint has been classified as CRITICAL with a risk score of "
        "{risk_score}/100. Immediate intervention is required as the issue poses "
        "a significant safety or operational risk. The {category} department "
        "should be notified immediately and on-site inspection must occur "
        "within 4 hours."
    ),
    Priority.HIGH: (
        "Based on the complaint analysis, this issue is classified as HIGH "
        "priority (risk score: {risk_score}/100). The {category} department "
        "should address this within 1-2 business days. The described problem "
        "indicates potential for escalation if not resolved promptly."
    ),
    Priority.MEDIUM: (
        "This complaint has been analyzed and categorized as {category} with "
        "MEDIUM priority (risk score: {risk_score}/100). Standard resolution "
        "protocols apply. The assigned department should schedule inspection "
        "and repair within 3-5 business days."
    ),
    Priority.LOW: (
        "This is a LOW priority {category} complaint with a risk score of "
        "{risk_score}/100. The issue is minor and does not pose immediate risk. "
        "The department may schedule this during their regular maintenance "
        "cycle within 5-7 days."
    ),
})


def department_for(category: Category) -> str:
    return DEPARTMENT_BY_CATEGORY[category]


def resolution_for(priority: Priority) -> str:
    return RESOLUTION_BY_PRIORITY[priority]


def compose_reasoning(category: Category, priority: Priority, risk_score: int) -> str:
    """Render the narrative for a classification.

    Unknown priorities fall back to the Medium template.
    """
    template = REASONING_TEMPLATES.get(priority, REASONING_TEMPLATES[Priority.MEDIUM])
    return template.format(category=category.value, risk_score=risk_score)
