"""Synthetic FAQ entries derived from a canonical drug record."""

from drug_info.constants import FAQ_ANSWER_MAX_CHARS, FAQ_CONTINUATION_MARKER
from drug_info.models.model_drug import CanonicalDrugRecord, DrugFAQ

# (question template, record field, fallback answer template)
FAQ_TEMPLATES: tuple[tuple[str, str, str], ...] = (
    (
        "What is {name} used for?",
        "indications",
        "{name} is a prescription medication. Please consult your healthcare "
        "provider for specific uses and indications.",
    ),
    (
        "How should I take {name}?",
        "dosage_info",
        "Follow your healthcare provider's instructions for taking {name}. "
        "Do not adjust dosage without medical supervision.",
    ),
    (
        "What are the side effects of {name}?",
        "adverse_reactions",
        "Contact your healthcare provider if you experience any unusual "
        "symptoms while taking {name}.",
    ),
)


def truncate_answer(text: str, max_chars: int = FAQ_ANSWER_MAX_CHARS) -> str:
    """Cut *text* to max_chars, marking the cut with a continuation marker."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars].rstrip() + FAQ_CONTINUATION_MARKER


def derive_faqs(
    record: CanonicalDrugRecord, max_chars: int = FAQ_ANSWER_MAX_CHARS
) -> list[DrugFAQ]:
    """Return the usage, dosage and side-effect FAQs for *record*."""
    faqs = []
    for question, field, fallback in FAQ_TEMPLATES:
        source = getattr(record, field)
        answer = (
            truncate_answer(source, max_chars)
            if source
            else fallback.format(name=record.name)
        )
        faqs.append(DrugFAQ(question=question.format(name=record.name), answer=answer))
    return faqs
