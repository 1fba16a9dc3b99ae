"""
Shared keyword and pattern source-of-truth for confidence heuristics.

Every regex used to judge document quality, clarity or analysis certainty
lives here so the sub-metrics stay consistent with each other.
"""
import re

# --- Document quality ---

STRUCTURE_MARKERS = re.compile(r"clause|section|paragraph|\d+\.", re.IGNORECASE)

KEY_TERMS = (
    "rent", "deposit", "landlord", "tenant", "property", "term",
    "notice", "repair", "maintenance", "insurance",
)

QUALITY_INDICATORS = ("address", "date", "signature", "witness", "schedule")

PLACEHOLDERS = re.compile(r"\[.*?\]|\{.*?\}|_____|TBD|to be confirmed", re.IGNORECASE)

# --- Document clarity ---

SENTENCE_SPLIT = re.compile(r"[.!?]+")

LEGAL_JARGON = (
    "hereinafter", "whereupon", "heretofore", "whereas", "forthwith",
    "notwithstanding", "pursuant to", "in lieu of",
)

NUMBERED_STRUCTURE = re.compile(r"\d+\.")
HEADINGS = re.compile(r"^[A-Z\s]+:|\n[A-Z\s]+\n", re.MULTILINE)
DEFINED_TERMS = re.compile(r"defined as|means|shall mean|definition", re.IGNORECASE)

# --- Analysis certainty ---

LEGAL_INDICATOR = re.compile(r"act|section|regulation|law", re.IGNORECASE)
SPECIFIC_CITATION = re.compile(r"\d{4}|section \d+|act \d+", re.IGNORECASE)

HEDGING_TERMS = ("may", "might", "possibly", "unclear", "ambiguous", "uncertain")
HEDGING = re.compile(r"\b(?:" + "|".join(HEDGING_TERMS) + r")\b", re.IGNORECASE)

# --- Factor breakdown ---

# (pattern, weight deducted when absent)
ESSENTIAL_ELEMENTS = (
    (re.compile(r"property.*address|premises.*located", re.IGNORECASE), 15),
    (re.compile(r"rent.*amount|monthly.*rent|£\d+", re.IGNORECASE), 15),
    (re.compile(r"deposit|security.*deposit", re.IGNORECASE), 10),
    (re.compile(r"term.*tenancy|lease.*period|commencement.*date", re.IGNORECASE), 10),
    (re.compile(r"landlord.*name|lessor", re.IGNORECASE), 10),
    (re.compile(r"tenant.*name|lessee", re.IGNORECASE), 10),
    (re.compile(r"repair.*responsibility|maintenance", re.IGNORECASE), 10),
    (re.compile(r"notice.*period|termination", re.IGNORECASE), 10),
    (re.compile(r"insurance", re.IGNORECASE), 5),
    (re.compile(r"utilities|services", re.IGNORECASE), 5),
)

AMBIGUOUS_TERMS = (
    "reasonable", "appropriate", "satisfactory", "adequate",
    "fair", "promptly", "as soon as possible", "in due course",
)

SPECIFIC_TIMEFRAME = re.compile(r"\d+\s*(?:days?|weeks?|months?|years?)", re.IGNORECASE)
SPECIFIC_AMOUNT = re.compile(r"£\d+")

STANDARD_CLAUSES = (
    "quiet enjoyment",
    "deposit protection",
    "gas safety",
    "electrical safety",
    "energy performance certificate",
    "right to rent",
)

EDGE_CASE_PROPERTY_TYPES = (
    "commercial", "mixed use", "company let", "diplomatic",
    "agricultural", "holiday let", "rent to rent",
)

AMBIGUOUS_PHRASES = (
    "as appropriate", "if necessary", "where applicable",
    "from time to time", "at the discretion", "reasonable",
    "satisfactory", "adequate", "fair", "proper",
)

CAPITALISED_TERM = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")

# --- Rent parsing ---

RENT_AMOUNT = re.compile(r"£\s*(\d[\d,]*(?:\.\d+)?)")


def contains(term: str, text: str) -> bool:
    """Case-insensitive literal containment."""
    return re.search(re.escape(term), text, re.IGNORECASE) is not None


def contains_word(term: str, text: str) -> bool:
    return re.search(r"\b" + re.escape(term) + r"\b", text, re.IGNORECASE) is not None


def count_occurrences(term: str, text: str) -> int:
    return len(re.findall(re.escape(term), text, re.IGNORECASE))
