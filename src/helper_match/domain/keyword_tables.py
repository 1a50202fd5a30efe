"""Versioned keyword and rule tables used by the extractor, normalizer and evaluators.

Every table here is immutable data. Matching logic lives in the modules that consume
these tables, so each entry can be enumerated and tested on its own. Bump
``TABLES_VERSION`` whenever an entry changes meaning, because reports produced under
different versions are not comparable.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

TABLES_VERSION = 1


@dataclass(frozen=True)
class TagRule:
    """Any keyword found (case-insensitive substring) in the text yields ``tag``."""

    tag: str
    keywords: frozenset[str]


@dataclass(frozen=True)
class JobscopeFieldRule:
    """Maps requested task keywords onto candidate structured attributes.

    ``fields`` name ``CandidateRecord`` attributes. When ``yes_value`` is set the fields
    are yes/no flags and count only when equal (case-insensitive) to it; when it is None
    the fields are free text searched for the requested phrase.
    """

    keywords: tuple[str, ...]
    fields: tuple[str, ...]
    yes_value: str | None = None


@dataclass(frozen=True)
class CareBand:
    """A structured experience band keyed by the oldest age (in years) it covers."""

    kind: str  # infant | childcare
    field: str
    label: str
    max_age_years: float


# Canonical jobscope tags. Containment is plain substring, so "cat" also fires inside
# "education"; recall is preferred over precision here.
TAG_TABLE: tuple[TagRule, ...] = (
    TagRule(
        "infant care",
        frozenset(
            {"take care newborn", "newborn", "baby", "infant", "infant care", "night feeding"}
        ),
    ),
    TagRule(
        "childcare",
        frozenset({"take care child", "childcare", "child care", "kids", "children"}),
    ),
    TagRule(
        "school runs",
        frozenset({"send child to school", "fetch child from school", "prepare school bag"}),
    ),
    TagRule("cooking", frozenset({"cooking", "cook", "prepare meals", "prepare breakfast"})),
    TagRule(
        "household chores",
        frozenset({"household chores", "housework", "general housework", "cleaning"}),
    ),
    TagRule("grocery shopping", frozenset({"grocery shopping", "marketing"})),
    TagRule("laundry", frozenset({"laundry", "washing clothes", "ironing"})),
    TagRule(
        "elderly care",
        frozenset({"take care elderly", "elderly care", "assist elderly", "elderly"}),
    ),
    TagRule("personal hygiene", frozenset({"shower", "bathe", "bathing"})),
    TagRule("diaper change", frozenset({"change diaper", "change diapers", "diaper"})),
    TagRule("pet care", frozenset({"pet care", "pet"})),
    TagRule("dog care", frozenset({"dog care", "dog"})),
    TagRule("cat care", frozenset({"cat care", "cat"})),
    TagRule("special needs", frozenset({"special needs", "autism", "adhd"})),
    TagRule("twins", frozenset({"twins"})),
)

# Ordered: the first rule whose keyword matches a requested task decides the fields.
JOBSCOPE_FIELD_TABLE: tuple[JobscopeFieldRule, ...] = (
    JobscopeFieldRule(
        keywords=("take care newborn", "infant care", "baby", "newborn"),
        fields=("infant_care_0_6m", "infant_care_7_12m"),
        yes_value="YES",
    ),
    JobscopeFieldRule(
        keywords=(
            "take care child",
            "child care",
            "taking care of kids",
            "kids",
            "childcare",
            "child",
        ),
        fields=("childcare_1_3y", "childcare_4_6y", "childcare_7_12y"),
        yes_value="YES",
    ),
    JobscopeFieldRule(
        keywords=("elderly care", "take care elderly", "assist elderly", "elderly"),
        fields=("elderly_care", "personal_elderly_care"),
        yes_value="YES",
    ),
    JobscopeFieldRule(
        keywords=("household chores", "housework", "general housework", "cleaning"),
        fields=("work_experience",),
    ),
    JobscopeFieldRule(keywords=("cooking", "cook"), fields=("work_experience",)),
    JobscopeFieldRule(
        keywords=("caregiver", "nursing"),
        fields=("caregiver_cert",),
        yes_value="YES",
    ),
    JobscopeFieldRule(
        keywords=("pet care", "dog care", "cat care", "pets", "pet"),
        fields=("work_experience",),
    ),
    JobscopeFieldRule(
        keywords=("laundry", "washing clothes", "ironing"),
        fields=("work_experience",),
    ),
    JobscopeFieldRule(keywords=("marketing", "grocery shopping"), fields=("work_experience",)),
    JobscopeFieldRule(
        keywords=("change diaper", "change diapers", "diaper"),
        fields=("work_experience",),
    ),
)

# Nationalities the agency places
INDONESIA = "Indonesia"
MYANMAR = "Myanmar"
PHILIPPINES = "Philippines"
ALL_NATIONALITIES = frozenset({INDONESIA, MYANMAR, PHILIPPINES})

# Nationality rules, applied in precedence order: any > compound > "<X> only" > keywords
NATIONALITY_ANY_PATTERNS: tuple[str, ...] = (r"\bany\b", r"\ball nationality")

NATIONALITY_COMPOUND_PATTERNS: tuple[tuple[str, frozenset[str]], ...] = (
    (r"myanmar\s*/\s*indonesian", frozenset({MYANMAR, INDONESIA})),
    (r"indonesian\s*/\s*myanmar", frozenset({MYANMAR, INDONESIA})),
)

NATIONALITY_ONLY_PATTERNS: tuple[tuple[str, str], ...] = (
    (r"\b(?:myanmar|myammar|myr|mym)\s+only\b", MYANMAR),
    (r"\b(?:indonesian|indo|indon)\s+only\b", INDONESIA),
    (r"\b(?:filipino|pinoy|philipine|phillipines)\s+only\b", PHILIPPINES),
)

NATIONALITY_KEYWORD_PATTERNS = MappingProxyType(
    {
        INDONESIA: (r"\bindo",),
        MYANMAR: (r"\bmyanmar", r"\bmyammar", r"\bmyr\b", r"\bmym\b", r"\bburm"),
        PHILIPPINES: (r"\bfilipin", r"\bpinoy", r"\bphil+ip"),
    }
)

# Ordinal English levels, lowest first
LANGUAGE_LEVELS: tuple[str, ...] = ("learning", "basic", "average", "good", "very good")
DEFAULT_LANGUAGE_LEVEL = "average"

# Substring hints checked in order; "very good" must be tested before "good"
LANGUAGE_LEVEL_HINTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("very good", ("very good", "excellent", "fluent")),
    ("good", ("good",)),
    ("average", ("average", "fair")),
    ("basic", ("basic", "poor")),
    ("learning", ("learning",)),
)

# Start-date vocabulary
URGENCY_WORDS: tuple[str, ...] = ("immediate", "urgent", "asap")
OPEN_TIMING_WORDS: tuple[str, ...] = ("anytime", "any time")

# Month tokens; both full and short names resolve by their first three letters
MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# "end/early/mid <month>" day-of-month
PERIOD_DAYS = MappingProxyType({"early": 5, "mid": 15, "end": 25})

CARE_BANDS: tuple[CareBand, ...] = (
    CareBand("infant", "infant_care_0_6m", "Infant Care (0-6m)", 0.5),
    CareBand("infant", "infant_care_7_12m", "Infant Care (7-12m)", 1.0),
    CareBand("childcare", "childcare_1_3y", "Childcare (1-3y)", 3.0),
    CareBand("childcare", "childcare_4_6y", "Childcare (4-6y)", 6.0),
    CareBand("childcare", "childcare_7_12y", "Childcare (7-12y)", 12.0),
)

# Jobscope fact vocabulary
BABY_PATTERN = r"newborn|infant|bab(?:y|ies)"
ELDERLY_PATTERN = r"elderly|ahma|grandma|ah gong|grandpa"
ELDERLY_NEEDS: tuple[str, ...] = ("wheelchair", "bedridden", "stroke", "parkinson", "dementia")
PET_KEYWORDS: tuple[str, ...] = ("dog", "cat", "pet", "rabbit", "bird")
SPECIAL_NEEDS: tuple[str, ...] = ("autism", "adhd")

# Three-valued personal experience answers
THREE_VALUE_PARTIAL_ANSWERS = frozenset({"no, but willing to learn"})

# Requirement values meaning "no constraint" for equality criteria
NO_CONSTRAINT_VALUES = frozenset({"", "any", "all"})

# Sheet placeholders that mean a free-text field was left blank
NO_VALUE_ANSWERS = frozenset({"no", "none", "nil", "n/a", "na", "-"})

# Pets column values meaning the household has no pets
NO_PET_VALUES = NO_VALUE_ANSWERS | {"no pets"}

# Focus areas that double the weight of the matching care criteria
FOCUS_CHILDCARE = "childcare"
FOCUS_ELDERLY = "elderly care"
FOCUS_MULTIPLIER = 2

CRITERION_WEIGHTS = MappingProxyType(
    {
        "nationality": 1,
        "helper_type": 2,
        "years_of_experience": 2,
        "english_level": 1,
        "height": 1,
        "weight": 1,
        "age": 1,
        "salary": 2,
        "care_band": 2,
        "personal_care": 1,
        "elderly_care": 2,
        "caregiver_cert": 1,
        "cooking": 1,
        "household_chores": 1,
        "religion": 1,
        "education": 1,
        "marital_status": 1,
        "eat_pork": 1,
        "handle_pork": 1,
        "off_days": 1,
    }
)

# Passport-readiness weights: urgent need counts double
PASSPORT_URGENT_WEIGHT = 2
PASSPORT_DEFAULT_WEIGHT = 1

# Years of experience above this are not credited further
MAX_CREDITED_YEARS = 20.0
