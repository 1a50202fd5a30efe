"""Column header contracts for requirement rows, candidate rows and report outputs.

Spreadsheet headers are contract-bearing strings: the sheet owners type them, and the
adapter in ``helper_match.application.adapters`` maps them onto typed record attributes
exactly once. Nothing past the adapter looks a field up by header.
"""

from __future__ import annotations

from types import MappingProxyType

# Employer requirement sheet: record attribute -> column header
REQUIREMENT_COLUMNS = MappingProxyType(
    {
        "customer_name": "Name of client",
        "nationality": "Nationality preference",
        "helper_type": "Type of helper",
        "min_years_experience": "Minimum Years of Experience",
        "english_level": "Prefer helper English Level",
        "additional_languages": "Additional Languages",
        "height": "Prefer Helper Height (cm)",
        "weight": "Prefer Helper Weight (kg)",
        "age": "Prefer helper age",
        "salary": "Salary and placement budget",
        "children_ages": "Age of kids",
        "elderly_relationship": "Relationship of Elderly",
        "focus_area": "Focus area",
        "religion": "Prefer helper Religion",
        "education": "Prefer helper Education",
        "marital_status": "Prefer helper Marital Status",
        "eat_pork": "Eat Pork",
        "handle_pork": "Handle Pork",
        "off_days": "No. of Off Day",
        "start_date": "When do you need the helper",
        "jobscope": "Jobscope",
        "pets": "Pets",
        "preferences": "Preference remarks",
        "excluded_codes": "Bio Sended",
    }
)

# Misspelt headers found in live sheets: header -> record attribute
REQUIREMENT_COLUMN_ALIASES = MappingProxyType(
    {
        "Salary and palcement budget": "salary",
        "Preferences": "preferences",
    }
)

# Requirement attributes whose cells hold several values (newline or comma separated)
REQUIREMENT_LIST_ATTRIBUTES = frozenset(
    {"additional_languages", "children_ages", "jobscope", "pets", "excluded_codes"}
)

# Helper sheet: record attribute -> column header
CANDIDATE_COLUMNS = MappingProxyType(
    {
        "code": "Code",
        "name": "Name",
        "nationality": "Nationality",
        "age": "Age",
        "work_experience": "Work Experience",
        "skills": "Skills",
        "bio": "Bio",
        "salary": "Salary",
        "religion": "Religion",
        "education": "Education",
        "marital_status": "Marital Status",
        "weight": "Weight (Kg)",
        "height": "Height (cm)",
        "passport_status": "Passport Status",
        "available_from": "Available From",
        "helper_type": "Type",
        "helper_experience": "Helper Exp.",
        "language": "Language",
        "additional_languages": "Additional Languages",
        "years_of_experience": "Years of Experience",
        "eat_pork": "Eat Pork",
        "handle_pork": "Handle Pork",
        "off_days": "No. of Off Day",
        "pets": "Pets",
        "infant_care_0_6m": "Infant Care Work Experience YES IF 0-6m",
        "infant_care_7_12m": "Infant Care Work Experience YES IF 7-12m",
        "childcare_1_3y": "Childcare Work Experience YES IF 1-3y",
        "childcare_4_6y": "Childcare Work Experience YES IF 4-6y",
        "childcare_7_12y": "Childcare Work Experience YES IF 7-12y",
        "elderly_care": "Elderly Care Work Experience (Yes/No)",
        "caregiver_cert": "Care Giver/Nursing aid Cert (Yes/No)",
        "personal_infant_care": (
            "Personal Infant Care Experience YES if have same work exp OR OWN CHILDREN <3YO"
        ),
        "personal_childcare": (
            "Personal Childcare Experience YES if have same work exp OR OWN CHILDREN <6YO"
        ),
        "personal_elderly_care": "Personal Elderly Care Experience (Yes/No)",
    }
)

# At least one of these headers must exist for a sheet to count as a helper sheet
CANDIDATE_IDENTITY_COLUMNS = frozenset({"Code", "Name"})

# Ranked summary output
MATCH_SUMMARY_COLUMNS = (
    "rank",
    "code",
    "name",
    "total_score",
    "max_score",
    "matched",
    "partial",
    "mismatched",
)


def validate_columns(df_columns: list[str], required: frozenset[str], source_name: str) -> None:
    """Validate that a DataFrame has every required column.

    Args:
        df_columns: List of column names from DataFrame.
        required: Set of required column names.
        source_name: Name of the data source for error messages.

    Raises:
        ValueError: If required columns are missing.
    """
    missing = required - set(df_columns)
    if missing:
        raise ValueError(f"{source_name}: Missing required columns: {sorted(missing)}")
