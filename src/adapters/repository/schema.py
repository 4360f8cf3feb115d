"""
User schema rules shared by the store adapters.

The Postgres migration enforces the same limits with named CHECK
constraints; CONSTRAINT_MESSAGES maps those names back to field messages.
NUL characters have no constraint: PostgreSQL text cannot hold them at all.
"""

from datetime import date

from src.domain.models import NewUser

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
PHONE_MAX_LENGTH = 20

CONSTRAINT_MESSAGES = {
    "users_name_not_blank": "name is required",
    "users_name_length": f"name must be at most {NAME_MAX_LENGTH} characters",
    "users_email_normalized": "email must be lowercase without surrounding whitespace",
    "users_email_length": f"email must be at most {EMAIL_MAX_LENGTH} characters",
    "users_phone_length": f"phone must be at most {PHONE_MAX_LENGTH} characters",
    "users_birth_date_past": "birthDate cannot be in the future",
}


def _invalid_characters(field: str) -> str:
    return f"{field} contains invalid characters"


def validate_new_user(new_user: NewUser, today: date | None = None) -> list[str]:
    """
    Check a user against the schema rules.

    Every failing field contributes one message, so callers can report
    all problems at once.
    """
    today = today or date.today()
    errors = []

    if "\x00" in new_user.name:
        errors.append(_invalid_characters("name"))
    elif not new_user.name.strip():
        errors.append(CONSTRAINT_MESSAGES["users_name_not_blank"])
    elif len(new_user.name) > NAME_MAX_LENGTH:
        errors.append(CONSTRAINT_MESSAGES["users_name_length"])

    if "\x00" in new_user.email:
        errors.append(_invalid_characters("email"))
    elif len(new_user.email) > EMAIL_MAX_LENGTH:
        errors.append(CONSTRAINT_MESSAGES["users_email_length"])
    elif new_user.email != new_user.email.strip().lower():
        errors.append(CONSTRAINT_MESSAGES["users_email_normalized"])

    if "\x00" in new_user.phone:
        errors.append(_invalid_characters("phone"))
    elif len(new_user.phone) > PHONE_MAX_LENGTH:
        errors.append(CONSTRAINT_MESSAGES["users_phone_length"])

    if new_user.birth_date is not None and new_user.birth_date > today:
        errors.append(CONSTRAINT_MESSAGES["users_birth_date_past"])

    return errors
