"""Structural validation for email addresses."""

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def is_valid_email(email: str) -> bool:
    """Return True when ``email`` follows a basic valid structure.

    Checks structure only: exactly one @, non-empty local and domain parts,
    a dotted domain, no consecutive dots, no whitespace or forbidden characters.
    """
    if not email:
        return False

    if " " in email or "\t" in email or "\n" in email:
        return False

    if email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part:
        return False

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return False

    if ".." in local_part or ".." in domain_part:
        return False

    return not any(forbidden in email for forbidden in _FORBIDDEN)


def normalize_email(email: str | None) -> str:
    """Canonical form used for guest lookups."""
    return (email or "").strip().lower()
