"""Email address rules shared by User and Admin."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def verify_email_address(email: str, field: str = "email") -> None:
    """Raise ValidationError unless ``email`` has a basic valid structure."""
    error = ValidationError({field: [f"Invalid email address: {email!r}"]})

    if not email or any(ch in email for ch in (" ", "\t", "\n")):
        raise error

    if email.count("@") != 1:
        raise error

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise error

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise error

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        raise error

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            raise error

    if any(ch in email for ch in _FORBIDDEN):
        raise error
