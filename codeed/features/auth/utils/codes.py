import secrets


def random_digits(length: int) -> str:
    """Generate a cryptographically secure numeric code of the given length."""
    if length <= 0:
        return ""
    return "".join(str(secrets.randbelow(10)) for _ in range(length))
