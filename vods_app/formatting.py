"""Description previews for the VOD list."""

PREVIEW_TRIM_CHARACTERS = (".", ",", " ", "\n")
ELLIPSIS = "..."


def preview(description: str, max_length: int) -> str:
    """
    Shorten ``description`` to at most ``max_length`` characters for the list.

    Longer text is cut, trailing periods, commas, spaces and newlines are
    stripped, and "..." is appended. Text that already fits is returned as is.
    """
    if len(description) <= max_length:
        return description

    truncated = description[:max_length]
    while truncated and truncated[-1] in PREVIEW_TRIM_CHARACTERS:
        truncated = truncated[:-1]
    return truncated + ELLIPSIS
