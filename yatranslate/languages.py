"""Language codes and translation directions for yatranslate."""

# Empty source language: let the service detect it
UNKNOWN = ""

EN = "en"
RU = "ru"

DIRECTION_SEPARATOR = "-"


def format_direction(source_lang: str, target_lang: str) -> str:
    """Build the ``lang`` form value for a translation.

    Args:
        source_lang: Source language code, or UNKNOWN to auto-detect.
        target_lang: Target language code.

    Returns:
        'target' when the source is unknown, 'source-target' otherwise.
    """
    if source_lang == UNKNOWN:
        return target_lang
    return f"{source_lang}{DIRECTION_SEPARATOR}{target_lang}"


def parse_direction(direction: str) -> tuple[str, str]:
    """Split a direction such as 'en-ru' into its source and target codes.

    Raises:
        ValueError: If the direction is not of the form 'source-target'.
    """
    source, sep, target = direction.partition(DIRECTION_SEPARATOR)
    if not sep or not source or not target:
        raise ValueError(f"invalid direction: {direction!r}")
    return source, target
