import sys

from loguru import logger

PALETTE = {
    "search": "green",
    "parser": "blue",
    "cli": "magenta",
}

LEVEL_PER_COMPONENT = {
    "search": "INFO",
    "parser": "INFO",
}

DEFAULT_LEVEL = "INFO"


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, DEFAULT_LEVEL)).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    part = record["extra"].get("part", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    if part:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<8} | {part:<6}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<8}</> | "
            "<level>{message}</level>\n"
        )


def set_level(level: str) -> None:
    """Apply one minimum level to every component."""
    global DEFAULT_LEVEL
    DEFAULT_LEVEL = level
    for comp in LEVEL_PER_COMPONENT:
        LEVEL_PER_COMPONENT[comp] = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
