import sys

from loguru import logger

PALETTE = {
    "feasibility": "cyan",
    "enumerator": "magenta",
    "memoized": "green",
    "benchmark": "yellow",
    "level_builder": "blue",
    "network": "white",
}

LEVEL_PER_COMPONENT = {
    "feasibility": "INFO",
    "enumerator": "INFO",
    "memoized": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # Colour tags must be in the template itself so loguru turns them into ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<15}</> | "
        "<level>{message}</level>\n"
    )


def set_component_level(component: str, level: str) -> None:
    """Change the minimum level logged for one component."""
    logger.level(level)  # raises ValueError for unknown level names
    LEVEL_PER_COMPONENT[component] = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
