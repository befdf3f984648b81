"""Small markdown builders shared by the research tools."""

from typing import Any, Dict, List, Sequence


def bullet_list(items: Sequence[Any]) -> str:
    """One ``- item`` line per entry."""
    return "\n".join(f"- {item}" for item in items)


def table(headers: List[str], rows: List[Dict[str, Any]], keys: List[str]) -> str:
    """
    Markdown table.

    Args:
        headers: Column titles
        rows: Row dicts
        keys: Dict key for each column, same order as headers
    """
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(str(row.get(key, "")) for key in keys) + " |")
    return "\n".join(lines)


def humanize(identifier: str) -> str:
    """``business_model`` -> ``Business Model``."""
    return identifier.replace("_", " ").title()
