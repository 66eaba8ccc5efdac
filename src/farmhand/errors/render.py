from __future__ import annotations

from farmhand.errors.base import FarmhandError


def format_error(err: FarmhandError) -> str:
    text = str(err)
    parts = _parse_guidance(text)
    if not parts:
        return text
    what = parts.get("what") or _fallback_line(text)
    why = parts.get("why") or "The theme request could not be completed."
    fix = parts.get("fix") or "Review the input and try again."
    next_step = parts.get("example") or "Run the command again after updating the input."
    lines = [
        "Something went wrong",
        "What happened",
        f"- {what}",
        "Why",
        f"- {why}",
        "How to resolve it",
        f"- {fix}",
        "Suggested next step",
        f"- {next_step}",
    ]
    return "\n".join(lines)


def _parse_guidance(text: str) -> dict[str, str]:
    parts: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("What happened:"):
            parts["what"] = stripped.replace("What happened:", "", 1).strip()
        elif stripped.startswith("Why:"):
            parts["why"] = stripped.replace("Why:", "", 1).strip()
        elif stripped.startswith("Fix:"):
            parts["fix"] = stripped.replace("Fix:", "", 1).strip()
        elif stripped.startswith("Example:"):
            parts["example"] = stripped.replace("Example:", "", 1).strip()
    return parts


def _fallback_line(text: str) -> str:
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return "An unexpected error occurred."


__all__ = ["format_error"]
