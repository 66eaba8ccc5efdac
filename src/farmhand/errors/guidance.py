from __future__ import annotations


def build_guidance_message(*, what: str, why: str, fix: str, example: str | None = None) -> str:
    lines = [
        f"What happened: {what}",
        f"Why: {why}",
        f"Fix: {fix}",
    ]
    if example:
        lines.append(f"Example: {example}")
    return "\n".join(lines)


__all__ = ["build_guidance_message"]
