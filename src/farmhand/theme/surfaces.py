from __future__ import annotations

from farmhand.theme.colors import is_hex, lighten, mix, rgba
from farmhand.theme.defaults import DEFAULTS, ThemeDefaults, resolve_neutrals
from farmhand.theme.model import Neutrals, SurfaceSet


def build_surface_set(
    neutrals: Neutrals | None,
    mode: str,
    *,
    defaults: ThemeDefaults = DEFAULTS,
) -> SurfaceSet:
    resolved = resolve_neutrals(neutrals, defaults)
    base = resolved.surface_for(mode)
    if mode == "light":
        elevated = defaults.white
        variant = mix(base, defaults.white, 0.3)
        subtle = mix(base, elevated, 0.5)
    else:
        elevated = lighten(base, 0.08)
        if not is_hex(elevated) or elevated == base:
            elevated = mix(base, defaults.white, 0.12)
        if elevated == base:
            # Near-white base: nothing left to blend toward.
            elevated = mix(base, defaults.black, 0.04)
        variant = mix(base, defaults.black, 0.2)
        subtle = mix(elevated, base, 0.3)
    return SurfaceSet(
        base=base,
        elevated=elevated,
        variant=variant,
        subtle=subtle,
        outline=resolved.border_for(mode),
    )


def build_divider(mode: str, *, defaults: ThemeDefaults = DEFAULTS) -> str:
    # Independent of the outline tier.
    ink = defaults.black if mode == "light" else defaults.white
    return rgba(ink, defaults.divider_opacity)


__all__ = ["build_divider", "build_surface_set"]
