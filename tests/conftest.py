import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from farmhand.theme.config import parse_theme_config  # noqa: E402


BASIC_BRAND = {"primary": "#339900", "secondary": "#FFD400"}


def make_config(**fields):
    """Parse a minimal config payload, with ``fields`` merged over it."""
    payload = {"id": "TestTheme", "displayName": "Test Theme", "brand": dict(BASIC_BRAND)}
    payload.update(fields)
    return parse_theme_config(payload)
