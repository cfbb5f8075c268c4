# storage.py
"""JSON persistence for :class:`LotteryData`.

The calculators never touch storage; these helpers are what the front end
uses to keep a record between sessions.  Floats are written with ``json``'s
shortest round-trip repr, so loading a saved record gives back an identical
value.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidInput
from .models import LotteryData

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "lottery-data.json"


def to_json(data: LotteryData, indent: Optional[int] = 2) -> str:
    """Serialize ``data``; non-finite numbers raise :class:`InvalidInput`."""
    try:
        return json.dumps(data.to_dict(), indent=indent, allow_nan=False)
    except ValueError as exc:
        raise InvalidInput(f"Lottery data is not serializable: {exc}") from None


def from_json(text: Union[str, bytes]) -> LotteryData:
    """Parse a record written by :func:`to_json`; raise :class:`InvalidInput` if malformed."""
    try:
        record = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Invalid lottery data JSON: {exc}") from None
    return LotteryData.from_dict(record)


def save_data(path: Union[str, Path], data: LotteryData) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        f.write(to_json(data))
    logger.debug("Saved lottery data to %s", p)
    return p


def load_data(path: Union[str, Path]) -> Optional[LotteryData]:
    """Load a saved record, or ``None`` when nothing has been saved yet."""
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        return None
    try:
        return from_json(text)
    except InvalidInput as exc:
        logger.warning("Could not load %s: %s", p, exc)
        raise


def clear_data(path: Union[str, Path]) -> bool:
    """Delete a saved record; returns whether anything was removed."""
    p = Path(path)
    if p.exists():
        p.unlink()
        return True
    return False


__all__ = ["DEFAULT_FILENAME", "to_json", "from_json", "save_data", "load_data", "clear_data"]
