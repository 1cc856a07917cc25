"""Built-in shorthand event names."""

from __future__ import annotations

BUILTIN_ALIASES: dict[str, str] = {
    "tap": "click",
    "taphold": "hold:1500:pointer:left",
    "clickhold": "hold:1500:pointer:left",
    "middleclick": "pointer:middle",
    "rightclick": "pointer:right",
    "doubleclick": "dblclick",  # matches the naming of the other click events
    "konami": "up up down down left right left right b a enter",
    "portrait": "window:orientation:portrait",
    "landscape": "window:orientation:landscape",
    "hulksmash": "faceplant",
    "twofingertap": "multitouch:2:tap",
    "threefingertap": "multitouch:3:tap",
    "fourfingertap": "multitouch:4:tap",
}
