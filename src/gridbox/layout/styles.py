"""Border glyph sets for framed boxes, built in or loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from ..errors import StyleError

logger = logging.getLogger(__name__)

CORNER_KEYS = ("top_left", "top_right", "bottom_left", "bottom_right")


@dataclass(frozen=True)
class BorderStyle:
    """Characters used to draw a one-cell frame around a box.

    Attributes:
        name: Style identifier
        top_left, top_right, bottom_left, bottom_right: Corner glyphs
        horizontal: Glyph repeated along the top and bottom edges
        vertical: Glyph repeated along the left and right edges
    """

    name: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "name":
                continue
            glyph = getattr(self, f.name)
            if not isinstance(glyph, str) or len(glyph) != 1 or glyph == "\0":
                raise StyleError(
                    f"Border style '{self.name}': {f.name} must be a single "
                    f"character, got {glyph!r}"
                )


ASCII = BorderStyle("ascii", "+", "+", "+", "+", "-", "|")
LIGHT = BorderStyle("light", "┌", "┐", "└", "┘", "─", "│")
ROUNDED = BorderStyle("rounded", "╭", "╮", "╰", "╯", "─", "│")
DOUBLE = BorderStyle("double", "╔", "╗", "╚", "╝", "═", "║")

# Registry of built-in styles
BORDER_STYLES: dict[str, BorderStyle] = {
    style.name: style for style in (ASCII, LIGHT, ROUNDED, DOUBLE)
}


class StyleLoader:
    """Loads border styles by name from the built-ins or YAML files.

    YAML format:
    ```yaml
    name: heavy
    corners: "┏┓┗┛"       # top_left, top_right, bottom_left, bottom_right
    horizontal: "━"
    vertical: "┃"
    ```
    Corners may instead be given one by one with the ``top_left``,
    ``top_right``, ``bottom_left`` and ``bottom_right`` keys.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories searched for ``{name}.yaml``. Defaults to
                         none, so only built-in styles resolve.
        """
        self.search_paths = [Path(p) for p in search_paths] if search_paths else []
        self._cache: dict[str, BorderStyle] = {}

    def load(self, name: str) -> BorderStyle:
        """Load a style by name.

        Built-in styles take precedence over files of the same name.

        Raises:
            FileNotFoundError: If no built-in or YAML file matches
            StyleError: If the YAML definition is malformed
        """
        if name in BORDER_STYLES:
            return BORDER_STYLES[name]
        if name in self._cache:
            logger.debug(f"Border style '{name}' served from cache")
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Border style '{name}' not found in search paths: {self.search_paths}"
            )

        style = self.load_file(yaml_path)
        self._cache[name] = style
        return style

    def load_file(self, path: str | Path) -> BorderStyle:
        """Load a style from a YAML file."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        logger.debug(f"Loaded border style from {path}")
        return self._parse_style(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> BorderStyle:
        """Load a style from a YAML string."""
        return self._parse_style(yaml.safe_load(yaml_string))

    def clear_cache(self) -> None:
        """Clear the loaded-style cache."""
        self._cache.clear()

    def _find_yaml(self, name: str) -> Path | None:
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def _parse_style(self, data: Any, default_name: str = "unnamed") -> BorderStyle:
        """Parse a style definition from YAML data."""
        if not isinstance(data, dict):
            raise StyleError(f"Border style must be a mapping, got {type(data).__name__}")

        name = str(data.get("name", default_name))

        if "corners" in data:
            corners = data["corners"]
            if not isinstance(corners, str) or len(corners) != 4:
                raise StyleError(
                    f"Border style '{name}': corners must be a 4-character string, "
                    f"got {corners!r}"
                )
            corner_glyphs = dict(zip(CORNER_KEYS, corners))
        else:
            missing = [key for key in CORNER_KEYS if key not in data]
            if missing:
                raise StyleError(f"Border style '{name}' is missing {', '.join(missing)}")
            corner_glyphs = {key: data[key] for key in CORNER_KEYS}

        for key in ("horizontal", "vertical"):
            if key not in data:
                raise StyleError(f"Border style '{name}' is missing {key}")

        return BorderStyle(
            name=name,
            horizontal=data["horizontal"],
            vertical=data["vertical"],
            **corner_glyphs,
        )
