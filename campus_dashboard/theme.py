"""Light/dark and color theme state, persisted through an injected store."""

from __future__ import annotations

from typing import Optional, Protocol

THEMES = ("light", "dark")
COLOR_THEMES = ("default", "ocean", "sunset", "forest", "purple")

THEME_KEY = "theme"
COLOR_THEME_KEY = "colorTheme"

# gradient (from, to) per color theme class
ACCENTS = {
    "theme-default": ("#3B82F6", "#9333EA"),
    "theme-ocean": ("#2DD4BF", "#3B82F6"),
    "theme-sunset": ("#FB923C", "#EC4899"),
    "theme-forest": ("#4ADE80", "#059669"),
    "theme-purple": ("#A855F7", "#4F46E5"),
}
SURFACES = {
    "light": {"background": "#F9FAFB", "text": "#111827"},
    "dark": {"background": "#111827", "text": "#F9FAFB"},
}


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class ThemeContext:
    """Explicit theme state handed to the rendering layer."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        saved_theme = store.get(THEME_KEY)
        saved_color = store.get(COLOR_THEME_KEY)
        self.theme = saved_theme if saved_theme in THEMES else "light"
        self.color_theme = saved_color if saved_color in COLOR_THEMES else "default"

    def _save(self) -> None:
        self.store.set(THEME_KEY, self.theme)
        self.store.set(COLOR_THEME_KEY, self.color_theme)

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}'")
        self.theme = theme
        self._save()

    def set_color_theme(self, color_theme: str) -> None:
        if color_theme not in COLOR_THEMES:
            raise ValueError(f"Unknown color theme '{color_theme}'")
        self.color_theme = color_theme
        self._save()

    def toggle_theme(self) -> None:
        self.set_theme("dark" if self.theme == "light" else "light")

    def css_classes(self) -> list[str]:
        classes = [f"theme-{self.color_theme}"]
        if self.theme == "dark":
            classes.insert(0, "dark")
        return classes

    def stylesheet(self) -> str:
        """CSS for the active classes: page surface plus accent gradient on headers and buttons."""

        classes = self.css_classes()
        surface = SURFACES["dark" if "dark" in classes else "light"]
        start, end = ACCENTS[classes[-1]]
        return (
            f".stApp {{ background-color: {surface['background']}; color: {surface['text']}; }}\n"
            f".stApp h1, .stApp h2, .stApp h3 {{ color: {start}; }}\n"
            f".stApp button[kind=\"primary\"] {{ background: linear-gradient(90deg, {start}, {end}); border: none; }}\n"
            f".stApp [data-baseweb=\"tab-highlight\"] {{ background-color: {start}; }}\n"
        )
