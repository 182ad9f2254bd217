"""Navy and gold palettes, the usual colours of legal publications."""

from dataclasses import dataclass

import flet as ft


@dataclass(frozen=True)
class Palette:
    primary: str
    on_primary: str
    secondary: str
    surface: str
    error: str

    def scheme(self) -> ft.ColorScheme:
        return ft.ColorScheme(
            primary=self.primary,
            on_primary=self.on_primary,
            secondary=self.secondary,
            surface=self.surface,
            error=self.error,
        )


COURT_NAVY = Palette(
    primary="#1f3a5f",
    on_primary="#ffffff",
    secondary="#b8860b",
    surface="#ffffff",
    error="#c0392b",
)

CHAMBERS_NIGHT = Palette(
    primary="#8fb3e0",
    on_primary="#0d1b2a",
    secondary="#e0b84c",
    surface="#1e1e1e",
    error="#e57373",
)

READING_FONT = "Merriweather"


class AppTheme:
    light = COURT_NAVY
    dark = CHAMBERS_NIGHT

    @staticmethod
    def build(palette: Palette) -> ft.Theme:
        return ft.Theme(color_scheme=palette.scheme(), font_family=READING_FONT)

    @classmethod
    def apply(cls, page: ft.Page, mode: ft.ThemeMode = ft.ThemeMode.LIGHT) -> None:
        page.theme = cls.build(cls.light)
        page.dark_theme = cls.build(cls.dark)
        page.theme_mode = mode

    @staticmethod
    def toggle(page: ft.Page) -> None:
        page.theme_mode = (
            ft.ThemeMode.DARK if page.theme_mode == ft.ThemeMode.LIGHT else ft.ThemeMode.LIGHT
        )
        page.update()
