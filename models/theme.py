"""
Preferências de exibição (cor primária e fonte). Apenas cosmético.
"""
from dataclasses import dataclass, field

FONT_FAMILIES = ("font-inter", "font-space-mono", "font-roboto-mono", "font-inconsolata")

FONT_STACKS = {
    "font-inter": "Inter, sans-serif",
    "font-space-mono": "'Space Mono', monospace",
    "font-roboto-mono": "'Roboto Mono', monospace",
    "font-inconsolata": "Inconsolata, monospace",
}


@dataclass
class HSLColor:
    h: int = 231
    s: int = 48
    l: int = 48  # noqa: E741

    def css(self) -> str:
        return f"hsl({self.h}, {self.s}%, {self.l}%)"


@dataclass
class ThemeSettings:
    primary_color: HSLColor = field(default_factory=HSLColor)
    font_family: str = "font-inter"

    def to_dict(self) -> dict:
        c = self.primary_color
        return {
            "primaryColor": {"h": c.h, "s": c.s, "l": c.l},
            "fontFamily": self.font_family,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ThemeSettings":
        color = data.get("primaryColor") or {}
        default = HSLColor()
        font = data.get("fontFamily")
        return cls(
            primary_color=HSLColor(
                h=int(color.get("h", default.h)),
                s=int(color.get("s", default.s)),
                l=int(color.get("l", default.l)),
            ),
            font_family=font if font in FONT_FAMILIES else "font-inter",
        )
