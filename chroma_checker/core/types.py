"""Shared types for chroma-tool: Color, Palette, ContrastRatio, AccessibilityScore, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from chroma_checker.core.colour import HSL, RGB, clamp_hsl, clamp_rgb, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from chroma_checker.core.contrast import BLACK, TEXT_READABLE_RATIO, WHITE, WcagLevel, classify, contrast_ratio

Category = Literal['primary', 'secondary', 'accent', 'neutral']

CATEGORIES: tuple[str, ...] = ('primary', 'secondary', 'accent', 'neutral')


@dataclass(frozen=True)
class ColorAccessibility:
    """Derived readability of a single colour against white and black."""

    contrast_with_white: float
    contrast_with_black: float
    wcag_level: WcagLevel  # level of the better of the two pairings

    @classmethod
    def of(cls, rgb: RGB) -> ColorAccessibility:
        white = contrast_ratio(rgb, WHITE)
        black = contrast_ratio(rgb, BLACK)
        return cls(contrast_with_white=white, contrast_with_black=black, wcag_level=classify(max(white, black)))

    def to_dict(self) -> dict[str, Any]:
        return {
            'contrastWithWhite': self.contrast_with_white,
            'contrastWithBlack': self.contrast_with_black,
            'wcagLevel': self.wcag_level,
        }


@dataclass(frozen=True)
class Color:
    """One palette entry. hex/rgb/hsl always describe the same colour (±1 per channel)."""

    hex: str  # '#RRGGBB'
    rgb: RGB
    hsl: HSL
    name: str = ''
    category: Category = 'primary'
    usage: str = ''
    accessibility: ColorAccessibility | None = None

    def __post_init__(self) -> None:
        if self.accessibility is None:
            object.__setattr__(self, 'accessibility', ColorAccessibility.of(self.rgb))

    @classmethod
    def from_rgb(cls, rgb, name: str = '', category: str = 'primary', usage: str = '') -> Color:
        rgb = clamp_rgb(rgb)
        return cls._build(rgb, rgb_to_hsl(rgb), name, category, usage)

    @classmethod
    def from_hex(cls, hex_str: str, name: str = '', category: str = 'primary', usage: str = '') -> Color:
        return cls.from_rgb(hex_to_rgb(hex_str), name=name, category=category, usage=usage)

    @classmethod
    def from_hsl(cls, hsl, name: str = '', category: str = 'primary', usage: str = '') -> Color:
        """Keeps the given HSL as-is; rgb/hex are derived from it."""
        hsl = clamp_hsl(hsl)
        return cls._build(hsl_to_rgb(hsl), hsl, name, category, usage)

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> Color:
        """Build from a plain colour record. Only `hex` is read; rgb/hsl/accessibility are derived."""
        hex_str = str(record.get('hex', ''))
        return cls.from_hex(
            hex_str,
            name=str(record.get('name') or ''),
            category=str(record.get('category') or 'primary'),
            usage=str(record.get('usage') or ''),
        )

    @classmethod
    def _build(cls, rgb: RGB, hsl: HSL, name: str, category: str, usage: str) -> Color:
        hex_str = rgb_to_hex(rgb, upper=True)
        return cls(
            hex=hex_str,
            rgb=rgb,
            hsl=hsl,
            name=name or hex_str,
            category=category if category in CATEGORIES else 'primary',  # type: ignore[arg-type]
            usage=usage,
            accessibility=ColorAccessibility.of(rgb),
        )

    def renamed(self, name: str) -> Color:
        return replace(self, name=name)

    def to_dict(self) -> dict[str, Any]:
        return {
            'hex': self.hex,
            'rgb': {'r': self.rgb.r, 'g': self.rgb.g, 'b': self.rgb.b},
            'hsl': {'h': self.hsl.h, 's': self.hsl.s, 'l': self.hsl.l},
            'name': self.name,
            'category': self.category,
            'usage': self.usage,
            'accessibility': self.accessibility.to_dict(),
        }


@dataclass(frozen=True)
class ContrastRatio:
    """Contrast between two colours. Recomputed, never patched."""

    color1: str
    color2: str
    ratio: float
    level: WcagLevel
    is_text_readable: bool

    @classmethod
    def between(cls, color1: str, color2: str, ratio: float) -> ContrastRatio:
        return cls(
            color1=color1,
            color2=color2,
            ratio=ratio,
            level=classify(ratio),
            is_text_readable=ratio >= TEXT_READABLE_RATIO,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'color1': self.color1,
            'color2': self.color2,
            'ratio': self.ratio,
            'level': self.level,
            'isTextReadable': self.is_text_readable,
        }


@dataclass(frozen=True)
class AccessibilityScore:
    """Aggregate accessibility result for a palette."""

    overall_score: WcagLevel
    contrast_ratios: tuple[ContrastRatio, ...]
    colorblind_compatible: bool
    recommendations: tuple[str, ...]
    passed_checks: int
    total_checks: int

    def to_dict(self) -> dict[str, Any]:
        return {
            'overallScore': self.overall_score,
            'contrastRatios': [r.to_dict() for r in self.contrast_ratios],
            'colorBlindnessCompatible': self.colorblind_compatible,
            'recommendations': list(self.recommendations),
            'passedChecks': self.passed_checks,
            'totalChecks': self.total_checks,
        }


@dataclass(frozen=True)
class Palette:
    """Ordered colours plus the identity/prompt envelope the engine passes through untouched."""

    colors: tuple[Color, ...] = ()
    name: str = ''
    prompt: str | None = None
    id: str | None = None

    @classmethod
    def coerce(cls, palette: Palette | Iterable[Color]) -> Palette:
        if isinstance(palette, Palette):
            return palette
        return cls(colors=tuple(palette))

    def with_colors(self, colors: Iterable[Color]) -> Palette:
        return replace(self, colors=tuple(colors))

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    def to_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        if self.id:
            obj['id'] = self.id
        if self.name:
            obj['name'] = self.name
        if self.prompt:
            obj['prompt'] = self.prompt
        obj['colors'] = [c.to_dict() for c in self.colors]
        return obj


class Command:
    """A self-registering chroma-tool command.

    Usage in a command module:

        command = Command(name='score', help='Score a palette')

        @command.run
        def run(palette, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, palette: Palette, report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(palette, report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output.

    Sections are keyed by colour hex, or '_palette' for palette-wide results.
    """

    palette_path: str = ''
    palette_name: str = ''
    color_count: int = 0
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    overall: WcagLevel | None = None
    pass_count: int = 0
    fail_count: int = 0

    def add(self, section: str, command_name: str, data: dict[str, Any]) -> None:
        if section not in self.sections:
            self.sections[section] = {'label': None, 'commands': {}}
        self.sections[section]['commands'][command_name] = data

    def set_label(self, section: str, label: str) -> None:
        if section not in self.sections:
            self.sections[section] = {'label': None, 'commands': {}}
        self.sections[section]['label'] = label

    def record_checks(self, passed: int, total: int) -> None:
        self.pass_count += passed
        self.fail_count += total - passed
