"""Estimator settings and a tolerant text parser for them.

Settings:
- header_width_mhz: width used to compute the PHY rate of header/common fields
  and of fields evaluated at a mode other than the payload's (20 MHz).
- snr_search_*: bisection bounds, stop precision and iteration cap used by
  :func:`yans_error.chunk.calculate_snr`.

The text format is one ``key: value`` (or ``key = value``) per line; ``#`` starts
a comment. Missing keys keep their defaults.
"""
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

from .errors import InvalidInputError


@dataclass(frozen=True)
class EstimatorConfig:
    header_width_mhz: float = 20.0
    snr_search_low: float = 1e-25
    snr_search_high: float = 1e25
    snr_search_precision: float = 2e-12
    snr_search_max_iter: int = 2000

    def __post_init__(self):
        if self.header_width_mhz <= 0:
            raise InvalidInputError("header_width_mhz must be positive")
        if not 0 < self.snr_search_low < self.snr_search_high:
            raise InvalidInputError("SNR search bounds must satisfy 0 < low < high")
        if self.snr_search_precision <= 0 or self.snr_search_max_iter < 1:
            raise InvalidInputError("SNR search precision and iteration cap must be positive")


DEFAULT_CONFIG = EstimatorConfig()

_LINE_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*[:=]\s*(\S+)\s*$")


def parse_config_text(text: str, defaults: Optional[EstimatorConfig] = None) -> EstimatorConfig:
    if defaults is None:
        defaults = DEFAULT_CONFIG
    types = {f.name: f.type for f in fields(EstimatorConfig)}
    updates = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0]
        if not line.strip():
            continue
        m = _LINE_RE.match(line)
        if not m:
            raise InvalidInputError(f"line {lineno}: expected 'key: value', got {raw.strip()!r}")
        key, value = m.group(1).lower(), m.group(2)
        if key not in types:
            raise InvalidInputError(f"line {lineno}: unknown setting {key!r}")
        try:
            updates[key] = int(value) if types[key] in (int, "int") else float(value)
        except ValueError:
            raise InvalidInputError(f"line {lineno}: bad number for {key}: {value!r}") from None
    return replace(defaults, **updates)


def load_config_from_text_file(path: str | Path) -> EstimatorConfig:
    return parse_config_text(Path(path).read_text(encoding="utf-8"))
