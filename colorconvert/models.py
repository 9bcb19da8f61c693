"""Canonical RGBA color, the hub every notation converts through."""

from pydantic import BaseModel, ConfigDict, Field


class RGBA(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def opaque(self) -> bool:
        return self.a >= 1


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def channel(v: float) -> int:
    """Clamp a 0-255 channel value to the byte range and round it."""
    return int(round(clamp(v, 0, 255)))


def wrap_hue(h: float) -> float:
    """Reduce an angle in degrees to [0, 360)."""
    h = h % 360
    # -1e-20 % 360 gives 360.0 in floating point
    return 0.0 if h >= 360 else h
