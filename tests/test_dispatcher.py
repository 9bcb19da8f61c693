import itertools
import random

import pytest

from colorconvert import (
    RGBA,
    EXTENSION_FORMATS,
    SUPPORTED_FORMATS,
    ColorFormat,
    ColorParseError,
    InvalidTargetFormatError,
    NamedColorNotFoundError,
    ParsedColor,
    convert_color,
    describe_color,
    parse_color,
)
from colorconvert.spaces import HSL, LCH, NCOL

samples = [
    "#ff0000",
    "#123456",
    "rgb(200, 150, 100)",
    "rgb(1, 2, 3)",
    "rgb(254, 253, 252)",
    "rgb(0, 255, 127)",
    "rgb(75, 0, 130)",
    "rgb(128, 128, 128)",
    "black",
    "white",
    "rebeccapurple",
    "hsl(33, 70%, 40%)",
]


def random_samples(count, seed):
    """Seeded rgba() inputs, half of them saturated with one channel near 0."""
    rng = random.Random(seed)
    out = []
    for i in range(count):
        chans = [rng.randint(0, 255) for _ in range(3)]
        if i % 2:
            chans = [rng.randint(0, 8), rng.randint(200, 255), rng.randint(0, 255)]
            rng.shuffle(chans)
        alpha = rng.choice(["1", "0.999", "0.998", "0.5", "0.25", "0"])
        out.append(f"rgba({chans[0]}, {chans[1]}, {chans[2]}, {alpha})")
    return out


all_formats = list(SUPPORTED_FORMATS)


def channels(text):
    rgba = parse_color(text)
    return rgba.r, rgba.g, rgba.b


def assert_within_one(left, right):
    for a, b in zip(left, right):
        assert abs(a - b) <= 1, (left, right)


# Boundary scenarios ----------------------------------------------

def test_parse_hex_red():
    assert parse_color("#ff0000") == RGBA(r=255, g=0, b=0, a=1.0)


@pytest.mark.parametrize("text, target, expected", [
    ("rgb(255,0,0)", "cmyk", "cmyk(0.0%, 100.0%, 100.0%, 0.0%)"),
    ("rgb(0,0,0)", "cmyk", "cmyk(0.0%, 0.0%, 0.0%, 100.0%)"),
    ("hsl(0,100%,50%)", "hex", "#FF0000"),
    ("red", "rgb", "rgb(255, 0, 0)"),
    ("red", "rgba", "rgba(255, 0, 0, 1.00)"),
    ("#00ff00", "hsl", "hsl(120.0, 100.0%, 50.0%)"),
    ("blue", "hwb", "hwb(240.0, 0.0%, 0.0%)"),
    ("blue", "hwba", "hwba(240.0, 0.0%, 0.0%, 1.00)"),
    ("white", "cmyk", "cmyk(0.0%, 0.0%, 0.0%, 0.0%)"),
    ("#808080", "hsl", "hsl(0.0, 0.0%, 50.2%)"),
    ("rgb(255 0 0 / 0.5)", "hex", "#FF000080"),
    ("rgba(255, 0, 0, 0.5)", "hsla", "hsla(0.0, 100.0%, 50.0%, 0.50)"),
    ("rgba(255, 0, 0, 0.5)", "cmyka", "cmyka(0.0%, 100.0%, 100.0%, 0.0%, 0.50)"),
    ("red", "ncol", "ncol(R0.0, 0.0%, 0.0%)"),
    ("red", "ncola", "ncola(R0.0, 0.0%, 0.0%, 1.00)"),
    ("#ff8000", "ncol", "ncol(R50.2, 0.0%, 0.0%)"),
    ("black", "lab", "lab(0.00 0.00 0.00)"),
    ("black", "oklch", "oklch(0.0000 0.0000 0.00)"),
    ("hsl(-120, 100%, 50%)", "hsl", "hsl(240.0, 100.0%, 50.0%)"),
    ("#00ffff", "named", "aqua"),
    ("transparent", "rgba", "rgba(0, 0, 0, 0.00)"),
])
def test_convert_literals(text, target, expected):
    assert convert_color(text, target) == expected


def test_target_format_is_case_insensitive():
    assert convert_color("hsl(0,100%,50%)", "HEX") == "#FF0000"
    assert convert_color("red", " Cmyk ") == "cmyk(0.0%, 100.0%, 100.0%, 0.0%)"
    assert convert_color("red", ColorFormat.RGB) == "rgb(255, 0, 0)"


@pytest.mark.parametrize("target", ["lab", "lch", "oklab", "oklch"])
def test_perceptual_targets_parse_back(target):
    text = convert_color("red", target)
    assert text.startswith(target + "(")
    assert_within_one(channels(text), (255, 0, 0))


def test_perceptual_alpha_suffix():
    assert convert_color("rgba(10, 20, 30, 0.5)", "lab").endswith(" / 0.50)")
    assert " / " not in convert_color("rgb(10, 20, 30)", "oklch")


def test_near_opaque_alpha_is_treated_as_opaque():
    assert convert_color("rgba(0, 0, 0, 0.999)", "hex") == "#000000"
    assert convert_color("rgba(0, 0, 0, 0.998)", "hex") == "#000000FE"
    assert " / " not in convert_color("rgba(10, 20, 30, 0.999)", "lab")
    assert convert_color("rgba(10, 20, 30, 0.994)", "oklab").endswith(" / 0.99)")


# Round trip ------------------------------------------------------

round_trip_formats = ["hex", "rgb", "rgba", "hsl", "hsla", "hwb", "hwba", "cmyk", "cmyka", "ncol"]


@pytest.mark.parametrize("f1, f2", list(itertools.product(round_trip_formats, repeat=2)))
def test_round_trip_between_formats(f1, f2):
    for text in samples:
        via_f1 = convert_color(convert_color(text, f1), f2)
        direct = convert_color(text, f2)
        assert_within_one(channels(via_f1), channels(direct))


@pytest.mark.parametrize("fmt", round_trip_formats + ["lab", "lch", "oklab", "oklch"])
def test_round_trip_back_to_rgb(fmt):
    for text in samples:
        assert_within_one(channels(convert_color(text, fmt)), channels(text))


@pytest.mark.parametrize("fmt", all_formats)
def test_random_colors_round_trip_back_to_source(fmt):
    for text in random_samples(400, seed=fmt) + ["rgb(6, 238, 110)"]:
        assert_within_one(channels(convert_color(text, fmt)), channels(text))


@pytest.mark.parametrize("f1, f2", list(itertools.product(all_formats, repeat=2)))
def test_random_colors_agree_across_two_paths(f1, f2):
    for text in random_samples(40, seed=f1 + f2):
        via_f1 = convert_color(convert_color(text, f1), f2)
        direct = convert_color(text, f2)
        assert_within_one(channels(via_f1), channels(direct))


def test_rgba_hsla_round_trip_keeps_alpha():
    for alpha in (0.0, 0.25, 0.5, 0.75):
        text = f"rgba(18, 52, 86, {alpha})"
        back = parse_color(convert_color(text, "hsla"))
        assert_within_one((back.r, back.g, back.b), (18, 52, 86))
        assert back.a == alpha


# Idempotence and determinism -------------------------------------

hex_samples = samples + ["rgba(255, 0, 0, 0.5)", "#abcd", "transparent", "rgba(0, 0, 0, 0.999)"]


@pytest.mark.parametrize("text", hex_samples + random_samples(100, seed=7))
def test_hex_is_idempotent(text):
    once = convert_color(text, "hex")
    assert convert_color(once, "hex") == once


@pytest.mark.parametrize("fmt", SUPPORTED_FORMATS)
def test_conversion_is_deterministic(fmt):
    for text in samples:
        assert convert_color(text, fmt) == convert_color(text, fmt)


# Clamps and hue wrap ---------------------------------------------

def test_clamp_invariants():
    assert channels("rgb(300,300,300)") == (255, 255, 255)
    assert channels("rgb(-10,-10,-10)") == (0, 0, 0)
    assert parse_color("rgba(255,0,0,1.5)").a == 1.0
    assert parse_color("rgba(255,0,0,-0.5)").a == 0.0


def test_hue_wrap():
    assert parse_color("hsl(360,100%,50%)") == parse_color("hsl(0,100%,50%)")
    hsl = HSL.from_rgba(parse_color("hsl(-30,100%,50%)"))
    assert hsl.h == pytest.approx(330, abs=0.2)


def test_space_hues_stay_below_360():
    for text in samples:
        rgba = parse_color(text)
        assert 0 <= HSL.from_rgba(rgba).h < 360
        assert 0 <= LCH.from_rgba(rgba).h < 360
        assert NCOL.from_rgba(rgba).hue in "RYGCBM"


# Errors ----------------------------------------------------------

@pytest.mark.parametrize("text", ["", "not-a-color"])
def test_parse_failures(text):
    with pytest.raises(ColorParseError):
        parse_color(text)


def test_convert_invalid_target():
    with pytest.raises(InvalidTargetFormatError) as excinfo:
        convert_color("#ff0000", "invalid")
    assert excinfo.value.target == "invalid"
    assert "hex" in str(excinfo.value)


def test_target_is_validated_before_parsing():
    with pytest.raises(InvalidTargetFormatError):
        convert_color("garbage", "invalid")


def test_convert_bad_source():
    with pytest.raises(ColorParseError):
        convert_color("rgb(1, 2)", "hex")


def test_named_target_without_match():
    with pytest.raises(NamedColorNotFoundError):
        convert_color("#123457", "named")


def test_coerce_rejects_non_strings():
    with pytest.raises(InvalidTargetFormatError):
        ColorFormat.coerce(None)
    with pytest.raises(InvalidTargetFormatError):
        ColorFormat.coerce("")


def test_supported_formats():
    for fmt in ["hex", "rgb", "rgba", "hsl", "hsla", "hwb", "hwba", "cmyk", "cmyka",
                "lab", "lch", "oklab", "oklch", "ncol", "ncola"]:
        assert fmt in SUPPORTED_FORMATS
    assert "named" not in SUPPORTED_FORMATS
    assert "named" in EXTENSION_FORMATS
    assert ColorFormat.HSLA.with_alpha
    assert not ColorFormat.HSL.with_alpha


# describe_color --------------------------------------------------

def test_describe_opaque_color():
    parsed = describe_color("red")
    assert isinstance(parsed, ParsedColor)
    assert parsed.input == "red"
    assert parsed.rgba == RGBA(r=255, g=0, b=0)
    assert parsed.hex == "#FF0000"
    assert parsed.rgb == "rgb(255, 0, 0)"
    assert parsed.hsl == "hsl(0.0, 100.0%, 50.0%)"
    assert parsed.hwb == "hwb(0.0, 0.0%, 0.0%)"
    assert parsed.cmyk == "cmyk(0.0%, 100.0%, 100.0%, 0.0%)"
    assert parsed.ncol == "ncol(R0.0, 0.0%, 0.0%)"
    assert parsed.lab.startswith("lab(")
    assert parsed.oklch.startswith("oklch(")
    assert parsed.name == "red"


def test_describe_translucent_color():
    parsed = describe_color("rgba(255, 0, 0, 0.5)")
    assert parsed.hex == "#FF000080"
    assert parsed.rgb == "rgba(255, 0, 0, 0.50)"
    assert parsed.hsl == "hsla(0.0, 100.0%, 50.0%, 0.50)"
    assert parsed.ncol == "ncola(R0.0, 0.0%, 0.0%, 0.50)"
    assert parsed.lab.endswith(" / 0.50)")
    assert parsed.name is None


def test_describe_failure():
    with pytest.raises(ColorParseError):
        describe_color("nope")
