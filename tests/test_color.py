"""Unit tests for the color module.

Tests cover:
- Constants and operator algebra
- Sum/product reductions and their identities
- Byte conversion, including the 0.999 clamp boundary
- Hex parsing and its error messages
- Batch serialization to a text sink
"""

import io
import math

import pytest

from src.python.core.approx import is_equal
from src.python.core.color import Color3, write_colors_batch
from src.python.core.vector import Vector3


class TestConstants:
    """Tests for the named unit-cube colors."""

    @pytest.mark.parametrize(
        "color,expected",
        [
            (Color3.BLACK, (0.0, 0.0, 0.0)),
            (Color3.WHITE, (1.0, 1.0, 1.0)),
            (Color3.RED, (1.0, 0.0, 0.0)),
            (Color3.GREEN, (0.0, 1.0, 0.0)),
            (Color3.BLUE, (0.0, 0.0, 1.0)),
            (Color3.CYAN, (0.0, 1.0, 1.0)),
            (Color3.PINK, (1.0, 0.0, 1.0)),
            (Color3.YELLOW, (1.0, 1.0, 0.0)),
        ],
    )
    def test_named_colors(self, color, expected):
        assert color.to_tuple() == expected

    def test_default_is_black(self):
        assert Color3() == Color3.BLACK

    def test_not_clamped_on_construction(self):
        hdr = Color3(15.0, -1.0, 0.5)
        assert (hdr.r, hdr.g, hdr.b) == (15.0, -1.0, 0.5)


class TestOperators:
    """Tests for the color algebra."""

    def test_add_sub(self):
        assert Color3.RED + Color3.GREEN == Color3.YELLOW
        assert Color3.WHITE - Color3.BLUE == Color3.YELLOW

    def test_componentwise_mul(self):
        assert Color3.YELLOW * Color3.CYAN == Color3.GREEN

    def test_componentwise_div(self):
        assert Color3(1.0, 0.5, 0.25) / Color3(2.0, 2.0, 2.0) == Color3(0.5, 0.25, 0.125)

    def test_scalar_mul_is_commutative(self):
        c = Color3(0.25, 0.5, 1.0)
        assert c * 0.5 == 0.5 * c == Color3(0.125, 0.25, 0.5)

    def test_scalar_div(self):
        assert Color3.WHITE / 4.0 == Color3.splat(0.25)

    def test_color_and_vector_do_not_mix(self):
        with pytest.raises(TypeError):
            Color3.RED + Vector3.X
        with pytest.raises(TypeError):
            Vector3.X * Color3.RED
        assert Color3.RED != Vector3.X

    def test_explicit_vector_conversion(self):
        assert Color3.from_vector(Vector3(0.5, 0.25, 1.0)) == Color3(0.5, 0.25, 1.0)
        assert Color3.PINK.to_vector() == Vector3(1.0, 0.0, 1.0)


class TestReductions:
    """Tests for sum and product with their identities."""

    def test_sum(self):
        assert Color3.sum([Color3.RED, Color3.GREEN, Color3.BLUE]) == Color3.WHITE

    def test_sum_of_nothing_is_black(self):
        assert Color3.sum([]) == Color3.BLACK

    def test_product(self):
        assert Color3.product([Color3.YELLOW, Color3.PINK]) == Color3.RED

    def test_product_of_nothing_is_white(self):
        assert Color3.product([]) == Color3.WHITE

    def test_accepts_generators(self):
        samples = (Color3.splat(0.25) for _ in range(4))
        assert Color3.sum(samples) == Color3.WHITE


class TestByteConversion:
    """Tests for float <-> byte conversion."""

    def test_white_maps_to_255(self):
        assert Color3.WHITE.to_bytes() == (255, 255, 255)

    def test_black_maps_to_0(self):
        assert Color3.BLACK.to_bytes() == (0, 0, 0)

    def test_clamps_out_of_range(self):
        assert Color3(2.0, -1.0, 0.5).to_bytes() == (255, 0, 128)

    def test_clamp_boundary(self):
        # 0.999 * 256 = 255.744 truncates to 255, never 256
        assert Color3(0.999, 0.9989, 1.0).to_bytes() == (255, 255, 255)
        assert Color3(0.996, 0.0, 0.0).to_bytes()[0] == 254

    def test_non_finite_components(self):
        assert Color3(math.nan, math.inf, -math.inf).to_bytes() == (0, 255, 0)

    def test_from_bytes(self):
        c = Color3.from_bytes((255, 0, 51))
        assert is_equal(c.r, 1.0)
        assert c.g == 0.0
        assert is_equal(c.b, 0.2)

    def test_from_bytes_requires_three_values(self):
        with pytest.raises(ValueError):
            Color3.from_bytes((1, 2))

    @pytest.mark.parametrize("rgb", [b"\xff\x00\x80", bytearray(b"\xff\x00\x80"), memoryview(b"\xff\x00\x80")])
    def test_from_bytes_accepts_bytes_like(self, rgb):
        assert Color3.from_bytes(rgb).to_bytes() == (255, 0, 128)

    def test_from_bytes_wrong_length_bytes(self):
        with pytest.raises(ValueError, match="Expected 3 byte components"):
            Color3.from_bytes(b"\xff\x00")

    @pytest.mark.parametrize("rgb", [(1.7, 0, 0), (0, 0.0, 0), (0, 0, "1")])
    def test_from_bytes_rejects_non_integers(self, rgb):
        with pytest.raises(TypeError):
            Color3.from_bytes(rgb)

    @pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_from_bytes_rejects_out_of_range(self, rgb):
        with pytest.raises(ValueError, match=r"\[0, 255\]"):
            Color3.from_bytes(rgb)

    def test_every_byte_round_trips(self):
        # Channels convert independently, so every byte value on every channel
        # covers all triples
        for value in range(256):
            for rgb in [(value, 0, 0), (0, value, 0), (0, 0, value), (value, value, value)]:
                assert Color3.from_bytes(rgb).to_bytes() == rgb

    def test_mixed_triple_round_trips(self):
        assert Color3.from_bytes((255, 128, 1)).to_bytes() == (255, 128, 1)


class TestHexParsing:
    """Tests for #RRGGBB parsing."""

    def test_parse_pink(self):
        c = Color3.from_hex("#FF00FF")
        assert c.to_tuple() == (1.0, 0.0, 1.0)

    def test_lowercase_digits(self):
        assert Color3.from_hex("#ff00ff") == Color3.from_hex("#FF00FF")

    def test_parse_bytes(self):
        assert Color3.from_hex(b"#00FF00") == Color3.GREEN

    def test_hex_round_trips_through_bytes(self):
        assert Color3.from_hex("#1A2B3C").to_bytes() == (0x1A, 0x2B, 0x3C)

    def test_missing_hash(self):
        with pytest.raises(ValueError, match="must start with '#'"):
            Color3.from_hex("FF00FF")

    def test_invalid_red(self):
        with pytest.raises(ValueError, match="Invalid red component 'GG'"):
            Color3.from_hex("#GG0000")

    def test_invalid_green(self):
        with pytest.raises(ValueError, match="Invalid green component"):
            Color3.from_hex("#00ZZ00")

    def test_invalid_blue(self):
        with pytest.raises(ValueError, match="Invalid blue component"):
            Color3.from_hex("#0000-1")

    def test_sign_is_not_a_hex_digit(self):
        with pytest.raises(ValueError, match="Invalid red component"):
            Color3.from_hex("#+F0000")

    def test_invalid_utf8(self):
        with pytest.raises(ValueError, match="Invalid UTF-8"):
            Color3.from_hex(b"#\xff\xfe0000")

    @pytest.mark.parametrize("value", ["#FFF", "#FF00FF00", ""])
    def test_wrong_length(self, value):
        with pytest.raises(ValueError):
            Color3.from_hex(value)

    def test_wrong_length_message(self):
        with pytest.raises(ValueError, match="must be 7 bytes"):
            Color3.from_hex("#FFF")


class TestSerialization:
    """Tests for display formatting and batch writing."""

    def test_str_is_byte_triple(self):
        assert str(Color3(1.0, 0.5, 0.0)) == "255 128 0"

    def test_repr(self):
        assert repr(Color3(1.0, 0.5, 0.0)) == "Color3(1.0, 0.5, 0.0)"

    def test_repr_uses_shortest_float32_digits(self):
        assert repr(Color3(0.1, 0.2, 0.7)) == "Color3(0.1, 0.2, 0.7)"

    def test_batch_red_green(self):
        out = io.StringIO()
        write_colors_batch(out, [Color3(1.0, 0.0, 0.0), Color3(0.0, 1.0, 0.0)])
        assert out.getvalue() == "255 0 0\n0 255 0\n"

    def test_batch_empty(self):
        out = io.StringIO()
        write_colors_batch(out, [])
        assert out.getvalue() == ""

    def test_batch_performs_single_write(self):
        class RecordingSink:
            def __init__(self):
                self.calls = []

            def write(self, text):
                self.calls.append(text)
                return len(text)

        sink = RecordingSink()
        write_colors_batch(sink, [Color3.RED, Color3.GREEN, Color3.BLUE])
        assert sink.calls == ["255 0 0\n0 255 0\n0 0 255\n"]

    def test_batch_propagates_write_errors(self):
        class FailingSink:
            def write(self, text):
                raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            write_colors_batch(FailingSink(), [Color3.WHITE])
