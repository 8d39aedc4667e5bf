"""Tests for hex and functional-notation parsing in colour_kit.core.colour."""

import pytest
from colour_kit.core.colour import Colour, is_valid_hex, parse_colour, parse_hex
from colour_kit.core.errors import ColourKitError, InvalidColourInput, InvalidHexInput


class TestParseHex:
    def test_with_hash(self):
        assert parse_hex('#ff00aa') == 0xFF00AA

    def test_without_hash(self):
        assert parse_hex('ff00aa') == 0xFF00AA

    def test_uppercase(self):
        assert parse_hex('#FF00AA') == 0xFF00AA

    def test_short_form_doubles_digits(self):
        assert parse_hex('f0a') == 0xFF00AA
        assert parse_hex('#F0A') == 0xFF00AA

    def test_surrounding_whitespace(self):
        assert parse_hex('  #abcdef\n') == 0xABCDEF

    def test_too_short_is_black(self):
        assert parse_hex('12') == 0x000000
        assert parse_hex('#12345') == 0x000000
        assert parse_hex('') == 0x000000
        assert parse_hex('#') == 0x000000

    def test_too_long_is_truncated(self):
        assert parse_hex('1234567') == 0x123456
        assert parse_hex('#ffffffff') == 0xFFFFFF

    def test_not_hex_is_black(self):
        assert parse_hex('zzzzzz') == 0x000000
        assert parse_hex('xyz') == 0x000000
        assert parse_hex('+12345') == 0x000000
        assert parse_hex('12_345') == 0x000000


class TestParseHexStrict:
    def test_valid_passes(self):
        assert parse_hex('#abc', strict=True) == 0xAABBCC
        assert parse_hex('a1b2c3', strict=True) == 0xA1B2C3

    @pytest.mark.parametrize('text', ['12', '1234567', 'xyz', 'gggggg', ''])
    def test_invalid_raises(self, text):
        with pytest.raises(InvalidHexInput):
            parse_hex(text, strict=True)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex('12', strict=True)
        assert issubclass(InvalidHexInput, ColourKitError)


class TestIsValidHex:
    def test_valid(self):
        assert is_valid_hex('#ff00aa')
        assert is_valid_hex('f0a')

    def test_invalid(self):
        assert not is_valid_hex('12')
        assert not is_valid_hex('1234567')
        assert not is_valid_hex('not a colour')


class TestFromHex:
    def test_short_and_long_forms_equal(self):
        assert Colour.from_hex('f0a') == Colour.from_hex('ff00aa')

    def test_short_resolves_to_black(self):
        assert Colour.from_hex('12').hex == 0x000000

    def test_long_truncates(self):
        assert Colour.from_hex('1234567').hex == 0x123456

    def test_constructor_is_from_hex(self):
        assert Colour('#00ff00').rgb == (0, 255, 0)


class TestParseColour:
    def test_hex(self):
        assert parse_colour('#00ff00').rgb == (0, 255, 0)

    def test_rgb(self):
        assert parse_colour('rgb(255, 128, 0)').rgb == (255, 128, 0)

    def test_rgb_masks(self):
        assert parse_colour('rgb(300,0,0)').red == 44

    def test_rgb_garbage_is_zero(self):
        assert parse_colour('rgb(a,b,c)').hex == 0

    def test_missing_component_is_black(self):
        assert parse_colour('rgb(1,2)').hex == 0

    @pytest.mark.parametrize('text', ['rgb(1,2)', 'rgb(a,b,c)', 'hsv(1,2,3', 'HSV(x,1,1)'])
    def test_strict_rejects_malformed_functional(self, text: str):
        with pytest.raises(InvalidColourInput):
            parse_colour(text, strict=True)

    def test_strict_rejects_bad_hex(self):
        with pytest.raises(InvalidHexInput):
            parse_colour('12', strict=True)

    def test_strict_accepts_well_formed(self):
        assert parse_colour('rgb(300,0,0)', strict=True).red == 44
        assert parse_colour('hsv(120,1,1)', strict=True).rgb == (0, 255, 0)
        assert parse_colour('#f0a', strict=True).hex == 0xFF00AA

    def test_hsv_case_insensitive(self):
        assert parse_colour('HSV(120,1,1)').rgb == (0, 255, 0)

    def test_hsv_clamps(self):
        c = parse_colour('hsv(-10, 2, -1)')
        assert c.hsv == (0.0, 1.0, 0.0)

    def test_reads_own_string_forms(self):
        original = Colour.from_rgb(12, 34, 56)
        assert parse_colour(original.to_string_rgb()) == original
        assert parse_colour(original.to_string_hex()) == original
        assert parse_colour(original.to_string_hsv()) == original
