"""Test digit grouping classification, regrouping and the grouping check."""

from __future__ import annotations

import pytest

from numlit.decompose import decompose
from numlit.findings import FindingKind
from numlit.grouping import check_digit_grouping, classify_grouping, regroup
from numlit.options import LintOptions

GROUPING_KINDS = {FindingKind.LARGE_DIGIT_GROUPS, FindingKind.INCONSISTENT_DIGIT_GROUPING}


class TestClassify:
    @pytest.mark.parametrize(
        "groups, width",
        [
            (["1", "234", "567"], 3),
            (["123", "456"], 3),
            (["1234", "5678"], 4),
            (["f", "ffff"], 4),
        ],
    )
    def test_canonical(self, groups, width):
        assert classify_grouping(groups, width) is None

    def test_tail_too_large(self):
        assert classify_grouping(["1", "23456", "78901"], 4) == FindingKind.LARGE_DIGIT_GROUPS

    def test_tail_too_small(self):
        assert classify_grouping(["3", "16", "23"], 3) == FindingKind.INCONSISTENT_DIGIT_GROUPING

    def test_tail_uneven(self):
        assert classify_grouping(["12", "3456", "21"], 3) == FindingKind.INCONSISTENT_DIGIT_GROUPING

    def test_two_groups_small_tail(self):
        assert classify_grouping(["1234", "56"], 3) == FindingKind.INCONSISTENT_DIGIT_GROUPING

    def test_lead_oversized_with_canonical_tail(self):
        assert classify_grouping(["12345", "678"], 3) == FindingKind.LARGE_DIGIT_GROUPS


class TestRegroup:
    @pytest.mark.parametrize(
        "digits, expected",
        [
            ("1", "1"),
            ("123", "123"),
            ("1234", "1_234"),
            ("31623", "31_623"),
            ("123456", "123_456"),
            ("12345621", "12_345_621"),
        ],
    )
    def test_decimal_never_pads(self, digits, expected):
        assert regroup(digits, 3, pad=False) == expected

    @pytest.mark.parametrize(
        "digits, expected",
        [
            ("1", "0001"),
            ("101", "0101"),
            ("ffff", "ffff"),
            ("12345678901", "0123_4567_8901"),
        ],
    )
    def test_radix_pads(self, digits, expected):
        assert regroup(digits, 4, pad=True) == expected


class TestCheckDigitGrouping:
    def test_large_hex_groups(self, lint):
        (finding,) = lint("0x1_23456_78901_usize")
        assert finding.kind == FindingKind.LARGE_DIGIT_GROUPS
        assert finding.suggestions == ("0x0123_4567_8901_usize",)

    def test_uneven_decimal_groups(self, lint):
        (finding,) = lint("12_3456_21")
        assert finding.kind == FindingKind.INCONSISTENT_DIGIT_GROUPING
        assert finding.suggestions == ("12_345_621",)

    def test_doubled_separators(self, lint):
        (finding,) = lint("3__16___23")
        assert finding.kind == FindingKind.INCONSISTENT_DIGIT_GROUPING
        assert finding.suggestions == ("31_623",)

    def test_binary_padded(self, lint):
        (finding,) = lint("0b1_01")
        assert finding.kind == FindingKind.INCONSISTENT_DIGIT_GROUPING
        assert finding.suggestions == ("0b0101",)

    def test_octal_groups(self, lint):
        (finding,) = lint("0o1_2345_67")
        assert finding.kind == FindingKind.INCONSISTENT_DIGIT_GROUPING
        assert finding.suggestions == ("0o0123_4567",)

    def test_unseparated_suffix_kept_as_written(self, dec):
        finding = check_digit_grouping(dec("1_2345i64"))
        assert finding is not None
        assert finding.suggestions == ("12_345i64",)

    @pytest.mark.parametrize("raw", ["1_000_000", "0xffff_ffff", "0b1_0000", "1_234.5", "12_u8"])
    def test_canonical_not_reported(self, dec, raw):
        assert check_digit_grouping(dec(raw)) is None

    @pytest.mark.parametrize("raw", ["1000000000", "0xffffffffff", "123456789u64", "1234_i32"])
    def test_no_grouping_attempt_not_reported(self, dec, raw):
        assert check_digit_grouping(dec(raw)) is None


class TestFloatGrouping:
    def test_integer_part_regrouped(self, lint):
        (finding,) = lint("1_0000.5")
        assert finding.kind == FindingKind.LARGE_DIGIT_GROUPS
        assert finding.suggestions == ("10_000.5",)

    def test_fraction_and_suffix_kept(self, lint):
        (finding,) = lint("1_0000.5_f32")
        assert finding.suggestions == ("10_000.5_f32",)

    def test_exponent_kept(self, lint):
        (finding,) = lint("12_34e1_0")
        assert finding.suggestions == ("1_234e1_0",)

    def test_fraction_groups_not_judged(self, dec):
        assert check_digit_grouping(dec("1.000_000_1")) is None


class TestOptions:
    def test_custom_decimal_width(self, dec):
        options = LintOptions(decimal_group_size=4)
        assert check_digit_grouping(dec("1_0000_0000"), options) is None
        finding = check_digit_grouping(dec("1_000"), options)
        assert finding is not None
        assert finding.kind == FindingKind.INCONSISTENT_DIGIT_GROUPING
        assert finding.suggestions == ("1000",)

    def test_custom_radix_width(self, dec):
        options = LintOptions(radix_group_size=2)
        assert check_digit_grouping(dec("0xff_ff_ff"), options) is None
        finding = check_digit_grouping(dec("0xf_fff"), options)
        assert finding is not None
        assert finding.suggestions == ("0xff_ff",)

    @pytest.mark.parametrize("value", [0, -3, True, "3"])
    def test_invalid_widths(self, value):
        with pytest.raises(ValueError):
            LintOptions(decimal_group_size=value)
        with pytest.raises(ValueError):
            LintOptions(radix_group_size=value)


class TestIdempotence:
    @pytest.mark.parametrize(
        "raw",
        [
            "0x1_23456_78901_usize",
            "12_3456_21",
            "3__16___23",
            "1_2",
            "12345_678",
            "0b1_01",
            "0o1_2345_67",
            "0xdead_beefcafe",
            "1_0000.5_f32",
        ],
    )
    def test_suggestion_is_canonical(self, dec, raw):
        finding = check_digit_grouping(dec(raw))
        assert finding is not None
        (suggestion,) = finding.suggestions
        assert check_digit_grouping(decompose(suggestion)) is None
