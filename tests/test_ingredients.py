"""Tests for ingredient-line metric annotation."""

import pytest

from recipecollector.measure.ingredients import (
    annotate_embedded_lengths,
    annotate_ingredient,
    annotate_leading_measure,
)


class TestLeadingMeasure:
    """Tests for conversion of the leading quantity + unit."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("2 cups flour", "2 cups flour (473 ml)"),
            ("2 cups", "2 cups (473 ml)"),
            ("1/2 tablespoon salt", "1/2 tablespoon salt (7.4 ml)"),
            ("1 tsp vanilla extract", "1 tsp vanilla extract (4.9 ml)"),
            ("1/8 tsp cayenne", "1/8 tsp cayenne (0.62 ml)"),
            ("½ cup milk", "½ cup milk (118 ml)"),
            ("1 1/2 cups sugar", "1 1/2 cups sugar (355 ml)"),
            ("1½ cups sugar", "1½ cups sugar (355 ml)"),
            ("5 cups water", "5 cups water (1.2 l)"),
            ("1 gallon water", "1 gallon water (3.8 l)"),
            ("2 fl oz lemon juice", "2 fl oz lemon juice (59.1 ml)"),
        ],
    )
    def test_volume(self, line, expected):
        """Test volume conversions to ml and l."""
        assert annotate_ingredient(line) == expected

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("3 lbs chicken", "3 lbs chicken (1.4 kg)"),
            ("8 oz cream cheese", "8 oz cream cheese (227 g)"),
            ("1 oz. dark chocolate", "1 oz. dark chocolate (28.3 g)"),
            ("2 Pounds ground beef", "2 Pounds ground beef (907 g)"),
        ],
    )
    def test_weight(self, line, expected):
        """Test weight conversions to g and kg."""
        assert annotate_ingredient(line) == expected

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("1 foot kitchen twine", "1 foot kitchen twine (30.5 cm)"),
            ("4 feet kitchen twine", "4 feet kitchen twine (1.2 m)"),
        ],
    )
    def test_length(self, line, expected):
        """Test length conversions to cm and m."""
        assert annotate_ingredient(line) == expected

    def test_unit_followed_by_comma(self):
        """Test the annotation goes to the end of the line."""
        assert annotate_ingredient("2 cups, sifted flour") == "2 cups, sifted flour (473 ml)"

    def test_trailing_whitespace_preserved(self):
        """Test the annotation lands before trailing whitespace."""
        assert annotate_ingredient("2 cups flour  ") == "2 cups flour (473 ml)  "

    def test_range_uses_first_number(self):
        """Test ranges convert their lower bound."""
        assert annotate_ingredient("2-3 cups broth") == "2-3 cups broth (473 ml)"

    def test_prefix_end_reported(self):
        """Test the annotated prefix length is returned."""
        assert annotate_leading_measure("2 cups flour") == ("2 cups flour (473 ml)", 6)

    def test_metric_prefix_short_circuits(self):
        """Test already-metric prefixes stop all annotation."""
        assert annotate_leading_measure("200 g flour") is None


class TestUnchangedLines:
    """Tests for lines that must come back byte-identical."""

    @pytest.mark.parametrize(
        "line",
        [
            "200 g flour",
            "500 ml milk",
            "1 kg potatoes",
            "30 cm baking pan, about 12 inch",
            "salt to taste",
            "2 large eggs",
            "3 cloves garlic",
            "1 (12 oz.) can beans",
            "0 cups sugar",
            "-2 cups sugar",
            "",
            "   ",
        ],
    )
    def test_line_unchanged(self, line):
        """Test metric, unit-less and unparseable lines pass through."""
        assert annotate_ingredient(line) == line


class TestEmbeddedLengths:
    """Tests for lengths mentioned inside the line."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("cut into 1-inch pieces", "cut into 1-inch (2.5 cm) pieces"),
            ("cut into 1/2-inch cubes", "cut into 1/2-inch (1.3 cm) cubes"),
            ("slice 1/8 inch thick", "slice 1/8 inch (3.2 mm) thick"),
            ("a 9 inch pie crust", "a 9 inch (22.9 cm) pie crust"),
            ("cut into 1 1/2-inch chunks", "cut into 1 1/2-inch (3.8 cm) chunks"),
            ("a string 4 feet long", "a string 4 feet (122 cm) long"),
        ],
    )
    def test_embedded_length(self, line, expected):
        """Test annotation is inserted right after the match."""
        assert annotate_ingredient(line) == expected

    def test_multiple_matches(self):
        """Test each mention gets its own annotation."""
        line = "cut into 2-inch strips, then 1/2 inch dice"
        assert annotate_ingredient(line) == (
            "cut into 2-inch (5.1 cm) strips, then 1/2 inch (1.3 cm) dice"
        )

    def test_combined_with_leading_volume(self):
        """Test the leading annotation and embedded annotation coexist."""
        line = "1 cup walnuts, cut into 1-inch pieces"
        assert annotate_ingredient(line) == (
            "1 cup walnuts, cut into 1-inch (2.5 cm) pieces (237 ml)"
        )

    def test_leading_length_not_annotated_twice(self):
        """Test the converted prefix is not scanned again."""
        assert annotate_ingredient("2 inch piece fresh ginger") == (
            "2 inch piece fresh ginger (5.1 cm)"
        )

    def test_already_wrapped_match_skipped(self):
        """Test a match written as "(<match>)" is left alone."""
        assert annotate_embedded_lengths("a (1 inch) cube") == "a (1 inch) cube"

    def test_idempotent(self):
        """Test repeated runs add no second parenthetical."""
        once = annotate_ingredient("cut into 1-inch pieces")
        twice = annotate_ingredient(once)
        assert twice == once
        assert annotate_embedded_lengths(twice) == once

    def test_skip_before(self):
        """Test matches before the given index are ignored."""
        assert annotate_embedded_lengths("2 inch piece", skip_before=1) == "2 inch piece"

    def test_words_containing_unit_letters(self):
        """Test units must end at a word boundary."""
        assert annotate_embedded_lengths("add 2 infused oils") == "add 2 infused oils"

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("cut into .5-inch cubes", "cut into .5-inch (1.3 cm) cubes"),
            ("cut into 1.5-inch cubes", "cut into 1.5-inch (3.8 cm) cubes"),
        ],
    )
    def test_decimal_lengths_read_whole(self, line, expected):
        """Test decimals are converted as a whole, never from their fractional digits."""
        assert annotate_ingredient(line) == expected


class TestDegenerateAmounts:
    """Tests for amounts that cannot be shown as a metric value."""

    def test_amount_too_small_to_show(self):
        """Test no zero-value annotation is added."""
        assert annotate_ingredient("0.0001 tsp salt") == "0.0001 tsp salt"

    def test_leading_quantity_out_of_float_range(self):
        """Test huge leading quantities leave the line unchanged."""
        line = "1" * 400 + " cups flour"
        assert annotate_ingredient(line) == line

    def test_embedded_length_out_of_float_range(self):
        """Test huge embedded lengths are skipped."""
        line = "cut into " + "1" * 400 + "-inch pieces"
        assert annotate_ingredient(line) == line

    def test_product_out_of_float_range(self):
        """Test a finite quantity whose metric value overflows is skipped."""
        line = "1" + "0" * 307 + " gallons water"
        assert annotate_ingredient(line) == line
