from seogen.models import SuggestedSection
from seogen.services.segments import extract_year_segments, scope_indicator


def _sections(*titles):
    return [SuggestedSection(title=t, content="") for t in titles]


def test_full_and_short_year_ranges():
    segs = extract_year_segments(_sections("Best Value: 2014-2018 Used Cars", "Nearly New: 2019-21"))
    assert segs.year_ranges == ["2014-2018", "2019-2021"]
    assert segs.product_segments == []


def test_spaces_around_dash():
    assert extract_year_segments(_sections("Classics 1998 - 2003")).year_ranges == ["1998-2003"]


def test_several_ranges_in_one_title():
    segs = extract_year_segments(_sections("2014-2016 vs 2017-19 models"))
    assert segs.year_ranges == ["2014-2016", "2017-2019"]


def test_titles_without_years_become_product_segments():
    segs = extract_year_segments(_sections("SUV Models", "Electric model lineup", "Models"))
    assert segs.year_ranges == []
    assert segs.product_segments == ["SUV", "Electric  lineup"]


def test_duplicates_removed_in_order():
    segs = extract_year_segments(_sections("2014-2018", "Trucks", "2014-18 again", "Trucks"))
    assert segs.year_ranges == ["2014-2018"]
    assert segs.product_segments == ["Trucks"]


def test_empty_input():
    assert extract_year_segments(None) == ([], [])
    assert extract_year_segments([]) == ([], [])


def test_scope_indicator():
    assert scope_indicator(None) == "comprehensive guide"
    assert scope_indicator(_sections("Only one 2014-2018")) == "comprehensive guide"
    assert scope_indicator(_sections("2014-2018 Cars", "SUV Models")) == "(covers 2014-2018, SUV)"


def test_four_digit_end_year_not_cut_short():
    segs = extract_year_segments(_sections("Best Value: 2014-2018 Used Cars", "Classics 1998 - 2003"))
    assert segs.year_ranges == ["2014-2018", "1998-2003"]


def test_end_year_must_not_be_part_of_longer_number():
    segs = extract_year_segments(_sections("Part 2014-201 kit"))
    assert segs.year_ranges == []
    assert segs.product_segments == ["Part 2014-201 kit"]
