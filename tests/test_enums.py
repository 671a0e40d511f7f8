import pytest

from arxiv_query.enums import Category, SortCriterion, SortOrder


@pytest.mark.parametrize(
    "member, value",
    [
        (Category.CS_AI, "cs.AI"),
        (Category.CS_LG, "cs.LG"),
        (Category.QUANT_PH, "quant-ph"),
        (Category.ECON_EM, "econ.EM"),
        (Category.COND_MAT_MES_HALL, "cond-mat.mes-hall"),
        (Category.MATH_PH, "math-ph"),
        (Category.ASTRO_PH, "astro-ph"),
    ],
)
def test_category_values(member, value):
    assert member.value == value
    assert str(member) == value
    assert Category(value) is member


def test_category_formats_as_value_in_fstring():
    category = Category("cs.AI")
    assert f"cat:{category}" == "cat:cs.AI"


def test_category_values_round_trip_and_are_unique():
    values = [member.value for member in Category]
    assert [Category(value) for value in values] == list(Category)
    assert len(values) == len(set(values))


def test_category_is_string_comparable():
    assert Category("cs.CV") == "cs.CV"
    assert Category("cs.ET") is Category.CS_ET


def test_distinct_systems_and_control_categories():
    assert Category("cs.SY") != Category("eess.SY")
    assert Category("math.MP") != Category("math-ph")


def test_unknown_category_rejected():
    with pytest.raises(ValueError):
        Category("not.a.category")


@pytest.mark.parametrize(
    "member, value",
    [
        (SortCriterion.RELEVANCE, "relevance"),
        (SortCriterion.LAST_UPDATED_DATE, "lastUpdatedDate"),
        (SortCriterion.SUBMITTED_DATE, "submittedDate"),
    ],
)
def test_sort_criterion_values(member, value):
    assert str(member) == value
    assert SortCriterion(value) is member


@pytest.mark.parametrize(
    "member, value",
    [
        (SortOrder.ASCENDING, "ascending"),
        (SortOrder.DESCENDING, "descending"),
    ],
)
def test_sort_order_values(member, value):
    assert str(member) == value
    assert SortOrder(value) is member


def test_sort_enums_cover_exactly_the_api_values():
    criteria = {SortCriterion(v) for v in ("relevance", "lastUpdatedDate", "submittedDate")}
    orders = {SortOrder(v) for v in ("ascending", "descending")}
    assert criteria == set(SortCriterion)
    assert orders == set(SortOrder)