"""Tests for the interaction controller and the view model it drives."""

import pytest

from app.models.catalog import CatalogRow
from app.models.query import QueryParameters
from app.services.controller import InteractionController
from app.services.view_model import PricingViewModel


@pytest.fixture
def controller(view_model) -> InteractionController:
    return InteractionController(view_model)


def test_defaults(controller):
    params = controller.params
    assert params.search_text == ""
    assert params.input_tokens == 100_000
    assert params.output_tokens == 0
    assert params.currency == "USD"
    assert params.fx_rate == 50
    assert params.sort_key == "model_name"
    assert params.sort_direction == "asc"


@pytest.mark.parametrize(
    "raw, expected",
    [(-10, 0), ("", 0), (None, 0), ("abc", 0), ("250000", 250_000),
     (20_000_000_000, 10_000_000_000), (1234.9, 1234)],
)
def test_token_input_is_clamped(controller, raw, expected):
    controller.set_input_tokens(raw)
    controller.set_output_tokens(raw)
    assert controller.params.input_tokens == expected
    assert controller.params.output_tokens == expected


def test_slider_stays_within_range(controller):
    controller.set_input_tokens(5_000_000)
    assert controller.input_slider == 2_000_000
    assert controller.params.input_tokens == 5_000_000

    controller.slide_input_tokens(3_000_000)
    assert controller.params.input_tokens == 2_000_000

    controller.slide_output_tokens(40_000)
    assert controller.output_slider == 40_000


def test_fx_rate_clamped_and_reset(controller):
    controller.set_currency("EGP")
    controller.set_fx_rate(0)
    assert controller.params.fx_rate == 1
    controller.set_fx_rate("50000")
    assert controller.params.fx_rate == 10_000
    controller.set_fx_rate(48.5)
    assert controller.rate == 48.5
    controller.reset_fx_rate()
    assert controller.params.fx_rate == 50


def test_rate_is_one_for_usd(controller):
    controller.set_fx_rate(30)
    assert controller.rate == 1.0


def test_click_sort_cycles(controller):
    controller.click_sort("model_name")
    assert (controller.params.sort_key, controller.params.sort_direction) == ("model_name", "desc")
    controller.click_sort("input")
    assert (controller.params.sort_key, controller.params.sort_direction) == ("input", "asc")
    controller.click_sort("input")
    assert controller.params.sort_direction == "desc"


def test_search_filters_cards_but_not_table(controller):
    controller.set_search("google")
    assert [c.model_name for c in controller.cards()] == ["gemini-1.5-flash"]
    assert len(controller.table()) == 4


def test_card_views_format_in_currency(view_model):
    catalog = [CatalogRow.from_raw({
        "model_name": "A", "provider": "P1",
        "input_price_per_1M_tokens": "10", "output_price_per_1M_tokens": "30",
    })]
    controller = InteractionController(PricingViewModel(catalog))

    (card,) = controller.card_views()
    assert card.est_cost == "$1.00"
    assert card.est_cost_usd == pytest.approx(1.0)
    assert card.total_per_1m == "$40.00"
    assert card.input_tokens == "100,000"

    controller.set_currency("EGP")
    (card,) = controller.card_views()
    assert card.est_cost_display_amount == pytest.approx(50.0)
    assert card.est_cost == "EGP 50.00"
    assert card.input_per_1m == "EGP 500.00"


def test_card_view_with_bad_price_renders_nan():
    catalog = [CatalogRow.from_raw({"model_name": "broken", "provider": "x",
                                    "input_price_per_1M_tokens": "?"})]
    (card,) = InteractionController(PricingViewModel(catalog)).card_views()
    assert card.est_cost == "$NaN"
    assert card.est_cost_usd is None


def test_table_view_headers_show_indicator(controller):
    controller.click_sort("output")
    controller.click_sort("output")
    view = controller.table_view()
    headers = {h.key: h for h in view.columns}
    assert headers["output"].indicator == "▼"
    assert headers["output"].active
    assert headers["model_name"].indicator == ""
    assert [r.model_name for r in view.rows][0] == "claude-sonnet-4-5"


def test_empty_catalog_renders_nothing():
    controller = InteractionController(PricingViewModel())
    assert controller.card_views() == []
    assert controller.table_view().rows == []


def test_view_model_memoizes_table_until_catalog_changes(view_model, catalog):
    params = QueryParameters(sort_key="input")
    first = view_model.table(params)
    assert view_model.table(params) == first
    assert ("input", "asc") in view_model._table_memo

    view_model.set_catalog(catalog[:1])
    assert view_model._table_memo == {}
    assert [r.model_name for r in view_model.table(params)] == ["gpt-4o"]


def test_view_model_keeps_duplicate_names():
    rows = [CatalogRow.from_raw({"model_name": "dup", "provider": p}) for p in ("a", "b")]
    vm = PricingViewModel(rows)
    assert [r.provider for r in vm.table(QueryParameters())] == ["a", "b"]


def test_huge_integer_token_input_clamps(controller):
    controller.set_input_tokens(10**400)
    assert controller.params.input_tokens == 10_000_000_000


def test_table_with_unknown_key_is_not_memoized(view_model):
    rows = view_model.table(QueryParameters(sort_key="latency"))
    assert [r.model_name for r in rows][0] == "gpt-4o"
    assert view_model._table_memo == {}
