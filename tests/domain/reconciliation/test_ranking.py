from __future__ import annotations

from devsignals.domain.reconciliation import rank_features, ranking_key
from tests.helpers.features import make_catalog, make_feature


def test_key_joins_sorted_dates_with_sentinel() -> None:
    catalog = make_catalog(
        [make_feature("flexbox", support={"chrome": "80", "safari": "13", "firefox": "70"})]
    )

    assert ranking_key("flexbox", catalog) == "2019-09-19+2019-10-22+2020-02-04+9999-99-99"


def test_key_ignores_browsers_without_known_release_date() -> None:
    catalog = make_catalog([make_feature("partial", support={"chrome": "80", "edge": "80"})])

    assert ranking_key("partial", catalog) == "2020-02-04+9999-99-99"


def test_ranged_versions_resolve_to_release_dates() -> None:
    catalog = make_catalog([make_feature("old", support={"chrome": "≤80"})])

    assert ranking_key("old", catalog) == "2020-02-04+9999-99-99"


def test_unsupported_and_unknown_features_use_only_sentinel() -> None:
    catalog = make_catalog([make_feature("unshipped")])

    assert ranking_key("unshipped", catalog) == "9999-99-99"
    assert ranking_key("not-in-catalog", catalog) == "9999-99-99"


def test_rank_orders_by_earliest_dates_and_puts_unshipped_last() -> None:
    catalog = make_catalog(
        [
            make_feature("unshipped"),
            make_feature("late", support={"chrome": "100"}),
            make_feature("early", support={"safari": "13"}),
            make_feature("early-everywhere", support={"safari": "13", "firefox": "70"}),
        ]
    )

    ranked = rank_features(["unshipped", "late", "early", "early-everywhere"], catalog)

    assert ranked == ["early-everywhere", "early", "late", "unshipped"]


def test_rank_breaks_ties_by_identity_and_drops_duplicates() -> None:
    catalog = make_catalog([make_feature("b"), make_feature("a"), make_feature("c")])

    assert rank_features(["c", "a", "b", "a"], catalog) == ["a", "b", "c"]
    assert rank_features(["b", "c", "a"], catalog) == ["a", "b", "c"]
