"""Creation order for tracking issues.

Features are ordered by their earliest release date in any browser, using
subsequent shipping dates as tie breakers, so the oldest and most widely
shipped gaps get the lowest issue numbers. Features that are not shipped
anywhere come last.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from devsignals.domain.model import FeatureId
    from devsignals.domain.ports import FeatureCatalog

# Sorts after any real ISO date.
DATE_SENTINEL = "9999-99-99"
DATE_SEPARATOR = "+"


def release_dates(feature_id: FeatureId, catalog: FeatureCatalog) -> list[str]:
    """Release dates of the first supporting version in each browser, unsorted."""

    record = catalog.get(feature_id)
    if record is None:
        return []
    dates: list[str] = []
    for browser, version in record.support.items():
        date = catalog.release_date(browser, version)
        if date:
            dates.append(date)
    return dates


def ranking_key(
    feature_id: FeatureId,
    catalog: FeatureCatalog,
    *,
    sentinel: str = DATE_SENTINEL,
    separator: str = DATE_SEPARATOR,
) -> str:
    """Sorted release dates joined into one comparable string.

    The sentinel sorts after any real date. It breaks ties when N dates are
    equal and one feature has more than N dates, and it puts unshipped
    features last.
    """

    dates = [*release_dates(feature_id, catalog), sentinel]
    dates.sort()
    return separator.join(dates)


def rank_features(
    feature_ids: Iterable[FeatureId],
    catalog: FeatureCatalog,
    *,
    sentinel: str = DATE_SENTINEL,
    separator: str = DATE_SEPARATOR,
) -> list[FeatureId]:
    """Return ``feature_ids`` in creation order.

    The identity breaks ties between equal keys, so the order is total and
    does not depend on the iteration order of the input.
    """

    keys = {
        feature_id: ranking_key(feature_id, catalog, sentinel=sentinel, separator=separator)
        for feature_id in set(feature_ids)
    }
    return sorted(keys, key=lambda feature_id: (keys[feature_id], feature_id))
