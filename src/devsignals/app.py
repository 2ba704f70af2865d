"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from devsignals.adapters.github import GitHubIssueTracker
from devsignals.adapters.issue_body import MarkdownIssueRenderer
from devsignals.adapters.positions import StandardPositionsFetcher
from devsignals.adapters.signals import load_signals
from devsignals.adapters.signals import validate_signals as check_signals
from devsignals.adapters.web_features import WebFeaturesLoader
from devsignals.config import get_github_config, get_standard_positions_config, get_storage_config
from devsignals.domain.reconciliation import (
    ReconciliationEngine,
    ReconciliationSettings,
    resolve_skip_list,
    write_manifest,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from devsignals.adapters.signals import SignalsDocument
    from devsignals.config import StorageConfig
    from devsignals.domain.model import BrowserId, BrowserReleases
    from devsignals.domain.ports import (
        CatalogLoader,
        IssueRenderer,
        IssueTracker,
        StandardsPositionSource,
    )
    from devsignals.domain.reconciliation import ReconciliationResult

type RendererFactory = Callable[[Mapping[BrowserId, BrowserReleases]], IssueRenderer]

log = getLogger(__name__)


def _markdown_renderer(browsers: Mapping[BrowserId, BrowserReleases]) -> IssueRenderer:
    return MarkdownIssueRenderer(browsers=browsers)


def update_issues(
    *,
    dry_run: bool = False,
    catalog_loader: CatalogLoader | None = None,
    positions_source: StandardsPositionSource | None = None,
    tracker: IssueTracker | None = None,
    renderer_factory: RendererFactory | None = None,
    storage: StorageConfig | None = None,
    negative_positions: frozenset[str] | None = None,
    tracking_label: str | None = None,
) -> ReconciliationResult:
    """Reconcile tracking issues with the web-features catalog.

    Every collaborator defaults to the live adapter built from the
    environment. The manifest is written only when ``dry_run`` is false.
    """

    effective_storage = storage or get_storage_config()
    if tracker is None:
        github = get_github_config()
        tracker = GitHubIssueTracker(config=github)
        tracking_label = tracking_label or github.label
    if positions_source is None or negative_positions is None:
        positions_config = get_standard_positions_config()
        if positions_source is None:
            positions_source = StandardPositionsFetcher(config=positions_config)
        if negative_positions is None:
            negative_positions = positions_config.negative_positions
    settings = (
        ReconciliationSettings(tracking_label=tracking_label)
        if tracking_label
        else ReconciliationSettings()
    )

    log.info("Starting issue update%s", " (dry run)" if dry_run else "")
    catalog = (catalog_loader or WebFeaturesLoader())()
    skip_list = resolve_skip_list(positions_source(), negative_positions=negative_positions)
    render = (renderer_factory or _markdown_renderer)(catalog.browsers)

    engine = ReconciliationEngine(
        tracker=tracker,
        render=render,
        settings=settings,
        dry_run=dry_run,
    )
    result = engine.reconcile(catalog, skip_list)

    if dry_run:
        log.info("Dry run. Not writing manifest with %s entries", len(result.manifest))
    else:
        write_manifest(result.manifest, effective_storage.manifest_path)
    return result


def validate_signals(
    *,
    catalog_loader: CatalogLoader | None = None,
    storage: StorageConfig | None = None,
) -> SignalsDocument:
    """Check the curated signals file against the current catalog."""

    effective_storage = storage or get_storage_config()
    catalog = (catalog_loader or WebFeaturesLoader())()
    log.info("Validating %s", effective_storage.signals_path)
    document = load_signals(effective_storage.signals_path)
    return check_signals(document, known_features=catalog.features)
