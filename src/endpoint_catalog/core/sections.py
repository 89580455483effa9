"""Seed lists for each documented API section.

Every section is crawled by following the "Next" links from each of its
seeds, so a seed only needs to point at the first page of a group.
"""

from __future__ import annotations

from typing import Dict, Tuple

DOCS_BASE_URL = "https://docs.bunny.net/api-reference"

SECTIONS: Dict[str, Tuple[str, ...]] = {
    "core": (
        f"{DOCS_BASE_URL}/core/pull-zone/list-pull-zones",
        f"{DOCS_BASE_URL}/core/storage-zone/list-storage-zones",
        f"{DOCS_BASE_URL}/core/dns-zone/list-dns-zones",
        f"{DOCS_BASE_URL}/core/stream-video-library/list-video-libraries",
        f"{DOCS_BASE_URL}/core/region/region-list",
        f"{DOCS_BASE_URL}/core/api-keys/list-api-keys",
        f"{DOCS_BASE_URL}/core/statistics/get-statistics",
    ),
    "stream": (
        f"{DOCS_BASE_URL}/stream/manage-videos/list-videos",
        f"{DOCS_BASE_URL}/stream/manage-collections/get-collection-list",
        f"{DOCS_BASE_URL}/stream/oembed/oembed",
    ),
    "storage": (
        f"{DOCS_BASE_URL}/storage/manage-files/list-files",
    ),
    "shield": (
        f"{DOCS_BASE_URL}/shield/shield-zone/list-shield-zones",
        f"{DOCS_BASE_URL}/shield/waf/list-waf-rules",
        f"{DOCS_BASE_URL}/shield/rate-limiting/list-rate-limits",
        f"{DOCS_BASE_URL}/shield/access-lists/list-access-lists",
        f"{DOCS_BASE_URL}/shield/bot-detection/get-bot-detection-configuration",
        f"{DOCS_BASE_URL}/shield/metrics/get-shield-zone-metrics",
        f"{DOCS_BASE_URL}/shield/event-logs/list-event-logs",
    ),
    "scripting": (
        f"{DOCS_BASE_URL}/scripting/edge-script/list-edge-scripts",
        f"{DOCS_BASE_URL}/scripting/code/get-code",
        f"{DOCS_BASE_URL}/scripting/release/list-releases",
        f"{DOCS_BASE_URL}/scripting/secret/list-secrets",
        f"{DOCS_BASE_URL}/scripting/variable/list-variables",
    ),
    "containers": (
        f"{DOCS_BASE_URL}/magic-containers/applications/list-applications",
        f"{DOCS_BASE_URL}/magic-containers/container-registries/list-container-registries",
        f"{DOCS_BASE_URL}/magic-containers/container-templates/list-container-templates",
        f"{DOCS_BASE_URL}/magic-containers/endpoints/list-endpoints",
        f"{DOCS_BASE_URL}/magic-containers/autoscaling/get-autoscaling-settings",
        f"{DOCS_BASE_URL}/magic-containers/volumes/list-volumes",
        f"{DOCS_BASE_URL}/magic-containers/log-forwarding/list-log-forwarding-configurations",
        f"{DOCS_BASE_URL}/magic-containers/regions/list-regions",
    ),
}


def get_seeds(section: str) -> Tuple[str, ...]:
    try:
        return SECTIONS[section]
    except KeyError:
        known = ", ".join(sorted(SECTIONS))
        raise KeyError(f"Unknown section '{section}'. Known sections: {known}") from None
