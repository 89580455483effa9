from endpoint_catalog.crawl.frontier import FrontierTracker  # type: ignore[import]

from tests.helpers.catalog_imports import StopReason


def test_claim_marks_visited_and_consumes_budget():
    frontier = FrontierTracker(max_pages_per_seed=3)
    budget = frontier.new_budget()

    assert frontier.claim("https://a", budget) is None
    assert frontier.is_visited("https://a")
    assert budget.remaining == 2


def test_claim_rejects_missing_visited_and_exhausted():
    frontier = FrontierTracker(max_pages_per_seed=1)
    budget = frontier.new_budget()

    assert frontier.claim(None, budget) is StopReason.NO_NEXT_LINK
    assert frontier.claim("", budget) is StopReason.NO_NEXT_LINK
    assert frontier.claim("https://a", budget) is None
    assert frontier.claim("https://a", budget) is StopReason.ALREADY_VISITED
    assert frontier.claim("https://b", budget) is StopReason.BUDGET_EXHAUSTED
    assert not frontier.is_visited("https://b")


def test_budget_is_per_seed_but_visited_set_is_shared():
    frontier = FrontierTracker(max_pages_per_seed=1)

    first = frontier.new_budget()
    assert frontier.claim("https://a", first) is None

    second = frontier.new_budget()
    assert frontier.claim("https://a", second) is StopReason.ALREADY_VISITED
    assert frontier.claim("https://b", second) is None
    assert second.exhausted


def test_check_does_not_record():
    frontier = FrontierTracker()
    budget = frontier.new_budget()

    assert frontier.check("https://a", budget) is None
    assert not frontier.is_visited("https://a")
    assert budget.remaining == frontier.max_pages_per_seed
