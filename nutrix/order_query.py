"""Building order queries and display ids."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Sequence

ANY = -1


@dataclass
class GetOrdersParameters:
    """Filters and pagination for order listings.

    filter_is_paid and is_pay_later take 1 (true), 0 (false) or -1 (any).
    filter_state lists wanted states; a leading "!" excludes a state.
    """

    page_number: int
    page_size: int
    order_display_id_contains: str = ""
    filter_is_paid: int = ANY
    is_pay_later: int = ANY
    filter_state: list[str] = field(default_factory=list)


def build_orders_filter(params: GetOrdersParameters) -> dict[str, Any]:
    """Translate listing parameters into a MongoDB query document."""
    query: dict[str, Any] = {}

    if params.filter_is_paid == 1:
        query["is_paid"] = True
    elif params.filter_is_paid == 0:
        query["is_paid"] = False

    if params.order_display_id_contains:
        query["display_id"] = {"$regex": f"(?i).*{params.order_display_id_contains}.*"}

    wanted = [state for state in params.filter_state if not state.startswith("!")]
    excluded = [state[1:] for state in params.filter_state if state.startswith("!")]

    state_filters = []
    if wanted:
        state_filters.append({"state": {"$in": wanted}})
    if excluded:
        state_filters.append({"state": {"$nin": excluded}})
    if state_filters:
        query["$and"] = state_filters

    if params.is_pay_later == 1:
        query["is_pay_later"] = {"$eq": True}
    elif params.is_pay_later == 0:
        query["is_pay_later"] = {"$eq": False}

    return query


def choose_queue(queues: Sequence[dict[str, Any]], rng: Any = None) -> dict[str, Any]:
    """Pick the order queue that numbers the next order.

    With several queues a random one is chosen from all but the last.
    """
    if not queues:
        raise ValueError("no order queues configured")
    if len(queues) == 1:
        return queues[0]
    generator = rng if rng is not None else random
    return queues[generator.randrange(len(queues) - 1)]


def format_display_id(queue: dict[str, Any]) -> str:
    """Display id of the next order in a queue, such as "A-1"."""
    return f"{queue.get('prefix', '')}-{queue.get('next', 0)}"