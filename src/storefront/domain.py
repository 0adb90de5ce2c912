"""Storefront bounded context — cart state machine and guest checkout.

The cart itself is a pure reducer over immutable snapshots and needs no
domain context. Order placement at checkout goes through the Order aggregate
registered here.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
