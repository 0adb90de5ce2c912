"""Order placement factory.

Provides get_placement() / set_placement() to swap implementations:
- FakeOrderPlacement for development and testing (``ORDER_PLACEMENT=fake``)
- DomainOrderPlacement to persist orders in the storefront domain
  (``ORDER_PLACEMENT=domain``)
"""

import os

from protean.exceptions import ConfigurationError

from storefront.checkout.domain_adapter import DomainOrderPlacement
from storefront.checkout.fake_adapter import FakeOrderPlacement
from storefront.checkout.port import OrderPlacement

PLACEMENT_ENV_VAR = "ORDER_PLACEMENT"

_PLACEMENTS: dict[str, type[OrderPlacement]] = {
    "fake": FakeOrderPlacement,
    "domain": DomainOrderPlacement,
}

_current_placement: OrderPlacement | None = None


def _placement_from_env() -> OrderPlacement:
    name = os.environ.get(PLACEMENT_ENV_VAR, "fake").strip().lower()
    try:
        placement_cls = _PLACEMENTS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown {PLACEMENT_ENV_VAR} '{name}'; expected one of {', '.join(sorted(_PLACEMENTS))}"
        ) from None
    return placement_cls()


def get_placement() -> OrderPlacement:
    """Return the current order placement service, chosen by ``ORDER_PLACEMENT`` on first use."""
    global _current_placement
    if _current_placement is None:
        _current_placement = _placement_from_env()
    return _current_placement


def set_placement(placement: OrderPlacement) -> None:
    """Override the active order placement service (useful for tests)."""
    global _current_placement
    _current_placement = placement


def reset_placement() -> None:
    """Forget the active service; the next get_placement() reads the environment again."""
    global _current_placement
    _current_placement = None
