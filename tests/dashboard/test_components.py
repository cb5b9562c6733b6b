from decimal import Decimal

from src.dashboard.components import to_decimal, feasibility_banner
from src.models.common import Feasibility


class TestToDecimal:
    def test_numbers(self):
        assert to_decimal(200) == Decimal("200")
        assert to_decimal(12.5) == Decimal("12.5")
        assert to_decimal("1200") == Decimal("1200")

    def test_missing_or_garbage_is_zero(self):
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("") == Decimal("0")
        assert to_decimal("abc") == Decimal("0")


def test_banner_shows_label():
    banner = feasibility_banner(Feasibility.REQUIRES_OPTIMIZATION, "Consider site modifications.")
    title = banner.children[0]
    assert title.children == "Requires Optimization"
    assert title.style["color"] == "#e94560"
