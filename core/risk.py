"""
Composite country/environment risk score.

Three factors (0 = very poor, 100 = excellent) are blended with fixed
weights into a single 0-100 score, then bucketed into four bands.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from decimal import Decimal, ROUND_HALF_UP

from core.errors import InvalidRiskFactorError

FACTOR_MIN = 0
FACTOR_MAX = 100
DEFAULT_FACTOR = 50

# ── Weights ───────────────────────────────────────────────────────────────────
WEIGHTS: dict[str, float] = {
    "political_stability": 0.4,
    "currency_stability": 0.3,
    "legal_environment": 0.3,
}

FACTOR_LABELS: dict[str, str] = {
    "political_stability": "Political Stability",
    "currency_stability": "Currency Stability",
    "legal_environment": "Legal Environment",
}

FACTOR_HELP: dict[str, str] = {
    "political_stability": (
        "Assess the political climate, government stability, and policy predictability"
    ),
    "currency_stability": (
        "Evaluate exchange rate volatility, inflation rates, and monetary policy"
    ),
    "legal_environment": (
        "Consider regulatory framework, contract enforcement, and investor protection laws"
    ),
}


def _check_factor(name: str, value) -> int:
    # bool is an int subclass; a checkbox value sneaking in here is a bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRiskFactorError(name, value)
    if not FACTOR_MIN <= value <= FACTOR_MAX:
        raise InvalidRiskFactorError(name, value)
    return value


@dataclass(frozen=True)
class RiskFactors:
    political_stability: int = DEFAULT_FACTOR
    currency_stability: int = DEFAULT_FACTOR
    legal_environment: int = DEFAULT_FACTOR

    def __post_init__(self):
        for name in WEIGHTS:
            _check_factor(name, getattr(self, name))

    def with_factor(self, name: str, value: int) -> "RiskFactors":
        if name not in WEIGHTS:
            raise KeyError(f"Unknown risk factor: {name}")
        return replace(self, **{name: value})

    def to_dict(self) -> dict:
        return asdict(self)


def composite_score(factors: RiskFactors) -> int:
    """Weighted blend of the three factors, rounded half up to an integer.

    Decimal keeps 0.3 * 5 == 1.5 exact so halves always round up.
    """
    total = sum(
        Decimal(str(weight)) * getattr(factors, name)
        for name, weight in WEIGHTS.items()
    )
    return int(total.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# ── Bands ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RiskBand:
    label: str
    lower_bound: int
    color: str
    icon: str
    interpretation: str


# Ordered safest first; a score belongs to the first band whose lower bound it reaches.
RISK_BANDS: tuple[RiskBand, ...] = (
    RiskBand(
        label="Low Risk",
        lower_bound=80,
        color="green",
        icon="🛡️",
        interpretation=(
            "This investment environment shows strong stability across all factors. "
            "Consider for conservative to moderate risk portfolios."
        ),
    ),
    RiskBand(
        label="Moderate Risk",
        lower_bound=60,
        color="blue",
        icon="📈",
        interpretation=(
            "This investment shows moderate risk with some areas of concern. "
            "Suitable for diversified portfolios with appropriate risk management."
        ),
    ),
    RiskBand(
        label="High Risk",
        lower_bound=40,
        color="orange",
        icon="⚠️",
        interpretation=(
            "This investment carries elevated risk that requires careful consideration. "
            "Only suitable for high-risk tolerance investors."
        ),
    ),
    RiskBand(
        label="Very High Risk",
        lower_bound=0,
        color="red",
        icon="⚠️",
        interpretation=(
            "This investment environment presents significant risks across multiple factors. "
            "Exercise extreme caution and consider avoiding or limiting exposure."
        ),
    ),
)


def classify(score: int) -> RiskBand:
    if not FACTOR_MIN <= score <= FACTOR_MAX:
        raise ValueError(f"Score must be between 0 and 100, got {score}")
    for band in RISK_BANDS[:-1]:
        if score >= band.lower_bound:
            return band
    return RISK_BANDS[-1]


def build_assessment(factors: RiskFactors, score: int) -> dict:
    """Export payload for a calculated assessment."""
    band = classify(score)
    return {
        "factors": factors.to_dict(),
        "weights": dict(WEIGHTS),
        "composite_score": score,
        "risk_level": band.label,
        "interpretation": band.interpretation,
    }
