"""Store credit scoring engine - core business logic for creditworthiness"""

import logging
from dataclasses import asdict
from typing import Dict

from store_credit.domain.models import (
    AllInputs,
    BuildingOwnership,
    BusinessStabilityInputs,
    CategoryScores,
    CreditAssessment,
    CreditHistoryInputs,
    FinancialInputs,
    IndustryType,
    InventoryTurnover,
    LoanPurpose,
    OnlinePresence,
    OperationalInputs,
    Rating,
    RiskSupportInputs,
    ScoreResult,
    SeasonalImpact,
)
from store_credit.utils.numeric import clamp_score, safe_ratio

logger = logging.getLogger(__name__)

BASE_SCORE = 50

# Category weights for the overall score. Must sum to 1.0.
CATEGORY_WEIGHTS: Dict[str, float] = {
    "financial": 0.35,
    "credit_history": 0.25,
    "business_stability": 0.20,
    "operational": 0.10,
    "risk_support": 0.10,
}

# Inclusive lower bounds, best rating first
RATING_THRESHOLDS = [
    (85, Rating.GOOD),
    (70, Rating.AVERAGE),
    (55, Rating.BAD),
]

INVENTORY_TURNOVER_BONUS = {
    InventoryTurnover.WEEKLY: 20,
    InventoryTurnover.MONTHLY: 10,
    InventoryTurnover.QUARTERLY: -10,
    InventoryTurnover.SLOWER: -20,
}

SEASONAL_IMPACT_BONUS = {
    SeasonalImpact.NONE: 10,
    SeasonalImpact.LOW: 5,
    SeasonalImpact.MEDIUM: -5,
    SeasonalImpact.HIGH: -10,
}


def financial_score(f: FinancialInputs) -> int:
    """
    Score monthly trading health.

    - Debt ratio (EMI as % of sales): <=30% +20, <=50% +10, else 0.
      No sales counts as a 100% ratio, the worst case.
    - Profit margin: 2 points per percent, capped at 20
    - Bank balance: 1 point per 10,000, capped at 10
    - Owned premises +10, ITR filed +10
    """
    debt_ratio = safe_ratio(f.monthly_emi, f.monthly_sales, default=1.0) * 100

    score = BASE_SCORE
    if debt_ratio <= 30:
        score += 20
    elif debt_ratio <= 50:
        score += 10

    score += min(f.profit_margin * 2, 20)
    score += min(f.average_bank_balance / 10_000, 10)
    score += 10 if f.building_ownership == BuildingOwnership.OWN else 0
    score += 10 if f.itr_filed else 0

    return clamp_score(score)


def credit_history_score(c: CreditHistoryInputs) -> int:
    """
    Score repayment track record.

    Starts from the CIBIL score mapped onto 0-100 ((cibil - 300) / 5.5), or a
    neutral 50 when no bureau score is known. Each penalty is capped on its own
    so a single bad factor cannot dominate.
    """
    # A zero score is as good as no score
    score = (c.cibil_score - 300) / 5.5 if c.cibil_score else BASE_SCORE

    score -= min(c.past_loan_defaults * 10, 50)
    score -= min(c.returned_cheques * 5, 20)
    score -= min(c.loan_applications * 5, 25)
    score += min(c.banking_relationship * 2, 20)
    score += min(c.fully_repaid_loans * 5, 15)

    return clamp_score(score)


def business_stability_score(b: BusinessStabilityInputs) -> int:
    """Score business age and scale"""
    score = BASE_SCORE
    score += min(b.years_in_operation * 2, 20)
    score += min(b.annual_revenue / 1_000_000, 20)
    score += min(b.number_of_employees / 5, 10)
    score += min(b.shop_size / 100, 10)
    score += min(b.number_of_branches * 2, 10)
    score += 5 if b.sells_private_label else 0

    return clamp_score(score)


def operational_score(o: OperationalInputs) -> int:
    """
    Score operational efficiency.

    Fields left empty fall back to neutral-to-good defaults:
    0% digital payments, monthly turnover, no seasonal impact,
    no footfall, 0 hours open, no online presence.
    """
    digital_payments = o.digital_payments_adoption if o.digital_payments_adoption is not None else 0
    turnover = InventoryTurnover(o.inventory_turnover or InventoryTurnover.MONTHLY)
    seasonal = SeasonalImpact(o.seasonal_impact or SeasonalImpact.NONE)
    footfall = o.average_monthly_footfall if o.average_monthly_footfall is not None else 0
    timings = o.shop_timings if o.shop_timings is not None else 0
    online = o.online_presence or OnlinePresence()

    score = BASE_SCORE
    score += min(digital_payments, 20)
    score += INVENTORY_TURNOVER_BONUS[turnover]
    score += SEASONAL_IMPACT_BONUS[seasonal]

    if footfall >= 3000:
        score += 10
    elif footfall >= 1000:
        score += 5

    online_bonus = (
        (5 if online.social_media else 0)
        + (5 if online.website else 0)
        + (10 if online.ecommerce else 0)
    )
    score += min(online_bonus, 15)

    if timings >= 12:
        score += 10
    elif timings >= 10:
        score += 5

    return clamp_score(score)


def collateral_adjustment(r: RiskSupportInputs) -> int:
    """
    Bonus for collateral coverage of the requested amount.

    Coverage >=2x +15, >=1.5x +10, >=1x +5. No collateral offered costs 10.
    Collateral offered without a usable value or amount gets no adjustment.
    """
    if r.collateral_provided and r.collateral_value and r.loan_amount_requested > 0:
        coverage = r.collateral_value / r.loan_amount_requested
        if coverage >= 2:
            return 15
        if coverage >= 1.5:
            return 10
        if coverage >= 1:
            return 5
        return 0

    if not r.collateral_provided:
        return -10

    return 0


def risk_support_score(r: RiskSupportInputs) -> int:
    """Score sector risk, loan purpose, distributor conduct and collateral"""
    score = BASE_SCORE
    score += 10 if r.distributor_payment_regularity else -10

    if r.industry_type in (IndustryType.GROCERY, IndustryType.PHARMACY):
        score += 10
    elif r.industry_type in (IndustryType.CLOTHING, IndustryType.RESTAURANT):
        score -= 10

    if r.purpose_of_loan == LoanPurpose.GROWTH:
        score += 5
    elif r.purpose_of_loan == LoanPurpose.REFINANCE:
        score -= 5

    score += collateral_adjustment(r)

    return clamp_score(score)


def calculate_category_scores(inputs: AllInputs) -> CategoryScores:
    """Score each of the five categories independently"""
    scores = CategoryScores(
        financial=financial_score(inputs.financial),
        credit_history=credit_history_score(inputs.credit_history),
        business_stability=business_stability_score(inputs.business_stability),
        operational=operational_score(inputs.operational),
        risk_support=risk_support_score(inputs.risk_support),
    )
    logger.debug("Category scores computed", extra={"category_scores": asdict(scores)})
    return scores


def determine_rating(weighted_score: float) -> Rating:
    """
    Map weighted score to a rating band.

    - 85+:   Good
    - 70-85: Average
    - 55-70: Bad
    - <55:   Poor
    """
    for threshold, rating in RATING_THRESHOLDS:
        if weighted_score >= threshold:
            return rating
    return Rating.POOR


def calculate_overall_score(scores: CategoryScores) -> ScoreResult:
    """
    Combine sub-scores into the overall 0-100 score.

    Weights: financial 35%, credit history 25%, business stability 20%,
    operational 10%, risk & support 10%. The rating is taken from the
    unrounded weighted value.
    """
    weighted = sum(
        getattr(scores, category) * weight for category, weight in CATEGORY_WEIGHTS.items()
    )

    return ScoreResult(
        total=clamp_score(weighted),
        rating=determine_rating(weighted),
    )


def assess_store(inputs: AllInputs) -> CreditAssessment:
    """
    Main entry point: score all categories and combine them.

    Returns complete CreditAssessment with sub-scores, total and rating.
    """
    category_scores = calculate_category_scores(inputs)
    result = calculate_overall_score(category_scores)

    return CreditAssessment(category_scores=category_scores, result=result)
