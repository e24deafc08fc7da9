"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BuildingOwnership(str, Enum):
    OWN = "own"
    RENT = "rent"


class InventoryTurnover(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SLOWER = "slower"


class SeasonalImpact(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IndustryType(str, Enum):
    GROCERY = "grocery"
    PHARMACY = "pharmacy"
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    RESTAURANT = "restaurant"
    OTHER = "other"


class LoanPurpose(str, Enum):
    GROWTH = "growth"
    STOCK = "stock"
    REFINANCE = "refinance"


class Rating(str, Enum):
    """Ordinal label derived from the total score, best first"""

    GOOD = "Good"
    AVERAGE = "Average"
    BAD = "Bad"
    POOR = "Poor"


@dataclass(frozen=True)
class FinancialInputs:
    """Monthly trading figures for the store"""

    monthly_sales: float
    profit_margin: float  # percentage 0-100
    monthly_emi: float
    average_bank_balance: float
    building_ownership: BuildingOwnership
    itr_filed: bool


@dataclass(frozen=True)
class CreditHistoryInputs:
    """Bureau score and repayment track record"""

    cibil_score: Optional[float]  # 300-900, None when unknown
    past_loan_defaults: int
    banking_relationship: float  # years
    returned_cheques: int
    fully_repaid_loans: int
    loan_applications: int


@dataclass(frozen=True)
class BusinessStabilityInputs:
    years_in_operation: float
    annual_revenue: float
    number_of_employees: int
    shop_size: float  # square feet
    number_of_branches: int
    sells_private_label: bool


@dataclass(frozen=True)
class OnlinePresence:
    social_media: bool = False
    website: bool = False
    ecommerce: bool = False


@dataclass(frozen=True)
class OperationalInputs:
    """Day-to-day operations; any field may be missing when the step was skipped"""

    digital_payments_adoption: Optional[float] = None  # percentage 0-100
    inventory_turnover: Optional[InventoryTurnover] = None
    seasonal_impact: Optional[SeasonalImpact] = None
    average_monthly_footfall: Optional[int] = None
    shop_timings: Optional[float] = None  # hours per day
    online_presence: Optional[OnlinePresence] = None


@dataclass(frozen=True)
class RiskSupportInputs:
    industry_type: IndustryType
    purpose_of_loan: LoanPurpose
    distributor_payment_regularity: bool  # True = pays distributors regularly
    collateral_provided: bool
    loan_amount_requested: float
    collateral_value: Optional[float] = None


@dataclass(frozen=True)
class AllInputs:
    """Complete snapshot of the five form steps"""

    financial: FinancialInputs
    credit_history: CreditHistoryInputs
    business_stability: BusinessStabilityInputs
    operational: OperationalInputs
    risk_support: RiskSupportInputs


@dataclass(frozen=True)
class CategoryScores:
    """Normalized 0-100 sub-score per category"""

    financial: int
    credit_history: int
    business_stability: int
    operational: int
    risk_support: int


@dataclass(frozen=True)
class ScoreResult:
    """Weighted total and its rating"""

    total: int
    rating: Rating


@dataclass(frozen=True)
class CreditAssessment:
    """Output of a full store assessment"""

    category_scores: CategoryScores
    result: ScoreResult
