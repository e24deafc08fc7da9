"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from store_credit.domain.models import (
    AllInputs,
    BuildingOwnership,
    BusinessStabilityInputs,
    CategoryScores,
    CreditHistoryInputs,
    FinancialInputs,
    IndustryType,
    InventoryTurnover,
    LoanPurpose,
    OnlinePresence,
    OperationalInputs,
    Rating,
    RiskSupportInputs,
    SeasonalImpact,
)


class CamelModel(BaseModel):
    """Wire format uses camelCase keys; snake_case is accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FinancialSchema(CamelModel):
    monthly_sales: float = Field(..., ge=0, description="Average monthly sales")
    profit_margin: float = Field(..., ge=0, le=100, description="Profit margin in percent")
    monthly_emi: float = Field(..., ge=0, alias="monthlyEMI", description="Total monthly loan installments")
    average_bank_balance: float = Field(..., ge=0)
    building_ownership: BuildingOwnership
    itr_filed: bool

    def to_domain(self) -> FinancialInputs:
        return FinancialInputs(**self.model_dump())


class CreditHistorySchema(CamelModel):
    cibil_score: Optional[float] = Field(None, ge=300, le=900, description="CIBIL score if known")
    past_loan_defaults: int = Field(..., ge=0)
    banking_relationship: float = Field(..., ge=0, description="Years with primary bank")
    returned_cheques: int = Field(..., ge=0)
    fully_repaid_loans: int = Field(..., ge=0)
    loan_applications: int = Field(..., ge=0, description="Loan applications in the past year")

    def to_domain(self) -> CreditHistoryInputs:
        return CreditHistoryInputs(**self.model_dump())


class BusinessStabilitySchema(CamelModel):
    years_in_operation: float = Field(..., ge=0)
    annual_revenue: float = Field(..., ge=0)
    number_of_employees: int = Field(..., ge=0)
    shop_size: float = Field(..., ge=0, description="Shop area in square feet")
    number_of_branches: int = Field(..., ge=0)
    sells_private_label: bool

    def to_domain(self) -> BusinessStabilityInputs:
        return BusinessStabilityInputs(**self.model_dump())


class OnlinePresenceSchema(CamelModel):
    social_media: bool = False
    website: bool = False
    ecommerce: bool = False


class OperationalSchema(CamelModel):
    """All fields optional; the scorer substitutes defaults for missing ones"""

    digital_payments_adoption: Optional[float] = Field(None, ge=0, le=100)
    inventory_turnover: Optional[InventoryTurnover] = None
    seasonal_impact: Optional[SeasonalImpact] = None
    average_monthly_footfall: Optional[int] = Field(None, ge=0)
    shop_timings: Optional[float] = Field(None, ge=0, le=24, description="Hours open per day")
    online_presence: Optional[OnlinePresenceSchema] = None

    def to_domain(self) -> OperationalInputs:
        online = None
        if self.online_presence is not None:
            online = OnlinePresence(**self.online_presence.model_dump())

        return OperationalInputs(
            digital_payments_adoption=self.digital_payments_adoption,
            inventory_turnover=self.inventory_turnover,
            seasonal_impact=self.seasonal_impact,
            average_monthly_footfall=self.average_monthly_footfall,
            shop_timings=self.shop_timings,
            online_presence=online,
        )


class RiskSupportSchema(CamelModel):
    industry_type: IndustryType
    purpose_of_loan: LoanPurpose
    distributor_payment_regularity: bool = Field(..., description="True when distributors are paid on time")
    collateral_provided: bool
    collateral_value: Optional[float] = Field(None, ge=0, description="Market value of collateral")
    loan_amount_requested: float = Field(..., ge=0)

    def to_domain(self) -> RiskSupportInputs:
        return RiskSupportInputs(**self.model_dump())


class AssessmentRequest(CamelModel):
    """Request body for POST /v1/assessment and /v1/scores/categories"""

    financial: FinancialSchema
    credit_history: CreditHistorySchema
    business_stability: BusinessStabilitySchema
    operational: OperationalSchema = Field(default_factory=OperationalSchema)
    risk_support: RiskSupportSchema

    def to_domain(self) -> AllInputs:
        return AllInputs(
            financial=self.financial.to_domain(),
            credit_history=self.credit_history.to_domain(),
            business_stability=self.business_stability.to_domain(),
            operational=self.operational.to_domain(),
            risk_support=self.risk_support.to_domain(),
        )


class CategoryScoresSchema(CamelModel):
    """Sub-scores per category, each 0-100"""

    financial: int = Field(..., ge=0, le=100)
    credit_history: int = Field(..., ge=0, le=100)
    business_stability: int = Field(..., ge=0, le=100)
    operational: int = Field(..., ge=0, le=100)
    risk_support: int = Field(..., ge=0, le=100)

    @classmethod
    def from_domain(cls, scores: CategoryScores) -> "CategoryScoresSchema":
        return cls(
            financial=scores.financial,
            credit_history=scores.credit_history,
            business_stability=scores.business_stability,
            operational=scores.operational,
            risk_support=scores.risk_support,
        )

    def to_domain(self) -> CategoryScores:
        return CategoryScores(**self.model_dump())


class OverallScoreResponse(CamelModel):
    """Response for POST /v1/scores/overall"""

    total: int
    rating: Rating


class AssessmentResponse(CamelModel):
    """Response for POST /v1/assessment"""

    category_scores: CategoryScoresSchema
    total: int
    rating: Rating
