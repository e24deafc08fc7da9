"""Pytest fixtures for testing"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from store_credit.api.main import create_app
from store_credit.domain.models import (
    AllInputs,
    BuildingOwnership,
    BusinessStabilityInputs,
    CreditHistoryInputs,
    FinancialInputs,
    IndustryType,
    InventoryTurnover,
    LoanPurpose,
    OnlinePresence,
    OperationalInputs,
    RiskSupportInputs,
    SeasonalImpact,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def strong_store_inputs() -> AllInputs:
    """Well-run grocery store: every category scores high"""
    return AllInputs(
        financial=FinancialInputs(
            monthly_sales=100_000,
            profit_margin=20,
            monthly_emi=20_000,
            average_bank_balance=50_000,
            building_ownership=BuildingOwnership.OWN,
            itr_filed=True,
        ),
        credit_history=CreditHistoryInputs(
            cibil_score=750,
            past_loan_defaults=0,
            banking_relationship=5,
            returned_cheques=0,
            fully_repaid_loans=2,
            loan_applications=1,
        ),
        business_stability=BusinessStabilityInputs(
            years_in_operation=8,
            annual_revenue=12_000_000,
            number_of_employees=6,
            shop_size=800,
            number_of_branches=1,
            sells_private_label=True,
        ),
        operational=OperationalInputs(
            digital_payments_adoption=60,
            inventory_turnover=InventoryTurnover.WEEKLY,
            seasonal_impact=SeasonalImpact.LOW,
            average_monthly_footfall=2500,
            shop_timings=13,
            online_presence=OnlinePresence(social_media=True, website=True),
        ),
        risk_support=RiskSupportInputs(
            industry_type=IndustryType.GROCERY,
            purpose_of_loan=LoanPurpose.STOCK,
            distributor_payment_regularity=True,
            collateral_provided=True,
            collateral_value=300_000,
            loan_amount_requested=200_000,
        ),
    )


@pytest.fixture
def strong_store_payload() -> Dict[str, Any]:
    """Same store as strong_store_inputs, in wire format"""
    return {
        "financial": {
            "monthlySales": 100000,
            "profitMargin": 20,
            "monthlyEMI": 20000,
            "averageBankBalance": 50000,
            "buildingOwnership": "own",
            "itrFiled": True,
        },
        "creditHistory": {
            "cibilScore": 750,
            "pastLoanDefaults": 0,
            "bankingRelationship": 5,
            "returnedCheques": 0,
            "fullyRepaidLoans": 2,
            "loanApplications": 1,
        },
        "businessStability": {
            "yearsInOperation": 8,
            "annualRevenue": 12000000,
            "numberOfEmployees": 6,
            "shopSize": 800,
            "numberOfBranches": 1,
            "sellsPrivateLabel": True,
        },
        "operational": {
            "digitalPaymentsAdoption": 60,
            "inventoryTurnover": "weekly",
            "seasonalImpact": "low",
            "averageMonthlyFootfall": 2500,
            "shopTimings": 13,
            "onlinePresence": {"socialMedia": True, "website": True, "ecommerce": False},
        },
        "riskSupport": {
            "industryType": "grocery",
            "purposeOfLoan": "stock",
            "distributorPaymentRegularity": True,
            "collateralProvided": True,
            "collateralValue": 300000,
            "loanAmountRequested": 200000,
        },
    }
