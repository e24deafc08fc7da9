"""
E2E tests scoring store personas through the full API.

Store personas:
- strong_grocery: owned premises, clean credit, high footfall -> Good
- average_pharmacy: no bureau score, a few cheque returns -> Average
- struggling_restaurant: no sales, defaults, no collateral -> Poor
"""

import pytest
from fastapi.testclient import TestClient


AVERAGE_PHARMACY = {
    "financial": {
        "monthlySales": 60000,
        "profitMargin": 8,
        "monthlyEMI": 24000,
        "averageBankBalance": 30000,
        "buildingOwnership": "rent",
        "itrFiled": True,
    },
    "creditHistory": {
        "pastLoanDefaults": 0,
        "bankingRelationship": 3,
        "returnedCheques": 1,
        "fullyRepaidLoans": 1,
        "loanApplications": 2,
    },
    "businessStability": {
        "yearsInOperation": 4,
        "annualRevenue": 2400000,
        "numberOfEmployees": 3,
        "shopSize": 300,
        "numberOfBranches": 0,
        "sellsPrivateLabel": False,
    },
    "operational": {
        "digitalPaymentsAdoption": 40,
        "inventoryTurnover": "weekly",
        "seasonalImpact": "none",
        "averageMonthlyFootfall": 1500,
        "shopTimings": 11,
        "onlinePresence": {"socialMedia": True, "website": False, "ecommerce": False},
    },
    "riskSupport": {
        "industryType": "pharmacy",
        "purposeOfLoan": "stock",
        "distributorPaymentRegularity": True,
        "collateralProvided": True,
        "collateralValue": 50000,
        "loanAmountRequested": 100000,
    },
}

STRUGGLING_RESTAURANT = {
    "financial": {
        "monthlySales": 0,
        "profitMargin": 2,
        "monthlyEMI": 15000,
        "averageBankBalance": 5000,
        "buildingOwnership": "rent",
        "itrFiled": False,
    },
    "creditHistory": {
        "cibilScore": 550,
        "pastLoanDefaults": 2,
        "bankingRelationship": 1,
        "returnedCheques": 3,
        "fullyRepaidLoans": 0,
        "loanApplications": 4,
    },
    "businessStability": {
        "yearsInOperation": 1,
        "annualRevenue": 600000,
        "numberOfEmployees": 3,
        "shopSize": 150,
        "numberOfBranches": 0,
        "sellsPrivateLabel": False,
    },
    "operational": {
        "digitalPaymentsAdoption": 10,
        "inventoryTurnover": "slower",
        "seasonalImpact": "high",
        "averageMonthlyFootfall": 400,
        "shopTimings": 8,
        "onlinePresence": {"socialMedia": False, "website": False, "ecommerce": False},
    },
    "riskSupport": {
        "industryType": "restaurant",
        "purposeOfLoan": "refinance",
        "distributorPaymentRegularity": False,
        "collateralProvided": False,
        "loanAmountRequested": 300000,
    },
}


@pytest.mark.e2e
def test_strong_grocery_rated_good(client: TestClient, strong_store_payload):
    """
    strong_grocery: every category near the top
    Expected: Good
    """
    response = client.post("/v1/assessment", json=strong_store_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["rating"] == "Good"
    assert data["total"] >= 85


@pytest.mark.e2e
def test_average_pharmacy_rated_average(client: TestClient):
    """
    average_pharmacy: healthy operations, thin credit file, weak collateral
    Expected: Average
    """
    response = client.post("/v1/assessment", json=AVERAGE_PHARMACY)

    assert response.status_code == 200
    data = response.json()
    # 89*.35 + 46*.25 + 64*.20 + 100*.10 + 70*.10 = 72.45
    assert data["categoryScores"] == {
        "financial": 89,
        "creditHistory": 46,
        "businessStability": 64,
        "operational": 100,
        "riskSupport": 70,
    }
    assert data["total"] == 72
    assert data["rating"] == "Average"


@pytest.mark.e2e
def test_struggling_restaurant_rated_poor(client: TestClient):
    """
    struggling_restaurant: no sales, repayment trouble, no collateral
    Expected: Poor, with credit history floored at 0
    """
    response = client.post("/v1/assessment", json=STRUGGLING_RESTAURANT)

    assert response.status_code == 200
    data = response.json()
    assert data["categoryScores"] == {
        "financial": 55,  # 54.5 rounds up
        "creditHistory": 0,
        "businessStability": 55,
        "operational": 30,
        "riskSupport": 15,
    }
    # 19.25 + 0 + 11 + 3 + 1.5 = 34.75
    assert data["total"] == 35
    assert data["rating"] == "Poor"


@pytest.mark.e2e
def test_assessment_is_repeatable(client: TestClient):
    """The same snapshot scores identically on every call"""
    first = client.post("/v1/assessment", json=AVERAGE_PHARMACY).json()
    second = client.post("/v1/assessment", json=AVERAGE_PHARMACY).json()

    assert first == second
