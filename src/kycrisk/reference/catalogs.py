"""
Default reference catalogs.

Baseline country, occupation, product and business-nature risk bands used
to seed a fresh catalog store. Operators are expected to maintain these
through the catalog store afterwards.
"""

from typing import Optional

from kycrisk.config import settings
from kycrisk.reference.lookup import Catalog, InMemoryReferenceData
from kycrisk.scoring.bands import RiskBand

LOW = RiskBand.LOW
MEDIUM = RiskBand.MEDIUM
HIGH = RiskBand.HIGH
AUTO_HIGH = RiskBand.AUTO_HIGH
NO_GO = RiskBand.NO_GO


COUNTRY_RISK: dict[str, RiskBand] = {
    # No-go jurisdictions
    "Afghanistan": NO_GO,
    "Myanmar": NO_GO,
    "Nigeria": NO_GO,
    "North Korea": NO_GO,
    "Pakistan": NO_GO,
    "Russia": NO_GO,
    "Cuba": NO_GO,
    "DR Congo": NO_GO,
    "Somalia": NO_GO,
    "South Sudan": NO_GO,
    "Sudan": NO_GO,
    "Syria": NO_GO,
    # Low
    "Australia": LOW,
    "Austria": LOW,
    "Belgium": LOW,
    "Canada": LOW,
    "Denmark": LOW,
    "Finland": LOW,
    "France": LOW,
    "Germany": LOW,
    "Netherlands": LOW,
    "New Zealand": LOW,
    "Norway": LOW,
    "Singapore": LOW,
    "Sweden": LOW,
    "Switzerland": LOW,
    "United Kingdom": LOW,
    "United States": LOW,
    # Medium
    "Mauritius": MEDIUM,
    "Argentina": MEDIUM,
    "Brazil": MEDIUM,
    "India": MEDIUM,
    "South Africa": MEDIUM,
    "Thailand": MEDIUM,
    # High
    "Albania": HIGH,
    "Bangladesh": HIGH,
    "China": HIGH,
    "Egypt": HIGH,
    "Iran": HIGH,
    "Iraq": HIGH,
    "Turkey": HIGH,
    "Venezuela": HIGH,
}

EMPLOYMENT_RISK: dict[str, RiskBand] = {
    "HomeMaker (Work from home)": LOW,
    "Minor": LOW,
    "Pension (Disable Person)": LOW,
    "Retired": LOW,
    "Salaried": LOW,
    "Student": LOW,
    "Freelancer": MEDIUM,
    "Fund Managers": MEDIUM,
    "Others": MEDIUM,
    "Real Estate Agents": MEDIUM,
    "Self Employed – Freight": MEDIUM,
    "Self Employed – Health Care": MEDIUM,
    "Self Employed – Trader": MEDIUM,
    "Self Employed – Contractor": MEDIUM,
    "Accountant": HIGH,
    "Consultant/Advisor": HIGH,
    "Lawyer": HIGH,
    "Self Employed – Jeweller": HIGH,
    "Stockbrokers": HIGH,
    "Unemployed": HIGH,
    "Self Employed – Car Dealer": AUTO_HIGH,
    "Self Employed – Home Owner/BookMaker": AUTO_HIGH,
}

PRODUCT_RISK: dict[str, RiskBand] = {
    "Emma Account": LOW,
    "First Step Account": LOW,
    "Mortgage Loans": LOW,
    "Mutual Funds": LOW,
    "Savings Account": LOW,
    "Secured Loans (Loan backed by asset)": LOW,
    "Term Deposits": LOW,
    "Business Loan": MEDIUM,
    "Current Account": MEDIUM,
    "Debit Card": MEDIUM,
    "FCY account": MEDIUM,
    "Insurance Plan": MEDIUM,
    "Overdraft and Short term Loan": MEDIUM,
    "Treasury relationships": MEDIUM,
    "Credit Card": HIGH,
    "Custodian Services": HIGH,
    "Investment": HIGH,
    "Pre-Paid Card": HIGH,
    "Safe Deposit Locker": HIGH,
    "Trade Finance Relationships": HIGH,
    "Unsecured Loans": HIGH,
    "Wealth Management products": HIGH,
}

BUSINESS_RISK: dict[str, RiskBand] = {
    "Agriculture/Fishing": LOW,
    "Cleaning Services": LOW,
    "Construction": LOW,
    "Education": LOW,
    "Food/Drink Production": LOW,
    "Manufacturing": LOW,
    "Marine Equipment": LOW,
    "Marketing activities": LOW,
    "Supermarket/Hypermarket": LOW,
    "Transport": LOW,
    "Asset Managers/Financial Advisors": MEDIUM,
    "Associations/Societies/Co-operative": MEDIUM,
    "Freight": MEDIUM,
    "Fund Managers": MEDIUM,
    "Green Energy/Alternative energy": MEDIUM,
    "Health Care": MEDIUM,
    "Insurance companies/agent": MEDIUM,
    "Other": MEDIUM,
    "Parastatal/Municipality/District/Village council": MEDIUM,
    "Partnership/Society/Association": MEDIUM,
    "Real Estate": MEDIUM,
    "Sport club/health club": MEDIUM,
    "Tourism/hotels/Restaurants": MEDIUM,
    "Trader – Foodstuff": MEDIUM,
    "Trader – Non Foodstuffs": MEDIUM,
    "Trader- Motor/Spare Parts": MEDIUM,
    "Trader- Wholesaler /Retailer": MEDIUM,
    "Accountant": HIGH,
    "Administration Services": HIGH,
    "Aerospace": HIGH,
    "Aerospace/Aviation Leasing": HIGH,
    "Authorised Company": HIGH,
    "Banking": HIGH,
    "Bars/Clubs": HIGH,
    "Consultancy Services": HIGH,
    "Global Business": HIGH,
    "Information Communications and Technology": HIGH,
    "Jewellers": HIGH,
    "Law Firms": HIGH,
    "Logistics": HIGH,
    "Mining": HIGH,
    "Non banking Financial Institutions": HIGH,
    "Stockbrokers": HIGH,
    "Charities": AUTO_HIGH,
    "E-commerce": AUTO_HIGH,
    "Embassies": AUTO_HIGH,
    "Gambling": AUTO_HIGH,
    "Military": AUTO_HIGH,
    "Money Service Business": AUTO_HIGH,
    "Petroleum products": AUTO_HIGH,
    "Trader- car dealers": AUTO_HIGH,
    "Trust/Foundation/Funds": AUTO_HIGH,
}


def default_catalogs() -> dict[Catalog, dict[str, RiskBand]]:
    """Fresh copies of the baseline catalogs."""
    return {
        Catalog.COUNTRY: dict(COUNTRY_RISK),
        Catalog.EMPLOYMENT: dict(EMPLOYMENT_RISK),
        Catalog.PRODUCT: dict(PRODUCT_RISK),
        Catalog.BUSINESS: dict(BUSINESS_RISK),
    }


def load_default_catalogs(case_sensitive: Optional[bool] = None) -> InMemoryReferenceData:
    """Build an in-memory catalog store seeded with the baseline catalogs."""
    if case_sensitive is None:
        case_sensitive = settings.reference_case_sensitive
    return InMemoryReferenceData(default_catalogs(), case_sensitive=case_sensitive)
