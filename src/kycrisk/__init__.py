"""
kycrisk - Onboarding Risk Classification

Assigns a risk band to individual and corporate onboarding records:
- Absolute disqualification on NoGo jurisdictions
- Automatic escalation for PEPs and AutoHigh occupations, businesses, products
- Weighted scoring of the remaining risk factors against reference catalogs
"""

__version__ = "0.1.0"
