"""
Sarkari Job Eligibility Matcher

Matches an applicant profile against a catalog of government job postings:
who may apply, which category each posting belongs to, how crowded it is,
and which alerts the applicant wants to receive.
"""

__version__ = "1.0.0"
__author__ = "Sarkari Naukari Team"
__description__ = "Rule-based eligibility matching for government job postings"
