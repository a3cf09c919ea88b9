"""
Sample job catalog used to seed an empty store
"""
from typing import List

from .models.job import JobPosting


SEED_JOBS = [
    {
        "id": "ssc-cgl-2024",
        "job_name": "SSC CGL 2024",
        "min_age": 18,
        "max_age": 27,
        "qualification": "Graduate",
        "category": "All",
        "gender": "All",
        "state": "All India",
        "competition_level": "High",
        "status": "Active",
        "deadline": "2027-08-24",
        "required_streams": ["Any"],
        "salary_range": "₹45,000 - ₹1,10,000",
        "apply_link": "https://ssc.gov.in",
        "official_website": "https://ssc.gov.in"
    },
    {
        "id": "ibps-po-2024",
        "job_name": "IBPS PO Recruitment",
        "min_age": 20,
        "max_age": 30,
        "qualification": "Graduate",
        "category": "All",
        "gender": "All",
        "state": "All India",
        "competition_level": "High",
        "status": "Active",
        "deadline": "2027-09-10",
        "required_streams": ["Any"],
        "salary_range": "₹52,000 - ₹85,000",
        "apply_link": "https://ibps.in"
    },
    {
        "id": "rrb-ntpc-2024",
        "job_name": "RRB NTPC Graduate Level",
        "min_age": 18,
        "max_age": 33,
        "qualification": "12th Pass",
        "category": "All",
        "gender": "All",
        "state": "All India",
        "competition_level": "Medium",
        "status": "Active",
        "deadline": "2027-07-30",
        "required_streams": ["Any"],
        "salary_range": "₹19,900 - ₹35,400",
        "apply_link": "https://indianrailways.gov.in"
    },
    {
        "id": "bihar-police-constable",
        "job_name": "Bihar Police Constable",
        "min_age": 18,
        "max_age": 25,
        "qualification": "12th Pass",
        "category": "All",
        "gender": "All",
        "state": "Bihar",
        "competition_level": "Medium",
        "status": "Active",
        "deadline": "2027-06-15",
        "required_streams": ["Any"],
        "salary_range": "₹21,700 - ₹69,100",
        "apply_link": "https://csbc.bihar.gov.in"
    },
    {
        "id": "kvs-pgt-physics",
        "job_name": "KVS PGT Physics",
        "min_age": 21,
        "max_age": 40,
        "qualification": "Post Graduate",
        "category": "All",
        "gender": "All",
        "state": "All India",
        "competition_level": "Low",
        "status": "Active",
        "deadline": "2027-10-01",
        "required_streams": ["Science"],
        "salary_range": "₹47,600 - ₹1,51,100",
        "apply_link": "https://kvsangathan.nic.in"
    },
    {
        "id": "up-anganwadi-worker",
        "job_name": "UP Anganwadi Worker",
        "min_age": 18,
        "max_age": 35,
        "qualification": "12th Pass",
        "category": "All",
        "gender": "Female",
        "state": "Uttar Pradesh",
        "competition_level": "Low",
        "status": "Active",
        "deadline": "2027-05-20",
        "required_streams": ["Any"],
        "salary_range": "₹8,000 - ₹12,000",
        "apply_link": "https://balvikasup.gov.in"
    },
    {
        "id": "agniveer-gd",
        "job_name": "Army Agniveer GD",
        "min_age": 17,
        "max_age": 21,
        "qualification": "10th Pass",
        "category": "All",
        "gender": "Male",
        "state": "All India",
        "competition_level": "Medium",
        "status": "Active",
        "deadline": "2027-04-30",
        "required_streams": ["Any"],
        "salary_range": "₹30,000 - ₹40,000",
        "apply_link": "https://joinindianarmy.nic.in"
    },
    {
        "id": "isro-technician-b",
        "job_name": "ISRO Technician B",
        "min_age": 18,
        "max_age": 35,
        "qualification": "10th Pass",
        "category": "All",
        "gender": "All",
        "state": "All India",
        "competition_level": "Medium",
        "status": "Closed",
        "deadline": "2024-01-31",
        "required_streams": ["Any"],
        "salary_range": "₹21,700 - ₹69,100",
        "apply_link": "https://isro.gov.in"
    },
]


def seed_jobs() -> List[JobPosting]:
    """Build the sample catalog as postings"""
    return [JobPosting(**data) for data in SEED_JOBS]
