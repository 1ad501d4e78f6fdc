"""
Salary records embedded in the application.

These back the ``literal`` record source, which is the default when no
data file is configured.  Treat the list as read‑only; the literal
source hands out copies.
"""

SAMPLE_RECORDS = [
    {"work_year": 2020, "job_title": "Data Scientist", "salary": 79833},
    {"work_year": 2020, "job_title": "Machine Learning Engineer", "salary": 150000},
    {"work_year": 2020, "job_title": "Data Analyst", "salary": 72000},
    {"work_year": 2020, "job_title": "Data Scientist", "salary": 35735},
    {"work_year": 2021, "job_title": "Data Engineer", "salary": 110000},
    {"work_year": 2021, "job_title": "Data Scientist", "salary": 135000},
    {"work_year": 2021, "job_title": "Research Scientist", "salary": 187442},
    {"work_year": 2021, "job_title": "Data Analyst", "salary": 80000},
    {"work_year": 2021, "job_title": "Data Engineer", "salary": 98000},
    {"work_year": 2022, "job_title": "Data Engineer", "salary": 165400},
    {"work_year": 2022, "job_title": "Data Scientist", "salary": 141300},
    {"work_year": 2022, "job_title": "Data Analyst", "salary": 120000},
    {"work_year": 2022, "job_title": "Analytics Engineer", "salary": 175000},
    {"work_year": 2022, "job_title": "Data Scientist", "salary": 205300},
    {"work_year": 2022, "job_title": "Machine Learning Engineer", "salary": 189650},
    {"work_year": 2023, "job_title": "Data Engineer", "salary": 175100},
    {"work_year": 2023, "job_title": "Applied Scientist", "salary": 222200},
    {"work_year": 2023, "job_title": "Data Scientist", "salary": 156400},
    {"work_year": 2023, "job_title": "Data Analyst", "salary": 105380},
    {"work_year": 2023, "job_title": "Data Engineer", "salary": 146000},
    {"work_year": 2023, "job_title": "Machine Learning Engineer", "salary": 204620},
    {"work_year": 2023, "job_title": "Data Architect", "salary": 190000},
]
