"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MONTHS_PER_YEAR = 12

# Initial CTC split (share of monthly gross). Earnings + employer PF = 1.00.
BASIC_SHARE = 0.50
HRA_SHARE = 0.20
ALLOWANCE_SHARE = 0.18
EMPLOYER_PF_SHARE = 0.12

# Deductions derived from Basic.
PF_SHARE_OF_BASIC = 0.12
INSURANCE_SHARE_OF_BASIC = 0.01
PROFESSIONAL_TAX = 200

# Annual units below which a lock-CTC difference counts as reconciled.
LOCK_CTC_TOLERANCE = 10
# Warn when CTC and component total differ by more than this share of CTC.
CTC_MISMATCH_THRESHOLD = 0.02

DEFAULT_PERCENT_OF = "Basic"
DEFAULT_EARNINGS = ("Basic Salary", "HRA", "Allowance")
DEFAULT_DEDUCTIONS = ("Provident Fund", "Insurance", "Professional Tax")
DEFAULT_EMPLOYER_CONTRIBUTIONS = ("Employer PF",)

COMPANY_EMAIL_DOMAIN = "employee.com"

DEFAULT_API_TIMEOUT = 10
PAYSLIP_MIN_YEAR = 2000
PAYSLIP_MAX_YEAR = 2100

# Attendance CSV upload.
ATTENDANCE_UPLOAD_FIELD = "payrollFile"
DEFAULT_CSV_DELIMITER = ","
