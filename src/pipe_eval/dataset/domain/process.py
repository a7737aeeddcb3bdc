"""PipefyProcess — the business-workflow taxonomy a dataset belongs to."""

from enum import StrEnum


class PipefyProcess(StrEnum):
    IT_HELPDESK = "IT Helpdesk"
    HR_ONBOARDING = "HR Onboarding"
    SALES_PIPELINE = "Sales Pipeline"
    ACCOUNTS_PAYABLE = "Accounts Payable"
