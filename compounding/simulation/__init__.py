from .projection import Sample, ProjectionResult, project, step_month, monthly_rate, round_currency
from .tax import ASK_TAX_RATE, TaxConfig, TaxResult, apply_tax
from .milestones import MILESTONE_THRESHOLDS, Milestone, scan_milestones, format_duration
from .profiles import PROFILES, ProfileId, Profile, get_profile, get_all_profiles
from .comparison import compare_delays, compare_fund_vs_account, project_retirement, effective_rate
from .calculator import CalculatorParameters, CalculatorResults, CompoundCalculator
