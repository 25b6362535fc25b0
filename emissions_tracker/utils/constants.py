"""
Application constants.
"""
from enum import Enum


class ConfigFile:
    """Configuration file names."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class ReferenceCategory:
    """Reference curve families found in the reference dataset."""
    POSEIDON_PRINCIPLES = "PP"
    EEDI = "EEDI"


class ReferenceCategoryEnum(str, Enum):
    """Reference category enum for API parameters."""
    PP = "PP"
    EEDI = "EEDI"


class CurveFamily:
    """Names of the registered baseline curve families."""
    CUBIC_YEAR_POWER_DWT = "cubic_year_power_dwt"
    REDUCTION_POWER_LAW = "reduction_power_law"


# Deadweight used when a vessel has none recorded
DEFAULT_DWT = 50000

# Emission quantities carried by each daily log record
EMISSION_QUANTITY_FIELDS = (
    "met_co2",
    "aet_co2",
    "bot_co2",
    "vrt_co2",
    "tot_co2",
    "mew_co2e",
    "aew_co2e",
    "bow_co2e",
    "vrw_co2e",
    "tot_w_co2e",
    "me_sox",
    "ae_sox",
    "bo_sox",
    "vr_sox",
    "tot_sox",
    "me_nox",
    "ae_nox",
    "tot_nox",
    "me_pm10",
    "ae_pm10",
    "tot_pm10",
    "aer_co2_t2w",
    "aer_co2e_w2w",
    "eeoi_co2e_w2w",
)

MONTHS_PER_QUARTER = 3
