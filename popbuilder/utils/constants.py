"""
Constants for age bands, request fields and cookies.
"""

# Base path of the application; empty selections and posted intro forms
# are redirected here
BASE_URL = "/"

# Age bands used by the download (detail) store
FIVE_YEAR_BANDS = [
    "0_4", "5_9", "10_14", "15_19", "20_24", "25_29", "30_34", "35_39",
    "40_44", "45_49", "50_54", "55_59", "60_64", "65_69", "70_74",
    "75_79", "80_84", "85_89", "90",
]

# Age bands used by the results (summary) store
TEN_YEAR_BANDS = [
    "0_9", "10_19", "20_29", "30_39", "40_49",
    "50_59", "60_69", "70_79", "80_89", "90",
]

# Pairs of five-year bands that make up each ten-year band
TEN_YEAR_BAND_PARTS = {
    "0_9": ("0_4", "5_9"),
    "10_19": ("10_14", "15_19"),
    "20_29": ("20_24", "25_29"),
    "30_39": ("30_34", "35_39"),
    "40_49": ("40_44", "45_49"),
    "50_59": ("50_54", "55_59"),
    "60_69": ("60_64", "65_69"),
    "70_79": ("70_74", "75_79"),
    "80_89": ("80_84", "85_89"),
    "90": ("90",),
}

# Labels shown on the population pyramid
TEN_YEAR_BAND_LABELS = [
    "0-9", "10-19", "20-29", "30-39", "40-49",
    "50-59", "60-69", "70-79", "80-89", "90+",
]

# Column order in the results store: males then females
SUMMARY_COLUMNS = (
    [f"m_{band}" for band in TEN_YEAR_BANDS] +
    [f"f_{band}" for band in TEN_YEAR_BANDS]
)

# Column order in the download store: persons, males, females
DETAIL_COLUMNS = (
    [f"p_{band}" for band in FIVE_YEAR_BANDS] +
    [f"m_{band}" for band in FIVE_YEAR_BANDS] +
    [f"f_{band}" for band in FIVE_YEAR_BANDS]
)

# Form fields
ZONES_FORM = "zones"
POSTED_FORM = "posted"
SKIP_FORM = "skipintro"
ZONE_SEPARATOR = ","

# Cookies
SEEN_COOKIE = "seen"
SKIP_COOKIE = "skip"
SEEN_COOKIE_SECONDS = 3600
SKIP_COOKIE_SECONDS = 31104000

# Download response
DOWNLOAD_FILENAME = "download.csv"
