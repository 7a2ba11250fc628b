"""
Region Catalogue

Flood-prone Indian regions offered in the input form. The region is shown
alongside a result for context and is never used in scoring.
"""

REGIONS = (
    "Mumbai, Maharashtra",
    "Chennai, Tamil Nadu",
    "Kolkata, West Bengal",
    "Assam",
    "Bihar",
    "Kerala",
    "Odisha",
    "Uttarakhand",
    "Gujarat",
    "Andhra Pradesh",
)


def is_known_region(region: str) -> bool:
    return region in REGIONS
