"""
Distance Estimation

Great-circle distance when both addresses carry coordinates, otherwise a
region-level estimate from postal codes.

TWO-TIER ESTIMATE
-----------------
1. Same region             -> SAME_REGION_MI
2. Different regions       -> region_distances.csv (unordered pair),
                              DEFAULT_INTER_REGION_MI if the pair is absent
"""

EARTH_RADIUS_MI = 3959

SAME_REGION_MI = 200
DEFAULT_INTER_REGION_MI = 500

UNKNOWN_ZONE = "UNKNOWN"
POSTAL_FALLBACK_LENGTH = 3          # Leading postal characters used as a zone
