"""
Shared loading constants.

Values used by more than one calculation live here so that the weight
aggregator, the CoB solver and the validators always agree.
"""

# Passenger weight with gear (lb)
PAX_WEIGHT_LB = 225.0

# Passengers are modelled as one point load at the center of a fixed-length
# seating zone that starts PAX_ZONE_FRACTION of the way down the cargo floor.
PAX_ZONE_FRACTION = 0.4
PAX_SEATING_ZONE_SPAN_IN = 100.0

# 463L pallet footprint and the gap left between adjacent pallets (in)
PALLET_463L_LENGTH_IN = 108.0
PALLET_463L_WIDTH_IN = 88.0
PALLET_463L_SPACING_IN = 4.0

# Rolling stock takes roughly this much floor length per vehicle when sizing a lift (in)
VEHICLE_LENGTH_ESTIMATE_IN = 200.0
