"""
Constants for the distance/payroll core
"""

SERVICE_NAME = "fieldops-backend"

# Haversine sphere radius and rounding precision of every stored distance/amount
EARTH_RADIUS_KM = 6371.0
DECIMAL_PLACES = 2
