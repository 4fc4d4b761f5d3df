"""
Utility functions module.

Date handling for daily bar sequences:
- Bar dates are calendar dates in ISO format (YYYY-MM-DD)
- Trading days are weekdays; exchange holidays are not modelled
"""
