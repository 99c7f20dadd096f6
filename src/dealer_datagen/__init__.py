"""
Dealer Data Generator

Synthetic dataset engine for a role-based dealership dashboard:
- Referentially consistent stores, employees, customers and vehicles
- Deals, service appointments, repair orders and orders built on top of them
- Role-specific KPI records and dataset-derived summaries
"""

__version__ = "1.0.0"
__author__ = "Dealer DataGen"
