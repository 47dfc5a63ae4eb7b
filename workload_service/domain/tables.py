"""
Fixed lookup tables for synthetic user records.

Ordering is part of the output contract: record fields are picked by
``(index * multiplier) % len(table)``, so reordering any table changes every
generated dataset.
"""

from __future__ import annotations

from typing import Tuple

FIRST_NAMES: Tuple[str, ...] = (
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Barbara", "David", "Elizabeth", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Christopher", "Karen",
)

LAST_NAMES: Tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin",
)

CITIES: Tuple[str, ...] = (
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
    "Fort Worth", "Columbus", "Indianapolis", "Charlotte", "San Francisco", "Seattle",
    "Denver", "Washington",
)

STREETS: Tuple[str, ...] = (
    "Main Street", "Oak Avenue", "Maple Drive", "Cedar Lane", "Pine Road", "Elm Street",
    "Washington Boulevard", "Park Avenue", "Lake Drive", "Hill Street", "River Road",
    "Forest Lane", "Spring Street", "Valley Road", "Mountain View", "Sunset Boulevard",
    "Broadway", "First Avenue", "Second Street", "Third Avenue",
)

COMPANIES: Tuple[str, ...] = (
    "TechCorp", "GlobalSystems", "DataWorks", "CloudNine", "InnovateLabs", "FutureSync",
    "AlphaTech", "BetaSoft", "GammaIndustries", "DeltaSolutions", "EpsilonGroup",
    "ZetaDigital", "EtaTechnologies", "ThetaVentures", "IotaEnterprises",
)

DEPARTMENTS: Tuple[str, ...] = (
    "Engineering", "Sales", "Marketing", "Human Resources", "Finance", "Operations",
    "Customer Support", "Product Management", "Research and Development",
    "Quality Assurance", "Legal", "IT Support", "Business Development", "Accounting",
    "Administration",
)

POSITIONS: Tuple[str, ...] = (
    "Software Engineer", "Senior Developer", "Product Manager", "Sales Representative",
    "Marketing Specialist", "HR Manager", "Financial Analyst", "Operations Manager",
    "Support Specialist", "QA Engineer", "Team Lead", "Director", "Vice President",
    "Consultant", "Coordinator",
)

STATES: Tuple[str, ...] = (
    "CA", "NY", "TX", "FL", "PA", "IL", "OH", "GA", "NC", "MI", "NJ", "VA", "WA", "AZ",
    "MA", "TN", "IN", "MO", "MD", "WI",
)

TAGS: Tuple[str, ...] = (
    "VIP", "Premium", "Enterprise", "Verified", "Active", "Beta", "EarlyAdopter",
    "Ambassador", "Partner", "Influencer", "Champion", "Leader", "Expert", "Mentor",
    "Contributor",
)

LANGUAGES: Tuple[str, ...] = ("en", "es", "fr")


__all__ = [
    "FIRST_NAMES",
    "LAST_NAMES",
    "CITIES",
    "STREETS",
    "COMPANIES",
    "DEPARTMENTS",
    "POSITIONS",
    "STATES",
    "TAGS",
    "LANGUAGES",
]
