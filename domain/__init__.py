"""
Domain layer - Pure business logic without infrastructure dependencies.

This package contains domain models and value objects for the gym:
class offerings, trainers, subscriptions, money and intensity tiers.
"""
