"""
Meal range estimation.

Validates parser output for free-text meal descriptions and aggregates
min/mid/max nutrient estimates into entry, daily and weekly summaries.

Structure:
- domain/: Range arithmetic, validation and aggregation (pure)
- application/: Command and query handlers over collaborator ports
- infrastructure/: Configuration, logging and adapters
"""

__version__ = "1.0.0"
