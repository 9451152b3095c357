"""
Services - pricing, reporting, text rendering and the gym application facade.

Submodules are imported directly (``from services.pricing import ...``);
nothing is re-exported here so the repositories can depend on the pricing
module without pulling in the facade.
"""
