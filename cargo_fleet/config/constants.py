"""
Core constants for the cargo fleet model.

Safety ratios for each container variant, unit conversions,
reefer product temperatures and the demonstration voyage set-up.
"""

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------
KG_PER_TONNE = 1000.0


def kg_to_tonnes(kg: float) -> float:
    """Convert kilograms to metric tonnes."""
    return kg / KG_PER_TONNE


# ---------------------------------------------------------------------------
# Loading safety ratios (fraction of max_load_weight that may be filled)
# ---------------------------------------------------------------------------
LIQUID_DANGEROUS_FILL_RATIO = 0.5   # hazardous liquids: half capacity
LIQUID_ORDINARY_FILL_RATIO = 0.9    # ordinary liquids: 90% capacity
GAS_FILL_RATIO = 1.0                # gas: full rated capacity

# Share of the cargo a gas container keeps after being drained
GAS_RESIDUE_RATIO = 0.05

# ---------------------------------------------------------------------------
# Reefer products -> minimum holding temperature (°C)
# A reefer may never be set colder than its product's required temperature.
# ---------------------------------------------------------------------------
PRODUCT_TEMPERATURES = {
    "Bananas":        13.3,
    "Chocolate":      18.0,
    "Fish":            2.0,
    "Meat":           -15.0,
    "Ice cream":      -18.0,
    "Frozen pizza":   -30.0,
    "Cheese":          7.2,
    "Sausages":        5.0,
    "Butter":         20.5,
    "Eggs":           19.0,
}

# ---------------------------------------------------------------------------
# Demonstration voyage - one ship and four containers
# ---------------------------------------------------------------------------
DEMO_SHIP = {
    "name": "Statek 1",
    "speed": 10.0,           # knots
    "max_container_num": 3,
    "max_weight": 40.0,      # tonnes
}

DEMO_CONTAINERS = {
    "KON-C-1": {
        "kind": "LIQUID",
        "container_weight": 1000, "max_load_weight": 5000,
        "height": 200, "depth": 100,
        "dangerous_cargo": False,
    },
    "KON-C-2": {
        "kind": "LIQUID",
        "container_weight": 1200, "max_load_weight": 6000,
        "height": 220, "depth": 120,
        "dangerous_cargo": True,
    },
    "KON-C-3": {
        "kind": "GAS",
        "container_weight": 800, "max_load_weight": 4000,
        "height": 180, "depth": 90,
        "pressure": 2.0,
    },
    "KON-C-4": {
        "kind": "REEFER",
        "container_weight": 1500, "max_load_weight": 3000,
        "height": 200, "depth": 120,
        "product_type": "Bananas",
        "required_temp": 13.3,
        "current_temp": 15.0,
    },
}
