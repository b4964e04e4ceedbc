"""Frame-by-frame simulation of attackers, EMPs, defenders and mines on a base map."""

__all__ = [
    "attack",
    "attacker",
    "blocks",
    "defender",
    "defense",
    "emp",
    "frames",
    "mine",
    "simulator",
]