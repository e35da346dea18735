from slidecore.models.grid import Grid, Placement, Position, blank_identity, deal

__all__ = ["Grid", "Placement", "Position", "blank_identity", "deal"]
