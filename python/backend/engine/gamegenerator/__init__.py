from backend.engine.gamegenerator.generator import COLORS, GameGenerator

__all__ = ["COLORS", "GameGenerator"]
