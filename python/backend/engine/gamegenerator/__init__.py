from backend.engine.gamegenerator.generator import CubeGenerator

__all__ = ["CubeGenerator"]
