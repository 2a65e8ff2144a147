from backend.engine.generator.generator import GameGenerator

__all__ = ["GameGenerator"]
