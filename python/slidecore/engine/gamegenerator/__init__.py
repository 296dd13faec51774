from slidecore.engine.gamegenerator.generator import BoardGenerator

__all__ = ["BoardGenerator"]
