from tilepuzzle.engine.puzzlegenerator.generator import PuzzleGenerator

__all__ = ["PuzzleGenerator"]
