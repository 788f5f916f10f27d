from tilepuzzle.engine.puzzlestate.state import State

__all__ = ["State"]
