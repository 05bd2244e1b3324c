from backend.engine.gamerules.rules import move, successors

__all__ = ["move", "successors"]
