from backend.engine.gamesolver.canonical import key_of
from backend.engine.gamesolver.solver import Solver

__all__ = ["Solver", "key_of"]
