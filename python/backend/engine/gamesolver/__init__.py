from backend.engine.gamesolver.solver import SearchCancelled, Solver, get_solution, search

__all__ = ["SearchCancelled", "Solver", "get_solution", "search"]
