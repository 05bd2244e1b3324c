from backend.engine.progress.progress import GREAT_THRESHOLD, Progress, compute_progress

__all__ = ["GREAT_THRESHOLD", "Progress", "compute_progress"]
