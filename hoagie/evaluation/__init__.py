from hoagie.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
