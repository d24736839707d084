from rscheme.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
