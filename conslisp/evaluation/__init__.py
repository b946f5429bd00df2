from conslisp.evaluation.evaluator import evaluate, evaluate0
from conslisp.evaluation.apply import apply

__all__ = ["evaluate", "evaluate0", "apply"]
