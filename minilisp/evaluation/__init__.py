from minilisp.evaluation.evaluator import evaluate, eval_args, progn
from minilisp.evaluation.apply import apply

__all__ = ["evaluate", "eval_args", "progn", "apply"]
