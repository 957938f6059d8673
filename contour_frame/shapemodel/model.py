"""
Sequential multinomial model of a quantized contour.

The contour is quantized into one symbol per position. Position i has its
own ConditionalDistribution keyed by the symbol at position i - 1, so the
model scores the whole symbol chain:

    log P(s) = sum_i log P_i(s_i | s_{i-1}),   s_{-1} = START_SYMBOL

A transition the model never saw makes the contour impossible. The running
total is then replaced by LOG_ZERO, and later seen transitions keep being
added to it.
"""

import math
import sys
from typing import Dict, Mapping, Sequence, Tuple

from .contour import Contour
from .distribution import ConditionalDistribution, START_SYMBOL
from .quantizer import ContourQuantizer
from ..core.errors import ModelMismatchError

# Stand-in for log(0)
LOG_ZERO = -sys.float_info.max


class QuantizedContourModel:
    """
    Score contours against per-position conditional distributions.

    Example:
        model = QuantizedContourModel(quantizer, [dist_0, dist_1, dist_2])
        log_p = model.evaluate(contour)
    """

    def __init__(self, quantizer: ContourQuantizer, time_models: Sequence[ConditionalDistribution]):
        self.quantizer = quantizer
        self.time_models = list(time_models)

    def evaluate(self, contour: Contour) -> float:
        """
        Log likelihood that this model generated `contour`.

        Raises:
            QuantizationError: if the contour cannot be quantized
            ModelMismatchError: if the quantizer yields the wrong length
        """
        quantized = self.quantizer.quantize(contour)

        if len(quantized) != len(self.time_models):
            raise ModelMismatchError(context={
                'symbols': len(quantized),
                'positions': len(self.time_models),
            })

        log_p = 0.0
        prev_value = START_SYMBOL
        for symbol, time_model in zip(quantized, self.time_models):
            value = str(symbol)
            p = time_model.lookup(prev_value, value)
            if p is not None:
                log_p += math.log(p)
            else:
                log_p = LOG_ZERO
            prev_value = value

        return log_p

    evaluate_contour = evaluate

    def __len__(self) -> int:
        return len(self.time_models)


def score_models(models: Mapping[str, QuantizedContourModel], contour: Contour) -> Dict[str, float]:
    """Log likelihood of `contour` under each named model."""
    return {name: model.evaluate(contour) for name, model in models.items()}


def best_model(models: Mapping[str, QuantizedContourModel], contour: Contour) -> Tuple[str, float]:
    """
    Name and score of the most likely model.

    Ties go to the model listed first.
    """
    if not models:
        raise ValueError("No models to rank")

    scores = score_models(models, contour)
    best_name = None
    best_score = None
    for name, score in scores.items():
        if best_score is None or score > best_score:
            best_name, best_score = name, score
    return best_name, best_score
