"""Static line-weight heuristic for qubic positions.

Used only at depth-0 leaves of the minimax search. Scores are from X's
point of view: positive favours X, negative favours O.

Each of the 76 lines contributes independently:

- held only by X: ``+line_weight(x_count)``
- held only by O: ``-line_weight(o_count)``
- mixed or empty: 0 (the line can no longer be won, or is neutral)

Weights grow by a factor of ten per stone so a single three-in-a-line
outweighs any plausible number of twos.
"""

from __future__ import annotations

from ..rules.lines import LINE_CATEGORIES, WIN_MASKS

WEIGHT_ONE_IN_LINE = 1
WEIGHT_TWO_IN_LINE = 10
WEIGHT_THREE_IN_LINE = 100

# index = stones in the line; four-in-a-line is terminal, never scored here
_WEIGHTS = (0, WEIGHT_ONE_IN_LINE, WEIGHT_TWO_IN_LINE, WEIGHT_THREE_IN_LINE, 0)


def line_weight(count: int) -> int:
    if 0 <= count < len(_WEIGHTS):
        return _WEIGHTS[count]
    return 0


def score_line(x_count: int, o_count: int) -> int:
    """Contribution of a single line with the given stone counts."""
    if x_count > 0 and o_count == 0:
        return line_weight(x_count)
    if o_count > 0 and x_count == 0:
        return -line_weight(o_count)
    return 0


def evaluate(x_mask: int, o_mask: int) -> int:
    score = 0
    for mask in WIN_MASKS:
        x_count = (x_mask & mask).bit_count()
        o_count = (o_mask & mask).bit_count()
        if x_count and not o_count:
            score += _WEIGHTS[x_count]
        elif o_count and not x_count:
            score -= _WEIGHTS[o_count]
    return score


def evaluation_breakdown(x_mask: int, o_mask: int) -> dict[str, int]:
    """Per line-category totals plus ``"total"`` (equal to :func:`evaluate`)."""
    breakdown: dict[str, int] = dict.fromkeys(LINE_CATEGORIES, 0)
    for category, mask in zip(LINE_CATEGORIES, WIN_MASKS):
        breakdown[category] += score_line(
            (x_mask & mask).bit_count(),
            (o_mask & mask).bit_count(),
        )
    breakdown["total"] = sum(breakdown.values())
    return breakdown
