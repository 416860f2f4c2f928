"""
Copyright (c) 2020 Eduardo Bart
Distributed under the MIT software license, see the LICENSE file

Operand kinds and the promotion rules for mixed BigInt/native arithmetic
"""

import enum
import numbers
from typing import Optional


class Kind(enum.Enum):
    """Kind of an arithmetic operand"""

    BIGINT = "bigint"
    INTEGER = "integer"
    FLOAT = "float"


# Result kind of a binary operation, keyed by (left kind, right kind).
# Pairs without a BigInt belong to the host and are not listed.
PROMOTION = {
    (Kind.BIGINT, Kind.BIGINT): Kind.BIGINT,
    (Kind.BIGINT, Kind.INTEGER): Kind.BIGINT,
    (Kind.INTEGER, Kind.BIGINT): Kind.BIGINT,
    (Kind.BIGINT, Kind.FLOAT): Kind.FLOAT,
    (Kind.FLOAT, Kind.BIGINT): Kind.FLOAT,
}


def classify(x) -> Optional[Kind]:
    """Get the operand kind of a value, None if it takes no part in arithmetic"""
    from wideint.bigint import BigInt

    if isinstance(x, BigInt):
        return Kind.BIGINT
    if isinstance(x, numbers.Integral):
        return Kind.INTEGER
    if isinstance(x, numbers.Real):
        return Kind.FLOAT
    return None


def promote(x, y) -> Optional[Kind]:
    """
    Result kind of combining x and y

    Returns:
        Kind.BIGINT or Kind.FLOAT, or None when the pair is not supported
    """
    return PROMOTION.get((classify(x), classify(y)))
