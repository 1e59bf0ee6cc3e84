from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .walker import (
    MatcherProtocol,
    TranscriberProtocol,
    TraversalProtocol,
    Visitor,
    WalkAction,
)

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MatcherProtocol',
    'TranscriberProtocol',
    'TraversalProtocol',
    'Visitor',
    'WalkAction',
]
