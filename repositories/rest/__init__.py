from .onesignal import RestOneSignalRepository
from .push import RestPushRepository
from .realtime import RestBroadcastRepository
from .util import StaticTokenProvider, TokenProvider

__all__ = [
    'TokenProvider',
    'StaticTokenProvider',
    'RestOneSignalRepository',
    'RestPushRepository',
    'RestBroadcastRepository',
]
