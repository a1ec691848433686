from .checkpoint import CheckpointStore
from .reporter import ConsoleReporter

__all__ = ['CheckpointStore', 'ConsoleReporter']
