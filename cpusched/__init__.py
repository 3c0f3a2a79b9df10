"""CPU scheduling simulators: Round Robin, FCFS with I/O, CFS and SJF with aging."""

__version__ = "0.1.0"

__all__ = ["cfs", "cli", "fcfs", "rbtree", "round_robin", "sjf"]