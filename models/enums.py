"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("fcfs", not "SchedulingPolicy.FCFS")
- They work as FastAPI request body values and argparse choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingPolicy(str, enum.Enum):
    FCFS = "fcfs"                # First Come First Served — run to completion in load order
    ROUND_ROBIN = "round_robin"  # Round Robin — one time unit each, in rotation
