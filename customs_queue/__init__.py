"""Customs hall queue simulation.

A fixed number of customs agents each work through a private FIFO line of
traveler groups. After every line is drained we report:
- total payroll cost for all agents (with overtime past 8 hours)
- average wait time over all groups
- maximum wait time over all groups

See `customs_queue.app` for the command line entrypoint.
"""
