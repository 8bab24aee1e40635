"""Work Tracker package.

Personal clock-in/clock-out tracker organized by feature modules
(worktime, ledger, clock) with a thin CLI and JSON API on top.
"""
