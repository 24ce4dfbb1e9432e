"""WorkTime Tracker package.

Organized by feature modules (users, clock, reports) with a thin Flask
controller layer over service/repository layers.
"""
