"""
HackHub backend.

FastAPI application for running hackathons and club events: event
management, team registration, judge and organiser assignment, team
proposals with an approval workflow, and persisted application logs.
"""

__version__ = "1.0.0"
