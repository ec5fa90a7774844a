"""
Vacation Board backend.

Employee/department directory with Microsoft identity and Graph pass-through
endpoints for profiles, photos and vacation calendars.
"""
