"""Student timetables with enrolment requests, and flight network route planning."""

__version__ = "0.1.0"