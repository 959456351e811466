"""Attendance Tracker package.

This package is organized by feature modules (attendance, storage) with a thin
text-menu controller layer on top of an in-memory store and a JSON file
repository.
"""
