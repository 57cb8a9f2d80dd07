"""OJT Attendance package.

Feature modules (attendance, sessions, reports, ...) sit behind a thin Flask
controller layer with service/repository layers underneath.
"""
