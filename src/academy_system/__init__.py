"""Academy System package.

This package is organized by feature modules (schedules, attendance, evaluations, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
