"""Attendance Dashboard package.

This package is organized by feature modules (periods, attendance, exports, ...)
with a thin Flask controller layer on top of pure resolver/filter/aggregator
functions and an HTTP-backed summary source.
"""
