"""Attendance Payroll package.

This package is organized by feature modules (employees, attendance, penalties,
leaves, payroll) with SOLID service/repository layers around a pure
resolution and aggregation core.
"""
