"""SalaryBox HR package.

This package is organized by feature modules (employees, attendance, leaves,
payroll, ...) with a thin Flask controller layer, an async data-services facade
and service/repository layers backed by in-memory mock stores.
"""
