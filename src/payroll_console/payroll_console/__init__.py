"""Payroll Console package.

HR/payroll admin front end organized by feature modules (salary, onboarding,
employees, payslips, ...) with a thin Flask controller layer over services
that talk to the payroll backend through a REST client.
"""
