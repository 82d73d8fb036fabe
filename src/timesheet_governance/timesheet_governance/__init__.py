"""Timesheet governance package.

Feature modules (worklog, occurrences, employees, punches, ...) sit on top of a
pure worklog calculator, with a thin Flask controller layer and service/repository
layers around it.
"""
