"""Student Attendance package.

Organized by feature modules (students, attendance, users) with a thin Flask
controller layer on top of plain service/repository layers.
"""
