"""Employee Records package.

Organized by feature modules (employees, ...) with a thin Flask controller
layer on top of service/repository layers.
"""
