"""
Solvers for the constant coefficient c.

- quadratic_fitter: mode B, three points via Cramer's rule
- root_factor: mode A, two roots plus one point
- engine: mode dispatch over loaded evidence documents
"""
