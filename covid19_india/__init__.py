"""
Package marker for the COVID-19 India states and districts service.
It groups the API, shared helpers, and storage bootstrap modules under one import path.
Most functionality lives in the subpackages; this file intentionally stays lightweight.
"""
