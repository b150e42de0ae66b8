# This file marks the API package for the states and districts HTTP service.
# The application factory lives in `app.py` and the process entry point in `main.py`.
